"""Proxy configuration entity."""

import os
from dataclasses import dataclass

DEFAULT_KEY_HEADERS = ("authorization", "x-hasura-admin-secret")


@dataclass
class ProxyConfig:
    """Proxy configuration.

    Provides the origin location, the TTL policy applied to
    ``@cached`` operations and the names of the headers the proxy
    reads and writes.

    TTL policy:
        An operation's ``@cached(ttl: N)`` is clamped to ``max_ttl``.
        Operations annotated without a ttl use ``default_ttl``.

    Key headers:
        Only the headers listed in ``key_headers`` take part in the
        cache key. Everything else the client sends is ignored.
    """

    origin_url: str = "http://localhost:4000/graphql"
    default_ttl: int = 5
    max_ttl: int = 300
    key_headers: tuple[str, ...] = DEFAULT_KEY_HEADERS

    # Query directive that opts an operation into caching
    directive_name: str = "cached"

    # Diagnostic response headers
    cache_status_header: str = "x-query-cache"
    cache_key_header: str = "x-query-cache-key"

    # Path segment used to build cache store keys under the origin URL
    cache_path: str = "__cached"

    def __post_init__(self) -> None:
        """Normalize header names and validate TTLs."""
        if self.default_ttl < 0:
            raise ValueError(f"default_ttl must be >= 0, got {self.default_ttl}")
        if self.max_ttl < 0:
            raise ValueError(f"max_ttl must be >= 0, got {self.max_ttl}")
        self.key_headers = tuple(name.strip().lower() for name in self.key_headers)

    @classmethod
    def from_env(cls) -> "ProxyConfig":
        """Build a configuration from environment variables.

        Reads ``ORIGIN``, ``CACHEDQL_DEFAULT_TTL``, ``CACHEDQL_MAX_TTL``
        and ``CACHEDQL_KEY_HEADERS`` (comma separated). Unset variables
        keep their defaults.

        Returns:
            A new ProxyConfig instance.
        """
        defaults = cls()
        key_headers = os.getenv("CACHEDQL_KEY_HEADERS")
        return cls(
            origin_url=os.getenv("ORIGIN", defaults.origin_url),
            default_ttl=int(os.getenv("CACHEDQL_DEFAULT_TTL", defaults.default_ttl)),
            max_ttl=int(os.getenv("CACHEDQL_MAX_TTL", defaults.max_ttl)),
            key_headers=(
                tuple(name for name in key_headers.split(",") if name.strip())
                if key_headers is not None
                else defaults.key_headers
            ),
        )

"""Cache policy entity.

Turns the TTL requested by an operation's directive into the
``s-maxage`` advertised to the cache store.
"""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class CachePolicy:
    """Effective shared-cache lifetime for a response."""

    s_maxage: int

    @property
    def ttl(self) -> timedelta:
        """Get the lifetime as a timedelta."""
        return timedelta(seconds=self.s_maxage)

    def to_http_header(self) -> str:
        """Generate the Cache-Control header value."""
        return f"s-maxage={self.s_maxage}"

    @classmethod
    def from_directive(
        cls,
        ttl: int | None,
        default_ttl: int,
        max_ttl: int,
    ) -> "CachePolicy":
        """Create a policy from the directive's TTL argument.

        Uses the default when no TTL was given and clamps the result
        to ``[0, max_ttl]``.

        Args:
            ttl: The ttl value from the directive, or None.
            default_ttl: TTL used when the directive has no ttl.
            max_ttl: Upper bound for the effective TTL.

        Returns:
            A new CachePolicy instance.
        """
        requested = default_ttl if ttl is None else ttl
        return cls(s_maxage=max(0, min(requested, max_ttl)))

"""Transport-neutral request and response value objects."""

from collections.abc import Iterable
from dataclasses import dataclass

Header = tuple[str, str]


def _find_header(headers: tuple[Header, ...], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers:
        if key.lower() == lowered:
            return value
    return None


@dataclass(frozen=True)
class ProxyRequest:
    """Inbound request as received by the proxy.

    Headers are kept as ordered pairs so that repeated headers
    survive forwarding unchanged.
    """

    body: bytes
    headers: tuple[Header, ...] = ()

    def header(self, name: str, default: str | None = None) -> str | None:
        """Get the first value of a header (case-insensitive)."""
        value = _find_header(self.headers, name)
        return default if value is None else value

    def select_headers(self, names: Iterable[str]) -> dict[str, str]:
        """Pick the values of the named headers.

        Missing headers map to "" so that only a differing value, not the
        header's absence, changes a cache key.

        Args:
            names: Lowercase header names to include.

        Returns:
            Mapping of header name to value.
        """
        return {name: self.header(name) or "" for name in names}


@dataclass(frozen=True)
class ProxyResponse:
    """Response returned by the origin or served from the cache."""

    status: int
    headers: tuple[Header, ...] = ()
    body: bytes = b""

    def header(self, name: str, default: str | None = None) -> str | None:
        """Get the first value of a header (case-insensitive)."""
        value = _find_header(self.headers, name)
        return default if value is None else value

    def header_values(self, name: str) -> list[str]:
        """Get every value of a header (case-insensitive)."""
        lowered = name.lower()
        return [value for key, value in self.headers if key.lower() == lowered]

    def with_headers(self, *headers: Header) -> "ProxyResponse":
        """Return a copy with the given headers appended.

        Existing headers are never replaced.

        Args:
            *headers: (name, value) pairs to append.

        Returns:
            A new ProxyResponse.
        """
        return ProxyResponse(
            status=self.status,
            headers=self.headers + tuple(headers),
            body=self.body,
        )

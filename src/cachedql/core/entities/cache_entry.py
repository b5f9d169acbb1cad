"""Cache entry entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from cachedql.core.entities.http import ProxyResponse


@dataclass(frozen=True)
class CachedEntry:
    """Immutable cached response.

    Holds the origin response exactly as it was stored, including the
    Cache-Control header advertised at store time.
    """

    key: str
    response: ProxyResponse
    created_at: datetime
    ttl: timedelta | None = None

    @property
    def expires_at(self) -> datetime | None:
        """Calculate expiration time.

        Returns:
            The datetime when this entry expires, or None if no TTL.
        """
        if self.ttl is None:
            return None
        return self.created_at + self.ttl

    @property
    def is_expired(self) -> bool:
        """Check if entry has expired."""
        if self.expires_at is None:
            return False
        return datetime.now(timezone.utc) > self.expires_at

    @classmethod
    def create(
        cls,
        key: str,
        response: ProxyResponse,
        ttl: timedelta | None = None,
    ) -> "CachedEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache store key.
            response: The response to cache.
            ttl: Optional time-to-live.

        Returns:
            A new CachedEntry instance.
        """
        return cls(
            key=key,
            response=response,
            created_at=datetime.now(timezone.utc),
            ttl=ttl,
        )

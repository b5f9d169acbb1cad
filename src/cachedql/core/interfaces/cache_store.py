"""Cache store interface."""

from datetime import timedelta
from typing import Protocol


class ICacheStore(Protocol):
    """Contract for cache storage backends.

    The proxy only performs point reads and writes keyed by
    fingerprint. Expiry is owned by the store. Implementations raise
    CacheStoreUnavailable when the underlying storage fails.
    """

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        ...

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses the store default.
        """
        ...

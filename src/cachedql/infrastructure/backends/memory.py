"""In-memory cache store implementation."""

import time
from collections.abc import Callable
from datetime import timedelta
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]


class _StoredValue(NamedTuple):
    data: bytes
    ttl: float


def _time_to_use(_key: str, value: _StoredValue, now: float) -> float:
    return now + value.ttl


class InMemoryCacheStore:
    """In-memory cache store using LRU with per-entry TTL.

    Suitable for single-process deployments. Uses cachetools'
    TLRUCache so that every entry expires after the TTL it was
    stored with.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float = 300.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache store.

        Args:
            maxsize: Maximum number of items in the cache.
            default_ttl: TTL in seconds for items stored without one.
            timer: Clock used for expiry.
        """
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, _StoredValue] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        stored = self._cache.get(key)
        return stored.data if stored is not None else None

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        A zero TTL is accepted and expires immediately.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses the default.
        """
        seconds = ttl.total_seconds() if ttl is not None else self._default_ttl
        self._cache[key] = _StoredValue(data=value, ttl=seconds)

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        return len(self._cache)

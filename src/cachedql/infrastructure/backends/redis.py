"""Redis cache store implementation."""

from datetime import timedelta

import redis.asyncio as redis
from redis.exceptions import RedisError

from cachedql.core.exceptions import CacheStoreUnavailable


class RedisCacheStore:
    """Redis cache store for distributed deployments.

    Entries are written with SETEX so that Redis enforces the TTL
    advertised by the proxy.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "cachedql",
        default_ttl: int = 300,
        client: "redis.Redis | None" = None,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_url: Redis connection URL.
            key_prefix: Prefix for all cache keys.
            default_ttl: TTL in seconds for items stored without one.
            client: Optional pre-built Redis client.
        """
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Raises:
            CacheStoreUnavailable: If Redis cannot be reached.
        """
        try:
            return await self._redis.get(self._prefixed_key(key))
        except RedisError as e:
            raise CacheStoreUnavailable(f"Redis lookup failed: {e}") from e

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        Values with a TTL below one second are not written, since they
        would already be stale.

        Raises:
            CacheStoreUnavailable: If Redis cannot be reached.
        """
        seconds = int(ttl.total_seconds()) if ttl is not None else self._default_ttl
        if seconds <= 0:
            return

        try:
            await self._redis.setex(self._prefixed_key(key), seconds, value)
        except RedisError as e:
            raise CacheStoreUnavailable(f"Redis write failed: {e}") from e

    def _prefixed_key(self, key: str) -> str:
        """Add prefix to key if not already present."""
        if key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheStore":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()

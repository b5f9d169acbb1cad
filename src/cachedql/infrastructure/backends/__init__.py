"""Cache store implementations.

RedisCacheStore lives in ``cachedql.infrastructure.backends.redis`` and
requires the ``redis`` extra.
"""

from cachedql.infrastructure.backends.memory import InMemoryCacheStore

__all__ = ["InMemoryCacheStore"]

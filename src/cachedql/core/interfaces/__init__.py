"""Core interfaces (Protocol classes) for cachedql."""

from cachedql.core.interfaces.cache_store import ICacheStore
from cachedql.core.interfaces.key_builder import IKeyBuilder
from cachedql.core.interfaces.origin_client import IOriginClient
from cachedql.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheStore",
    "IKeyBuilder",
    "IOriginClient",
    "ISerializer",
]

"""Infrastructure layer implementations for cachedql."""

from cachedql.infrastructure.backends import InMemoryCacheStore
from cachedql.infrastructure.key_builders import FingerprintKeyBuilder
from cachedql.infrastructure.origin import HttpxOriginClient
from cachedql.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryCacheStore",
    "FingerprintKeyBuilder",
    "HttpxOriginClient",
    "JsonSerializer",
]

"""Core domain layer for cachedql."""

from cachedql.core.entities import (
    CachedEntry,
    CachePolicy,
    OperationRecord,
    ProxyConfig,
    ProxyRequest,
    ProxyResponse,
)
from cachedql.core.interfaces import (
    ICacheStore,
    IKeyBuilder,
    IOriginClient,
    ISerializer,
)
from cachedql.core.services import CacheProxyService, QueryAnalyzer

__all__ = [
    # Entities
    "CachedEntry",
    "CachePolicy",
    "OperationRecord",
    "ProxyConfig",
    "ProxyRequest",
    "ProxyResponse",
    # Interfaces
    "ICacheStore",
    "IKeyBuilder",
    "IOriginClient",
    "ISerializer",
    # Services
    "CacheProxyService",
    "QueryAnalyzer",
]

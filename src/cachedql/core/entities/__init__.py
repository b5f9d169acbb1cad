"""Domain entities for cachedql."""

from cachedql.core.entities.cache_entry import CachedEntry
from cachedql.core.entities.cache_policy import CachePolicy
from cachedql.core.entities.graphql_request import GraphQLRequest
from cachedql.core.entities.http import ProxyRequest, ProxyResponse
from cachedql.core.entities.operation import CacheDirectiveIndex, OperationRecord
from cachedql.core.entities.proxy_config import ProxyConfig

__all__ = [
    "CachedEntry",
    "CachePolicy",
    "CacheDirectiveIndex",
    "GraphQLRequest",
    "OperationRecord",
    "ProxyConfig",
    "ProxyRequest",
    "ProxyResponse",
]

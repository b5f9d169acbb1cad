"""cachedql - Directive-driven caching proxy for GraphQL APIs.

Sits in front of a GraphQL origin and caches the responses of operations
that opt in with an ``@cached`` directive:

    query getUser @cached(ttl: 300) {
      user { id name }
    }

Every other operation is forwarded to the origin untouched. Cache keys
are a SHA-256 fingerprint of the operation's printed AST, its variables
and the ``Authorization`` / ``x-hasura-admin-secret`` headers, so
requests from different callers never share an entry.

Example:
    from cachedql import ProxyConfig
    from cachedql.adapters.fastapi import create_app

    app = create_app(
        ProxyConfig(
            origin_url="https://api.example.com/graphql",
            default_ttl=5,
            max_ttl=300,
        )
    )

Using the service directly:
    from cachedql import (
        CacheProxyService,
        FingerprintKeyBuilder,
        HttpxOriginClient,
        InMemoryCacheStore,
        JsonSerializer,
        ProxyRequest,
    )

    service = CacheProxyService(
        cache_store=InMemoryCacheStore(),
        origin_client=HttpxOriginClient("https://api.example.com/graphql"),
        key_builder=FingerprintKeyBuilder(),
        serializer=JsonSerializer(),
    )
    response = await service.handle(ProxyRequest(body=body, headers=headers))
"""

from cachedql.core.entities import (
    CacheDirectiveIndex,
    CachedEntry,
    CachePolicy,
    GraphQLRequest,
    OperationRecord,
    ProxyConfig,
    ProxyRequest,
    ProxyResponse,
)
from cachedql.core.exceptions import (
    CachedQLError,
    CacheStoreUnavailable,
    MalformedRequestBody,
    OriginUnreachable,
    QueryParseError,
    SerializationError,
)
from cachedql.core.interfaces import (
    ICacheStore,
    IKeyBuilder,
    IOriginClient,
    ISerializer,
)
from cachedql.core.services import (
    CACHED_DIRECTIVE,
    CacheProxyService,
    QueryAnalyzer,
    analyze,
)
from cachedql.infrastructure import (
    FingerprintKeyBuilder,
    HttpxOriginClient,
    InMemoryCacheStore,
    JsonSerializer,
)
from cachedql.infrastructure.key_builders import derive_key

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheDirectiveIndex",
    "CachedEntry",
    "CachePolicy",
    "GraphQLRequest",
    "OperationRecord",
    "ProxyConfig",
    "ProxyRequest",
    "ProxyResponse",
    # Errors
    "CachedQLError",
    "CacheStoreUnavailable",
    "MalformedRequestBody",
    "OriginUnreachable",
    "QueryParseError",
    "SerializationError",
    # Directive analysis
    "QueryAnalyzer",
    "CACHED_DIRECTIVE",
    "analyze",
    # Key derivation
    "derive_key",
    # Core interfaces
    "ICacheStore",
    "IKeyBuilder",
    "IOriginClient",
    "ISerializer",
    # Core services
    "CacheProxyService",
    # Infrastructure implementations
    "InMemoryCacheStore",
    "FingerprintKeyBuilder",
    "HttpxOriginClient",
    "JsonSerializer",
]

"""Proxy service - orchestrates the request lifecycle.

For every request:

1. Decode the GraphQL body.
2. Index the operations of the query that carry ``@cached``.
3. If the operation being executed is not in the index, forward the
   request untouched.
4. Otherwise derive the fingerprint, answer from the cache store on a
   hit, or forward, store and answer on a miss.

Cache store failures never fail a request: a failed lookup is a miss
and a failed write is logged and ignored.
"""

import json
import logging

from cachedql.core.entities.cache_entry import CachedEntry
from cachedql.core.entities.cache_policy import CachePolicy
from cachedql.core.entities.graphql_request import GraphQLRequest
from cachedql.core.entities.http import ProxyRequest, ProxyResponse
from cachedql.core.entities.operation import OperationRecord
from cachedql.core.entities.proxy_config import ProxyConfig
from cachedql.core.exceptions import (
    CacheStoreUnavailable,
    MalformedRequestBody,
    QueryParseError,
    SerializationError,
)
from cachedql.core.interfaces.cache_store import ICacheStore
from cachedql.core.interfaces.key_builder import IKeyBuilder
from cachedql.core.interfaces.origin_client import IOriginClient
from cachedql.core.interfaces.serializer import ISerializer
from cachedql.core.services.query_analyzer import QueryAnalyzer

logger = logging.getLogger(__name__)

CACHE_HIT = "HIT"
CACHE_MISS = "MISS"


class CacheProxyService:
    """Domain service implementing the caching proxy.

    Holds only configuration and injected collaborators, so a single
    instance can serve concurrent requests.
    """

    def __init__(
        self,
        cache_store: ICacheStore,
        origin_client: IOriginClient,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        config: ProxyConfig | None = None,
        analyzer: QueryAnalyzer | None = None,
    ) -> None:
        """Initialize the proxy service.

        Args:
            cache_store: Store holding cached responses.
            origin_client: Client forwarding requests to the origin.
            key_builder: Builder for cache fingerprints.
            serializer: Serializer for cache entries.
            config: Optional proxy configuration. Uses defaults if not provided.
            analyzer: Optional query analyzer. Built from config if not provided.
        """
        self._cache_store = cache_store
        self._origin_client = origin_client
        self._key_builder = key_builder
        self._serializer = serializer
        self._config = config or ProxyConfig()
        self._analyzer = analyzer or QueryAnalyzer(self._config.directive_name)

    @property
    def config(self) -> ProxyConfig:
        """Get the proxy configuration."""
        return self._config

    async def handle(self, request: ProxyRequest) -> ProxyResponse:
        """Serve one proxied request.

        Args:
            request: The inbound request.

        Returns:
            The response to send to the client.

        Raises:
            OriginUnreachable: If the origin has to be contacted and
                cannot be reached.
        """
        try:
            gql_request = GraphQLRequest.from_body(request.body)
        except MalformedRequestBody as e:
            logger.debug("Rejecting malformed request: %s", e)
            return self._client_error(str(e))

        operation = self._select_operation(gql_request)
        if operation is None:
            return await self._origin_client.forward(request)

        fingerprint = self.derive_fingerprint(request, gql_request, operation)
        store_key = self.store_key(fingerprint)

        cached = await self._lookup(store_key)
        if cached is not None:
            logger.debug("HIT %s (%s)", gql_request.operation_name, fingerprint)
            return self._annotate(cached.response, CACHE_HIT, fingerprint)

        logger.debug("MISS %s (%s)", gql_request.operation_name, fingerprint)
        origin_response = await self._origin_client.forward(request)

        policy = CachePolicy.from_directive(
            ttl=operation.ttl,
            default_ttl=self._config.default_ttl,
            max_ttl=self._config.max_ttl,
        )
        response = origin_response.with_headers(
            ("Cache-Control", policy.to_http_header())
        )
        await self._store(store_key, response, policy)

        return self._annotate(response, CACHE_MISS, fingerprint)

    def derive_fingerprint(
        self,
        request: ProxyRequest,
        gql_request: GraphQLRequest,
        operation: OperationRecord,
    ) -> str:
        """Derive the cache fingerprint for a cacheable request."""
        return self._key_builder.build(
            operation_name=gql_request.operation_name,
            query=operation.canonical_text,
            variables=gql_request.variables,
            headers=request.select_headers(self._config.key_headers),
        )

    def store_key(self, fingerprint: str) -> str:
        """Build the cache store key for a fingerprint."""
        origin = self._config.origin_url.rstrip("/")
        return f"{origin}/{self._config.cache_path}/{fingerprint}"

    def _select_operation(self, gql_request: GraphQLRequest) -> OperationRecord | None:
        """Find the cache record of the operation being executed.

        Returns None when the request is not cacheable, including when
        the query cannot be parsed.
        """
        try:
            index = self._analyzer.analyze(gql_request.query)
        except QueryParseError as e:
            logger.debug("Forwarding unparseable query: %s", e)
            return None

        operation = index.get(gql_request.operation_name)
        if operation is None or not operation.cacheable:
            logger.debug(
                "Operation %r is not cached, forwarding",
                gql_request.operation_name,
            )
            return None
        return operation

    async def _lookup(self, store_key: str) -> CachedEntry | None:
        try:
            data = await self._cache_store.get(store_key)
        except CacheStoreUnavailable as e:
            logger.warning("Cache lookup failed, treating as miss: %s", e)
            return None

        if data is None:
            return None

        try:
            entry = self._serializer.deserialize(data)
        except SerializationError as e:
            logger.warning("Discarding unreadable cache entry %s: %s", store_key, e)
            return None

        # Stores expire lazily; never serve past the entry's own TTL.
        if entry.is_expired:
            logger.debug("Ignoring expired cache entry %s", store_key)
            return None
        return entry

    async def _store(
        self,
        store_key: str,
        response: ProxyResponse,
        policy: CachePolicy,
    ) -> None:
        entry = CachedEntry.create(key=store_key, response=response, ttl=policy.ttl)
        try:
            await self._cache_store.set(
                store_key,
                self._serializer.serialize(entry),
                policy.ttl,
            )
        except (CacheStoreUnavailable, SerializationError) as e:
            logger.warning("Cache write failed for %s: %s", store_key, e)
            return
        logger.debug("Stored %s for %ss", store_key, policy.s_maxage)

    def _annotate(
        self, response: ProxyResponse, status: str, fingerprint: str
    ) -> ProxyResponse:
        return response.with_headers(
            (self._config.cache_status_header, status),
            (self._config.cache_key_header, fingerprint),
        )

    def _client_error(self, message: str) -> ProxyResponse:
        body = json.dumps({"errors": [{"message": message}]}).encode()
        return ProxyResponse(
            status=400,
            headers=(("content-type", "application/json"),),
            body=body,
        )

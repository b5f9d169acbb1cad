"""Caching proxy ASGI app for FastAPI."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.responses import Response

from cachedql.core.entities.http import ProxyRequest, ProxyResponse
from cachedql.core.entities.proxy_config import ProxyConfig
from cachedql.core.exceptions import OriginUnreachable
from cachedql.core.interfaces.cache_store import ICacheStore
from cachedql.core.interfaces.origin_client import IOriginClient
from cachedql.core.services.proxy_service import CacheProxyService
from cachedql.infrastructure.backends.memory import InMemoryCacheStore
from cachedql.infrastructure.key_builders.fingerprint import FingerprintKeyBuilder
from cachedql.infrastructure.origin.httpx_client import HttpxOriginClient
from cachedql.infrastructure.serializers.json import JsonSerializer

logger = logging.getLogger(__name__)


def to_proxy_request(body: bytes, request: Request) -> ProxyRequest:
    return ProxyRequest(body=body, headers=tuple(request.headers.items()))


def to_starlette_response(result: ProxyResponse) -> Response:
    """Build a Starlette response keeping repeated headers."""
    response = Response(content=result.body, status_code=result.status)
    for name, value in result.headers:
        response.headers.append(name, value)
    return response


def create_app(
    config: ProxyConfig | None = None,
    *,
    cache_store: ICacheStore | None = None,
    origin_client: IOriginClient | None = None,
) -> FastAPI:
    """Create the caching proxy application.

    Every POST, whatever its path, is handled by CacheProxyService.

    Example::

        app = create_app(
            ProxyConfig(origin_url="https://api.example.com/graphql"),
            cache_store=RedisCacheStore(redis_url=REDIS_URL),
        )

    Args:
        config: Proxy configuration. Read from the environment if None.
        cache_store: Cache store. An InMemoryCacheStore is used if None.
        origin_client: Origin client. An HttpxOriginClient for
            ``config.origin_url`` is created (and closed on shutdown) if None.

    Returns:
        The FastAPI application.
    """
    config = config or ProxyConfig.from_env()
    if cache_store is None:
        cache_store = InMemoryCacheStore(default_ttl=float(config.max_ttl))
    owned_client: HttpxOriginClient | None = None
    if origin_client is None:
        owned_client = HttpxOriginClient(config.origin_url)
        origin_client = owned_client

    service = CacheProxyService(
        cache_store=cache_store,
        origin_client=origin_client,
        key_builder=FingerprintKeyBuilder(),
        serializer=JsonSerializer(),
        config=config,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Proxying to %s", config.origin_url)
        yield
        if owned_client is not None:
            await owned_client.aclose()

    app = FastAPI(title="cachedql", lifespan=lifespan)
    app.state.proxy_service = service

    @app.post("/{path:path}")
    async def proxy(request: Request) -> Response:
        body = await request.body()
        try:
            result = await service.handle(to_proxy_request(body, request))
        except OriginUnreachable as e:
            payload = {"errors": [{"message": str(e)}]}
            return Response(
                content=json.dumps(payload),
                status_code=502,
                media_type="application/json",
            )
        return to_starlette_response(result)

    return app

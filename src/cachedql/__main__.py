"""Run the caching proxy with uvicorn.

Environment:
    ORIGIN: GraphQL origin URL.
    REDIS_URL: Use Redis as the cache store when set.
    CACHEDQL_HOST / CACHEDQL_PORT: Listen address.
    CACHEDQL_LOG_LEVEL: Logging level (default INFO).
"""

import logging
import os

import uvicorn

from cachedql.adapters.fastapi import create_app
from cachedql.core.entities.proxy_config import ProxyConfig
from cachedql.core.interfaces.cache_store import ICacheStore


def main() -> None:
    logging.basicConfig(
        level=os.getenv("CACHEDQL_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = ProxyConfig.from_env()

    cache_store: ICacheStore | None = None
    redis_url = os.getenv("REDIS_URL")
    if redis_url:
        from cachedql.infrastructure.backends.redis import RedisCacheStore

        cache_store = RedisCacheStore(redis_url=redis_url, default_ttl=config.max_ttl)

    app = create_app(config, cache_store=cache_store)
    uvicorn.run(
        app,
        host=os.getenv("CACHEDQL_HOST", "0.0.0.0"),
        port=int(os.getenv("CACHEDQL_PORT", "8787")),
    )


if __name__ == "__main__":
    main()

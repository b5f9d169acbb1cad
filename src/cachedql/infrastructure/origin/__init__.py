"""Origin client implementations."""

from cachedql.infrastructure.origin.httpx_client import HttpxOriginClient

__all__ = ["HttpxOriginClient"]

"""Domain services for cachedql."""

from cachedql.core.services.proxy_service import CacheProxyService
from cachedql.core.services.query_analyzer import (
    CACHED_DIRECTIVE,
    QueryAnalyzer,
    analyze,
)

__all__ = [
    "CacheProxyService",
    # Directive analysis
    "QueryAnalyzer",
    "CACHED_DIRECTIVE",
    "analyze",
]

"""Exceptions raised by cachedql."""


class CachedQLError(Exception):
    """Base class for all cachedql errors."""

    pass


class MalformedRequestBody(CachedQLError):
    """Raised when the request body is not a valid GraphQL POST payload."""

    pass


class QueryParseError(CachedQLError):
    """Raised when the query text is not a syntactically valid document."""

    pass


class CacheStoreUnavailable(CachedQLError):
    """Raised when a cache store lookup or write fails."""

    pass


class SerializationError(CachedQLError):
    """Raised when serialization or deserialization fails."""

    pass


class OriginUnreachable(CachedQLError):
    """Raised when the origin server cannot be reached."""

    pass

"""Serializer implementations."""

from cachedql.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]

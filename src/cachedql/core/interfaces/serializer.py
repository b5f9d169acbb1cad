"""Serializer interface."""

from typing import Protocol

from cachedql.core.entities.cache_entry import CachedEntry


class ISerializer(Protocol):
    """Contract for converting cache entries to and from bytes."""

    def serialize(self, entry: CachedEntry) -> bytes:
        """Serialize an entry to bytes.

        Raises:
            SerializationError: If the entry cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> CachedEntry:
        """Deserialize bytes to an entry.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...

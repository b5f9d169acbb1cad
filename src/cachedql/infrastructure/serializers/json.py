"""JSON serializer implementation."""

import base64
import binascii
import json
from datetime import datetime, timedelta
from typing import Any

from cachedql.core.entities.cache_entry import CachedEntry
from cachedql.core.entities.http import ProxyResponse
from cachedql.core.exceptions import SerializationError


class JsonSerializer:
    """JSON serializer for cache entries.

    The response body is stored base64-encoded so that it is returned
    byte-for-byte on a cache hit.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, entry: CachedEntry) -> bytes:
        """Serialize an entry to bytes.

        Raises:
            SerializationError: If the entry cannot be serialized.
        """
        payload: dict[str, Any] = {
            "key": entry.key,
            "status": entry.response.status,
            "headers": [list(header) for header in entry.response.headers],
            "body": base64.b64encode(entry.response.body).decode("ascii"),
            "created_at": entry.created_at.isoformat(),
            "ttl": entry.ttl.total_seconds() if entry.ttl is not None else None,
        }
        try:
            return json.dumps(payload).encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize entry: {e}") from e

    def deserialize(self, data: bytes) -> CachedEntry:
        """Deserialize bytes to an entry.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            payload = json.loads(data.decode(self._encoding))
            response = ProxyResponse(
                status=int(payload["status"]),
                headers=tuple((str(k), str(v)) for k, v in payload["headers"]),
                body=base64.b64decode(payload["body"], validate=True),
            )
            ttl = payload.get("ttl")
            return CachedEntry(
                key=payload["key"],
                response=response,
                created_at=datetime.fromisoformat(payload["created_at"]),
                ttl=timedelta(seconds=ttl) if ttl is not None else None,
            )
        except (
            json.JSONDecodeError,
            UnicodeDecodeError,
            binascii.Error,
            KeyError,
            TypeError,
            ValueError,
        ) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

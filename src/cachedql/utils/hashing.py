"""Hashing utilities for cache key generation."""

import hashlib
import json
from typing import Any


def canonical_json(value: Any) -> str:
    """Serialize a value to JSON deterministically.

    Object keys are sorted at every level and separators carry no
    whitespace, so equal values always produce equal text.

    Args:
        value: Any JSON-serializable value.

    Returns:
        The canonical JSON string.
    """
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def sha256_hex(text: str) -> str:
    """Return the lowercase hex SHA-256 digest of a UTF-8 string.

    Lone surrogates (valid in JSON escapes) are encoded as-is so that
    distinct inputs keep distinct digests.
    """
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()

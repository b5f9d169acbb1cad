"""Key builder implementations."""

from cachedql.infrastructure.key_builders.fingerprint import (
    FingerprintKeyBuilder,
    derive_key,
)

__all__ = ["FingerprintKeyBuilder", "derive_key"]

"""Fingerprint key builder implementation."""

from typing import Any

from cachedql.utils.hashing import canonical_json, sha256_hex


class FingerprintKeyBuilder:
    """Key builder producing a SHA-256 fingerprint of an operation.

    The fingerprint covers the operation name, its canonical text, the
    variables and the allow-listed header values. Different
    authorization contexts therefore never share an entry.
    """

    def build(
        self,
        operation_name: str,
        query: str,
        variables: Any,
        headers: dict[str, str],
    ) -> str:
        """Build the fingerprint for a cacheable operation.

        Args:
            operation_name: Name of the selected operation ("" if anonymous).
            query: The operation's canonical text.
            variables: Variables sent with the request.
            headers: Allow-listed header values.

        Returns:
            A 64 character lowercase hex string.
        """
        vary = {
            "op": operation_name,
            "query": query,
            "vars": variables,
            "headers": headers,
        }
        return sha256_hex(canonical_json(vary))


def derive_key(
    operation_name: str,
    canonical_text: str,
    variables: Any,
    header_values: dict[str, str],
) -> str:
    """Derive the cache fingerprint with the default key builder."""
    return FingerprintKeyBuilder().build(
        operation_name=operation_name,
        query=canonical_text,
        variables=variables,
        headers=header_values,
    )

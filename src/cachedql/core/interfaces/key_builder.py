"""Key builder interface."""

from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for deriving cache fingerprints.

    Key builders must be pure: identical inputs always produce the
    same key.
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
            A fingerprint string.
        """
        ...

"""GraphQL request payload entity."""

import json
from dataclasses import dataclass
from typing import Any

from cachedql.core.exceptions import MalformedRequestBody


@dataclass(frozen=True)
class GraphQLRequest:
    """Decoded body of a GraphQL POST request."""

    query: str
    operation_name: str = ""
    variables: Any = None

    @classmethod
    def from_body(cls, body: bytes) -> "GraphQLRequest":
        """Decode a JSON request body.

        A missing or null ``operationName`` becomes "". ``variables``
        is kept as sent.

        Args:
            body: The raw request body.

        Returns:
            A new GraphQLRequest instance.

        Raises:
            MalformedRequestBody: If the body is not a JSON object with a
                string ``query``, or ``operationName`` is not a string.
        """
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedRequestBody(f"Request body is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise MalformedRequestBody("Request body must be a JSON object")

        query = payload.get("query")
        if not isinstance(query, str):
            raise MalformedRequestBody("Request body must contain a string 'query'")

        operation_name = payload.get("operationName")
        if operation_name is not None and not isinstance(operation_name, str):
            raise MalformedRequestBody("'operationName' must be a string")

        return cls(
            query=query,
            operation_name=operation_name or "",
            variables=payload.get("variables"),
        )

"""Origin client interface."""

from typing import Protocol

from cachedql.core.entities.http import ProxyRequest, ProxyResponse


class IOriginClient(Protocol):
    """Contract for forwarding requests to the origin server."""

    async def forward(self, request: ProxyRequest) -> ProxyResponse:
        """POST the request body and headers to the origin.

        Args:
            request: The request as received by the proxy.

        Returns:
            The origin's response, whatever its status.

        Raises:
            OriginUnreachable: If no response could be obtained.
        """
        ...

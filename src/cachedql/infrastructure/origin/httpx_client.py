"""Origin client implementation using httpx."""

import logging

import httpx

from cachedql.core.entities.http import ProxyRequest, ProxyResponse
from cachedql.core.exceptions import OriginUnreachable

logger = logging.getLogger(__name__)

# Recomputed by httpx for the outbound connection
_REQUEST_HEADERS_TO_DROP = frozenset({"host", "content-length"})

# httpx returns a decoded body, so these no longer describe it
_RESPONSE_HEADERS_TO_DROP = frozenset(
    {"content-encoding", "content-length", "transfer-encoding"}
)


class HttpxOriginClient:
    """Forwards requests to the origin with an httpx.AsyncClient.

    Timeouts are httpx's defaults unless a client or timeout is given.
    No retries are attempted.
    """

    def __init__(
        self,
        origin_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: httpx.Timeout | float | None = None,
    ) -> None:
        """Initialize the origin client.

        Args:
            origin_url: URL every request is POSTed to.
            client: Optional pre-built httpx client. Closed by aclose()
                only if it was created here.
            timeout: Timeout for a client created here.
        """
        self._origin_url = origin_url
        self._owns_client = client is None
        if client is None:
            client = (
                httpx.AsyncClient(timeout=timeout)
                if timeout is not None
                else httpx.AsyncClient()
            )
        self._client = client

    async def forward(self, request: ProxyRequest) -> ProxyResponse:
        """POST the request body and headers to the origin.

        Raises:
            OriginUnreachable: On connection errors or timeouts.
        """
        headers = [
            (name, value)
            for name, value in request.headers
            if name.lower() not in _REQUEST_HEADERS_TO_DROP
        ]
        try:
            response = await self._client.post(
                self._origin_url,
                content=request.body,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.error("Origin %s unreachable: %s", self._origin_url, e)
            raise OriginUnreachable(f"Origin request failed: {e}") from e

        return ProxyResponse(
            status=response.status_code,
            headers=tuple(
                (name, value)
                for name, value in response.headers.multi_items()
                if name.lower() not in _RESPONSE_HEADERS_TO_DROP
            ),
            body=response.content,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

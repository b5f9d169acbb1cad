"""Pytest configuration for cachedql tests."""

import json

import pytest

from cachedql import (
    CacheProxyService,
    FingerprintKeyBuilder,
    InMemoryCacheStore,
    JsonSerializer,
    ProxyConfig,
    ProxyRequest,
    ProxyResponse,
)

ORIGIN_URL = "https://origin.example.com/graphql"

DOCUMENT = """
  query getUser @cached(ttl: 300) {
    user {
      id
      name
    }
  }

  query getPosts @cached(ttl: 600) {
    posts {
      id
      title
    }
  }

  query noCacheQuery {
    comments {
      id
      text
    }
  }
"""


class FakeOriginClient:
    """Origin client returning a canned response and recording calls."""

    def __init__(self, response: ProxyResponse | None = None) -> None:
        self.response = response or ProxyResponse(
            status=200,
            headers=(("content-type", "application/json"),),
            body=b'{"data":{"user":{"id":"1","name":"Alice"}}}',
        )
        self.calls: list[ProxyRequest] = []

    async def forward(self, request: ProxyRequest) -> ProxyResponse:
        self.calls.append(request)
        return self.response


def make_request(
    operation_name: str | None = "getUser",
    query: str = DOCUMENT,
    variables: object = None,
    headers: tuple[tuple[str, str], ...] = (),
) -> ProxyRequest:
    """Build a GraphQL POST request."""
    payload: dict[str, object] = {"query": query, "variables": variables}
    if operation_name is not None:
        payload["operationName"] = operation_name
    return ProxyRequest(
        body=json.dumps(payload).encode(),
        headers=(("content-type", "application/json"), *headers),
    )


@pytest.fixture
def config() -> ProxyConfig:
    return ProxyConfig(origin_url=ORIGIN_URL)


@pytest.fixture
def cache_store() -> InMemoryCacheStore:
    return InMemoryCacheStore(maxsize=100)


@pytest.fixture
def origin() -> FakeOriginClient:
    return FakeOriginClient()


@pytest.fixture
def service(
    config: ProxyConfig,
    cache_store: InMemoryCacheStore,
    origin: FakeOriginClient,
) -> CacheProxyService:
    """Create a proxy service wired to fakes."""
    return CacheProxyService(
        cache_store=cache_store,
        origin_client=origin,
        key_builder=FingerprintKeyBuilder(),
        serializer=JsonSerializer(),
        config=config,
    )


@pytest.fixture
def document() -> str:
    """Document with two cached operations and one uncached operation."""
    return DOCUMENT


@pytest.fixture(name="make_request")
def make_request_fixture():
    return make_request


@pytest.fixture(name="fake_origin_client")
def fake_origin_client_fixture():
    """Factory for origin fakes with a custom response."""
    return FakeOriginClient

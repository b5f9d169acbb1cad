"""Unit tests for the FastAPI adapter."""

import pytest
from fastapi.testclient import TestClient

from cachedql import OriginUnreachable, ProxyConfig, ProxyResponse
from cachedql.adapters.fastapi import create_app, to_starlette_response

ORIGIN_URL = "https://origin.example.com/graphql"


class UnreachableOrigin:
    async def forward(self, request):
        raise OriginUnreachable("connection refused")


class TestToStarletteResponse:
    def test_repeated_headers_are_kept(self) -> None:
        response = to_starlette_response(
            ProxyResponse(
                status=201,
                headers=(("set-cookie", "a=1"), ("set-cookie", "b=2")),
                body=b"ok",
            )
        )

        assert response.status_code == 201
        assert response.body == b"ok"
        assert response.headers.getlist("set-cookie") == ["a=1", "b=2"]


class TestCreateApp:
    @pytest.fixture
    def config(self) -> ProxyConfig:
        return ProxyConfig(origin_url=ORIGIN_URL)

    def test_forwards_request_to_service(
        self, config, fake_origin_client, make_request
    ) -> None:
        origin = fake_origin_client()
        client = TestClient(create_app(config, origin_client=origin))

        request = make_request(headers=(("authorization", "Bearer a"),))
        response = client.post(
            "/graphql",
            content=request.body,
            headers=dict(request.headers),
        )

        assert response.status_code == 200
        assert response.content == origin.response.body
        assert response.headers["x-query-cache"] == "MISS"
        (forwarded,) = origin.calls
        assert forwarded.body == request.body
        assert forwarded.header("authorization") == "Bearer a"

    def test_any_path_is_proxied(self, config, fake_origin_client, make_request) -> None:
        origin = fake_origin_client()
        client = TestClient(create_app(config, origin_client=origin))

        response = client.post("/", content=make_request().body)

        assert response.status_code == 200
        assert len(origin.calls) == 1

    def test_malformed_body_returns_400(self, config, fake_origin_client) -> None:
        origin = fake_origin_client()
        client = TestClient(create_app(config, origin_client=origin))

        response = client.post("/graphql", content=b"{oops")

        assert response.status_code == 400
        assert response.json()["errors"]
        assert origin.calls == []

    def test_unreachable_origin_returns_502(self, config, make_request) -> None:
        client = TestClient(create_app(config, origin_client=UnreachableOrigin()))

        response = client.post("/graphql", content=make_request().body)

        assert response.status_code == 502
        assert "connection refused" in response.json()["errors"][0]["message"]

    def test_service_is_exposed_on_state(self, config, fake_origin_client) -> None:
        app = create_app(config, origin_client=fake_origin_client())

        assert app.state.proxy_service.config is config

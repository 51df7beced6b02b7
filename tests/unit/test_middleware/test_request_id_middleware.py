"""Unit tests for RequestIDMiddleware."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from blog_service.app.middleware import RequestIDMiddleware
from blog_service.infra.logging import get_log_context


def build_app() -> Starlette:
    async def echo(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "state": request.state.request_id,
                "log_context": get_log_context().get("request_id"),
            }
        )

    app = Starlette(routes=[Route("/", echo)])
    app.add_middleware(RequestIDMiddleware)
    return app


@pytest.fixture
async def middleware_client():
    async with AsyncClient(transport=ASGITransport(app=build_app()), base_url="http://test") as client:
        yield client


@pytest.mark.unit
class TestRequestIDMiddleware:
    @pytest.mark.asyncio
    async def test_uses_incoming_header(self, middleware_client):
        response = await middleware_client.get("/", headers={"X-Request-ID": "abc-123"})

        assert response.headers["x-request-id"] == "abc-123"
        assert response.json() == {"state": "abc-123", "log_context": "abc-123"}

    @pytest.mark.asyncio
    async def test_generates_uuid_when_missing(self, middleware_client):
        response = await middleware_client.get("/")

        request_id = response.headers["x-request-id"]
        assert len(request_id) == 36
        assert response.json()["state"] == request_id

    @pytest.mark.asyncio
    async def test_each_request_gets_its_own_id(self, middleware_client):
        first = await middleware_client.get("/")
        second = await middleware_client.get("/")

        assert first.headers["x-request-id"] != second.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_context_cleared_after_request(self, middleware_client):
        await middleware_client.get("/", headers={"X-Request-ID": "abc-123"})

        assert "request_id" not in get_log_context()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("incoming", ["has spaces", "x" * 129, "semi;colon"])
    async def test_replaces_malformed_incoming_id(self, middleware_client, incoming):
        response = await middleware_client.get("/", headers={"X-Request-ID": incoming})

        request_id = response.headers["x-request-id"]
        assert request_id != incoming
        assert len(request_id) == 36

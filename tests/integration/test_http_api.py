"""HTTP-level tests: health probes, GraphQL over POST, request ids and problem details."""

from __future__ import annotations

import pytest

from blog_service.core.exceptions import ConflictException
from blog_service.core.pagination import InvalidCursorError
from blog_service.core.settings import clear_all_caches

ENTRIES_QUERY = """
    query ($handle: String!, $first: Int, $after: String) {
        blog(handle: $handle) {
            entries(first: $first, after: $after) {
                edges { node { title } }
                pageInfo { hasNextPage endCursor }
            }
        }
    }
"""


@pytest.mark.integration
class TestHealth:
    @pytest.mark.asyncio
    async def test_liveness(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"]

    @pytest.mark.asyncio
    async def test_live_alias(self, client):
        response = await client.get("/health/live")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_readiness_pings_database(self, client):
        response = await client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True}


@pytest.mark.integration
class TestRequestId:
    @pytest.mark.asyncio
    async def test_generated_when_missing(self, client):
        response = await client.get("/health")

        assert response.headers.get("x-request-id")

    @pytest.mark.asyncio
    async def test_echoes_incoming_id(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["x-request-id"] == "req-123"


@pytest.mark.integration
class TestGraphQLEndpoint:
    """POST /graphql with the identity header set by the auth proxy."""

    @pytest.mark.asyncio
    async def test_entries_page_over_http(self, client, alice, make_blog, make_entries):
        blog = await make_blog(alice, "notes")
        await make_entries(blog, 3)

        response = await client.post(
            "/graphql",
            json={"query": ENTRIES_QUERY, "variables": {"handle": "notes", "first": 2}},
        )

        assert response.status_code == 200
        entries = response.json()["data"]["blog"]["entries"]
        assert [e["node"]["title"] for e in entries["edges"]] == ["Entry 0", "Entry 1"]
        assert entries["pageInfo"]["hasNextPage"] is True

    @pytest.mark.asyncio
    async def test_identity_header_authenticates(self, client, alice):
        response = await client.post(
            "/graphql",
            json={"query": "mutation { createBlog(blog: {handle: \"notes\", name: \"Notes\"}) { handle userId } }"},
            headers={"X-Auth-Request-Email": "alice@example.com"},
        )

        body = response.json()
        assert "errors" not in body
        assert body["data"]["createBlog"] == {"handle": "notes", "userId": str(alice.id)}

    @pytest.mark.asyncio
    async def test_missing_header_is_unauthenticated(self, client):
        response = await client.post(
            "/graphql",
            json={"query": "mutation { createBlog(blog: {handle: \"notes\", name: \"Notes\"}) { id } }"},
        )

        body = response.json()
        assert body["data"] is None
        assert [e["extensions"]["code"] for e in body["errors"]] == ["AUTHENTICATION_ERROR"]

    @pytest.mark.asyncio
    async def test_unknown_email_is_anonymous(self, client):
        response = await client.post(
            "/graphql",
            json={"query": "{ me { email } }"},
            headers={"X-Auth-Request-Email": "stranger@example.com"},
        )

        assert response.json()["data"] == {"me": None}

    @pytest.mark.asyncio
    async def test_unknown_email_is_provisioned_when_enabled(self, client, monkeypatch):
        monkeypatch.setenv("AUTH_AUTO_PROVISION", "true")
        clear_all_caches()

        response = await client.post(
            "/graphql",
            json={"query": "{ me { username email picture } }"},
            headers={"X-Auth-Request-Email": "newcomer@example.com"},
        )

        assert response.json()["data"]["me"] == {
            "username": "newcomer",
            "email": "newcomer@example.com",
            "picture": "default.png",
        }

    @pytest.mark.asyncio
    async def test_invalid_cursor_over_http(self, client, alice, make_blog):
        await make_blog(alice, "notes")

        response = await client.post(
            "/graphql",
            json={"query": ENTRIES_QUERY, "variables": {"handle": "notes", "after": "bogus"}},
        )

        errors = response.json()["errors"]
        assert errors[0]["extensions"]["code"] == "INVALID_CURSOR"
        assert errors[0]["path"] == ["blog", "entries"]


@pytest.mark.integration
class TestProblemDetails:
    @pytest.mark.asyncio
    async def test_app_exception_renders_problem_json(self, app, client):
        @app.get("/boom")
        async def boom():
            raise ConflictException(detail="Handle taken", type="blog-handle-exists", extra={"handle": "notes"})

        response = await client.get("/boom", headers={"X-Request-ID": "req-9"})

        assert response.status_code == 409
        assert response.headers["content-type"].startswith("application/problem+json")
        body = response.json()
        assert body["type"] == "blog-handle-exists"
        assert body["title"] == "Conflict"
        assert body["detail"] == "Handle taken"
        assert body["handle"] == "notes"
        assert body["request_id"] == "req-9"

    @pytest.mark.asyncio
    async def test_invalid_cursor_renders_422(self, app, client):
        @app.get("/page")
        async def page():
            raise InvalidCursorError("malformed", field="after")

        response = await client.get("/page")

        assert response.status_code == 422
        body = response.json()
        assert body["type"] == "invalid-cursor"
        assert body["detail"] == "Invalid cursor (malformed)"
        assert body["reason"] == "malformed"
        assert body["field"] == "after"

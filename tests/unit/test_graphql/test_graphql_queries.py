"""Tests for GraphQL query resolvers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from blog_service.features.graphql.schema import schema

if TYPE_CHECKING:
    from blog_service.features.graphql.context import GraphQLContext

BLOGS_QUERY = """
    query Blogs($first: Int, $after: String, $last: Int, $before: String) {
        blogs(first: $first, after: $after, last: $last, before: $before) {
            edges { cursor node { handle name user { username } } }
            pageInfo { hasPreviousPage hasNextPage startCursor endCursor }
        }
    }
"""

BLOG_QUERY = """
    query Blog($handle: String!) {
        blog(handle: $handle) { id handle name created userId user { email } }
    }
"""

ENTRIES_QUERY = """
    query Entries($handle: String!, $first: Int, $after: String, $last: Int, $before: String) {
        blog(handle: $handle) {
            entries(first: $first, after: $after, last: $last, before: $before) {
                edges { cursor node { id title content published created } }
                pageInfo { hasPreviousPage hasNextPage startCursor endCursor }
            }
        }
    }
"""

ENTRY_QUERY = """
    query Entry($handle: String!, $id: ID!) {
        blog(handle: $handle) { entry(id: $id) { id blogId title } }
    }
"""


@pytest.mark.asyncio
async def test_blogs_returns_first_page(
    graphql_context: GraphQLContext,
    alice,
    bob,
    make_blog,
) -> None:
    """Blogs come back oldest first with their owners."""
    await make_blog(alice, "notes", offset=0)
    await make_blog(bob, "diary", offset=1)
    await make_blog(alice, "recipes", offset=2)

    result = await schema.execute(BLOGS_QUERY, variable_values={"first": 2}, context_value=graphql_context)

    assert result.errors is None
    blogs = result.data["blogs"]
    assert [(e["node"]["handle"], e["node"]["user"]["username"]) for e in blogs["edges"]] == [
        ("notes", "alice"),
        ("diary", "bob"),
    ]
    assert blogs["pageInfo"]["hasNextPage"] is True
    assert blogs["pageInfo"]["hasPreviousPage"] is False
    assert blogs["pageInfo"]["endCursor"] == blogs["edges"][-1]["cursor"]


@pytest.mark.asyncio
async def test_blogs_page_through_all(graphql_context: GraphQLContext, alice, make_blog) -> None:
    """Following endCursor visits every blog exactly once."""
    for i in range(7):
        await make_blog(alice, f"blog-{i}", offset=i)
    handles: list[str] = []
    after = None

    while True:
        result = await schema.execute(
            BLOGS_QUERY,
            variable_values={"first": 3, "after": after},
            context_value=graphql_context,
        )
        assert result.errors is None
        page = result.data["blogs"]
        handles.extend(edge["node"]["handle"] for edge in page["edges"])
        if not page["pageInfo"]["hasNextPage"]:
            break
        after = page["pageInfo"]["endCursor"]

    assert handles == [f"blog-{i}" for i in range(7)]


@pytest.mark.asyncio
async def test_blogs_last_page(graphql_context: GraphQLContext, alice, make_blog) -> None:
    for i in range(4):
        await make_blog(alice, f"blog-{i}", offset=i)

    result = await schema.execute(BLOGS_QUERY, variable_values={"last": 2}, context_value=graphql_context)

    assert result.errors is None
    assert [e["node"]["handle"] for e in result.data["blogs"]["edges"]] == ["blog-2", "blog-3"]
    assert result.data["blogs"]["pageInfo"]["hasPreviousPage"] is True


@pytest.mark.asyncio
async def test_empty_blog_list(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(BLOGS_QUERY, context_value=graphql_context)

    assert result.errors is None
    assert result.data["blogs"] == {
        "edges": [],
        "pageInfo": {
            "hasPreviousPage": False,
            "hasNextPage": False,
            "startCursor": None,
            "endCursor": None,
        },
    }


@pytest.mark.asyncio
async def test_blog_by_handle(graphql_context: GraphQLContext, alice, make_blog) -> None:
    blog = await make_blog(alice, "notes")

    result = await schema.execute(BLOG_QUERY, variable_values={"handle": "notes"}, context_value=graphql_context)

    assert result.errors is None
    assert result.data["blog"] == {
        "id": str(blog.id),
        "handle": "notes",
        "name": "Notes",
        "created": "2024-01-01T12:00:00+00:00",
        "userId": str(alice.id),
        "user": {"email": "alice@example.com"},
    }


@pytest.mark.asyncio
async def test_missing_blog_is_null(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(BLOG_QUERY, variable_values={"handle": "nope"}, context_value=graphql_context)

    assert result.errors is None
    assert result.data["blog"] is None


@pytest.mark.asyncio
async def test_limited_entries(graphql_context: GraphQLContext, alice, make_blog, make_entries) -> None:
    """first=3 returns the three oldest entries and reports more."""
    blog = await make_blog(alice, "notes")
    await make_entries(blog, 5)

    result = await schema.execute(
        ENTRIES_QUERY,
        variable_values={"handle": "notes", "first": 3},
        context_value=graphql_context,
    )

    assert result.errors is None
    entries = result.data["blog"]["entries"]
    assert [e["node"]["title"] for e in entries["edges"]] == ["Entry 0", "Entry 1", "Entry 2"]
    assert entries["pageInfo"]["hasNextPage"] is True
    assert entries["edges"][0]["node"]["published"] is None
    assert entries["edges"][1]["node"]["created"] == "2024-01-01T12:00:01+00:00"


@pytest.mark.asyncio
async def test_page_all_entries(graphql_context: GraphQLContext, alice, make_blog, make_entries) -> None:
    """10 entries in pages of 2: five pages, no overlap, no gap."""
    blog = await make_blog(alice, "notes")
    await make_entries(blog, 10)
    titles: list[str] = []
    pages = 0
    after = None

    while True:
        result = await schema.execute(
            ENTRIES_QUERY,
            variable_values={"handle": "notes", "first": 2, "after": after},
            context_value=graphql_context,
        )
        assert result.errors is None
        connection = result.data["blog"]["entries"]
        pages += 1
        titles.extend(edge["node"]["title"] for edge in connection["edges"])
        if not connection["pageInfo"]["hasNextPage"]:
            break
        after = connection["pageInfo"]["endCursor"]

    assert pages == 5
    assert titles == [f"Entry {i}" for i in range(10)]


@pytest.mark.asyncio
async def test_entries_backwards(graphql_context: GraphQLContext, alice, make_blog, make_entries) -> None:
    blog = await make_blog(alice, "notes")
    await make_entries(blog, 5)
    tail = await schema.execute(
        ENTRIES_QUERY,
        variable_values={"handle": "notes", "last": 2},
        context_value=graphql_context,
    )
    start = tail.data["blog"]["entries"]["pageInfo"]["startCursor"]

    result = await schema.execute(
        ENTRIES_QUERY,
        variable_values={"handle": "notes", "last": 2, "before": start},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert [e["node"]["title"] for e in result.data["blog"]["entries"]["edges"]] == ["Entry 1", "Entry 2"]


@pytest.mark.asyncio
async def test_invalid_cursor_is_reported(graphql_context: GraphQLContext, alice, make_blog) -> None:
    await make_blog(alice, "notes")

    result = await schema.execute(
        ENTRIES_QUERY,
        variable_values={"handle": "notes", "first": 2, "after": "not-a-real-cursor"},
        context_value=graphql_context,
    )

    assert result.errors is not None
    assert len(result.errors) == 1
    assert result.errors[0].extensions["code"] == "INVALID_CURSOR"
    assert result.errors[0].extensions["field"] == "after"
    assert result.data["blog"] is None


@pytest.mark.asyncio
async def test_cursor_from_another_blog_is_rejected(
    graphql_context: GraphQLContext,
    alice,
    make_blog,
    make_entries,
) -> None:
    notes = await make_blog(alice, "notes")
    await make_blog(alice, "diary", offset=1)
    await make_entries(notes, 2)
    page = await schema.execute(
        ENTRIES_QUERY,
        variable_values={"handle": "notes", "first": 1},
        context_value=graphql_context,
    )
    foreign = page.data["blog"]["entries"]["pageInfo"]["endCursor"]

    result = await schema.execute(
        ENTRIES_QUERY,
        variable_values={"handle": "diary", "first": 1, "after": foreign},
        context_value=graphql_context,
    )

    assert result.errors[0].extensions["code"] == "INVALID_CURSOR"
    assert result.errors[0].extensions["reason"] == "scope"


@pytest.mark.asyncio
@pytest.mark.parametrize(("variables", "field"), [({"first": -1}, "first"), ({"last": 101}, "last")])
async def test_bad_page_size_is_validation_error(
    graphql_context: GraphQLContext,
    variables,
    field,
) -> None:
    result = await schema.execute(BLOGS_QUERY, variable_values=variables, context_value=graphql_context)

    assert result.errors is not None
    assert result.errors[0].extensions["code"] == "VALIDATION_ERROR"
    assert result.errors[0].extensions["field"] == field
    assert result.data is None


@pytest.mark.asyncio
async def test_entry_by_id(graphql_context: GraphQLContext, alice, make_blog, make_entries) -> None:
    blog = await make_blog(alice, "notes")
    entries = await make_entries(blog, 3)

    result = await schema.execute(
        ENTRY_QUERY,
        variable_values={"handle": "notes", "id": str(entries[1].id)},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["blog"]["entry"] == {
        "id": str(entries[1].id),
        "blogId": str(blog.id),
        "title": "Entry 1",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("entry_id", ["not-a-uuid", str(uuid4())])
async def test_unknown_entry_is_null(graphql_context: GraphQLContext, alice, make_blog, entry_id) -> None:
    await make_blog(alice, "notes")

    result = await schema.execute(
        ENTRY_QUERY,
        variable_values={"handle": "notes", "id": entry_id},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data["blog"]["entry"] is None


@pytest.mark.asyncio
async def test_blog_for_user(graphql_context: GraphQLContext, alice, bob, make_blog) -> None:
    await make_blog(alice, "notes")
    query = "query ($userId: ID!) { blogForUser(userId: $userId) { handle } }"

    found = await schema.execute(query, variable_values={"userId": str(alice.id)}, context_value=graphql_context)
    none = await schema.execute(query, variable_values={"userId": str(bob.id)}, context_value=graphql_context)
    bad = await schema.execute(query, variable_values={"userId": "garbage"}, context_value=graphql_context)

    assert found.data["blogForUser"] == {"handle": "notes"}
    assert none.data["blogForUser"] is None
    assert bad.errors is None
    assert bad.data["blogForUser"] is None


@pytest.mark.asyncio
async def test_me(make_context, alice) -> None:
    query = "{ me { username email } }"

    anonymous = await schema.execute(query, context_value=make_context())
    signed_in = await schema.execute(query, context_value=make_context(alice))

    assert anonymous.data["me"] is None
    assert signed_in.data["me"] == {"username": "alice", "email": "alice@example.com"}


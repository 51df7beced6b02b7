"""Unit tests for BlogService."""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select

from blog_service.core.exceptions import ConflictException, ForbiddenException, UnauthorizedException
from blog_service.features.blogs.schemas import BlogCreate, BlogUpdate
from blog_service.features.blogs.service import BlogService
from blog_service.features.entries.models import Entry


@pytest.mark.unit
class TestBlogCreate:
    @pytest.mark.asyncio
    async def test_create_blog_owned_by_user(self, db_session, alice):
        service = BlogService(db_session)

        blog = await service.create_blog(alice, BlogCreate(handle="Notes", name="  Alice's notes "))

        assert blog.handle == "notes"
        assert blog.name == "Alice's notes"
        assert blog.user_id == alice.id
        assert await service.get_by_handle("NOTES") is blog

    @pytest.mark.asyncio
    async def test_anonymous_cannot_create(self, db_session):
        with pytest.raises(UnauthorizedException):
            await BlogService(db_session).create_blog(None, BlogCreate(handle="notes", name="Notes"))

    @pytest.mark.asyncio
    async def test_taken_handle_conflicts(self, db_session, alice, bob, make_blog):
        await make_blog(alice, "notes")

        with pytest.raises(ConflictException) as exc_info:
            await BlogService(db_session).create_blog(bob, BlogCreate(handle="notes", name="Mine"))

        assert exc_info.value.type == "blog-handle-exists"
        assert exc_info.value.extra == {"handle": "notes"}

    @pytest.mark.parametrize("handle", ["", "-dash", "has space", "ünïcode", "x" * 65])
    def test_bad_handles_fail_validation(self, handle):
        with pytest.raises(ValidationError):
            BlogCreate(handle=handle, name="Name")


@pytest.mark.unit
class TestBlogQueries:
    @pytest.mark.asyncio
    async def test_list_blogs_uses_default_page_size(self, db_session, alice, make_blog):
        for i in range(12):
            await make_blog(alice, f"blog-{i:02d}", offset=i)

        connection = await BlogService(db_session).list_blogs()

        assert [b.handle for b in connection.nodes] == [f"blog-{i:02d}" for i in range(10)]
        assert connection.page_info.has_next_page is True

    @pytest.mark.asyncio
    async def test_list_blogs_continues_after_cursor(self, db_session, alice, bob, make_blog):
        await make_blog(alice, "a", offset=0)
        await make_blog(bob, "b", offset=1)
        await make_blog(alice, "c", offset=2)
        service = BlogService(db_session)

        first = await service.list_blogs(first=2)
        rest = await service.list_blogs(first=2, after=first.page_info.end_cursor)

        assert [b.handle for b in first.nodes] == ["a", "b"]
        assert [b.handle for b in rest.nodes] == ["c"]
        assert rest.page_info.has_next_page is False

    @pytest.mark.asyncio
    async def test_get_for_user_returns_earliest_blog(self, db_session, alice, bob, make_blog):
        await make_blog(alice, "later", offset=10)
        await make_blog(alice, "earlier", offset=1)
        service = BlogService(db_session)

        blog = await service.get_for_user(alice.id)

        assert blog is not None
        assert blog.handle == "earlier"
        assert await service.get_for_user(bob.id) is None

    @pytest.mark.asyncio
    async def test_missing_handle_is_none(self, db_session):
        assert await BlogService(db_session).get_by_handle("nope") is None


@pytest.mark.unit
class TestBlogWrites:
    @pytest.mark.asyncio
    async def test_owner_renames_blog(self, db_session, alice, make_blog):
        blog = await make_blog(alice, "notes")

        updated = await BlogService(db_session).update_blog(alice, blog, BlogUpdate(name="Field notes"))

        assert updated.name == "Field notes"
        assert updated.handle == "notes"

    @pytest.mark.asyncio
    async def test_non_owner_cannot_rename(self, db_session, alice, bob, make_blog):
        blog = await make_blog(alice, "notes")

        with pytest.raises(ForbiddenException) as exc_info:
            await BlogService(db_session).update_blog(bob, blog, BlogUpdate(name="Mine now"))

        assert exc_info.value.status_code == 403
        assert blog.name == "Notes"

    @pytest.mark.asyncio
    async def test_anonymous_cannot_delete(self, db_session, alice, make_blog):
        blog = await make_blog(alice, "notes")

        with pytest.raises(UnauthorizedException):
            await BlogService(db_session).delete_blog(None, blog)

    @pytest.mark.asyncio
    async def test_delete_removes_blog_and_its_entries(self, db_session, alice, make_blog, make_entries):
        notes = await make_blog(alice, "notes")
        diary = await make_blog(alice, "diary", offset=1)
        await make_entries(notes, 3)
        await make_entries(diary, 2)
        service = BlogService(db_session)

        await service.delete_blog(alice, notes)

        assert await service.get_by_handle("notes") is None
        remaining = await db_session.scalar(select(func.count()).select_from(Entry))
        assert remaining == 2

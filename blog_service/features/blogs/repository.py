"""Repository for the blogs feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from blog_service.core.database.repository import BaseRepository
from blog_service.features.blogs.models import Blog

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from blog_service.core.pagination import Connection, CursorCodec

BLOGS_SCOPE = "blogs"


class BlogRepository(BaseRepository[Blog]):
    """Repository for Blog model.

    Inherits get/get_by/create/delete and keyset pagination from
    BaseRepository; blogs page in (created_at, id) order.
    """

    order_by = ((Blog.created_at, "asc"), (Blog.id, "asc"))

    def __init__(self) -> None:
        super().__init__(Blog)

    async def get_by_handle(self, session: AsyncSession, handle: str) -> Blog | None:
        return await self.get_by(session, Blog.handle, handle.strip().lower())

    async def get_first_for_user(self, session: AsyncSession, user_id: UUID) -> Blog | None:
        """The user's earliest blog, or None if they have none."""
        stmt = (
            select(Blog)
            .where(Blog.user_id == user_id)
            .order_by(Blog.created_at.asc(), Blog.id.asc())
        )
        blog = await self.first(session, stmt)
        self._lazy.debug(lambda: f"db.get_first_for_user({user_id}) -> {blog is not None}")
        return blog

    async def paginate_all(
        self,
        session: AsyncSession,
        *,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
        codec: CursorCodec | None = None,
        default_page_size: int = 10,
        max_page_size: int = 100,
    ) -> Connection[Blog]:
        """Page through every blog, oldest first."""
        return await self.paginate(
            session,
            scope=BLOGS_SCOPE,
            first=first,
            after=after,
            last=last,
            before=before,
            codec=codec,
            default_page_size=default_page_size,
            max_page_size=max_page_size,
        )


_blog_repository: BlogRepository | None = None


def get_blog_repository() -> BlogRepository:
    """Get the shared BlogRepository instance."""
    global _blog_repository
    if _blog_repository is None:
        _blog_repository = BlogRepository()
    return _blog_repository

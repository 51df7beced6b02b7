"""Service layer for the blogs feature."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blog_service.core.exceptions import (
    ConflictException,
    ForbiddenException,
    UnauthorizedException,
)
from blog_service.core.settings import get_pagination_settings
from blog_service.features.blogs.models import Blog
from blog_service.features.blogs.repository import BlogRepository, get_blog_repository
from blog_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from blog_service.core.pagination import Connection
    from blog_service.features.blogs.schemas import BlogCreate, BlogUpdate
    from blog_service.features.entries.repository import EntryRepository
    from blog_service.features.users.models import User

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


def require_user(user: User | None) -> User:
    """Return `user` or raise UnauthorizedException when anonymous."""
    if user is None:
        raise UnauthorizedException(detail="You must be signed in to change blogs")
    return user


def ensure_owner(user: User | None, blog: Blog) -> User:
    """Check that `user` owns `blog`.

    Raises:
        UnauthorizedException: Anonymous request
        ForbiddenException: Someone else's blog
    """
    user = require_user(user)
    if blog.user_id != user.id:
        logger.warning(
            "Blog ownership check failed",
            extra={"handle": blog.handle, "blog_id": str(blog.id), "user_id": str(user.id)},
        )
        raise ForbiddenException(
            detail=f"Only the owner of blog '{blog.handle}' may change it",
            type="not-blog-owner",
            extra={"handle": blog.handle},
        )
    return user


class BlogService:
    """Service for blog management.

    Handles:
    - Paging through all blogs
    - Lookup by handle and by owner
    - Owner-only create/update/delete
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: BlogRepository | None = None,
        entry_repo: EntryRepository | None = None,
    ) -> None:
        self._session = session
        self._repo = repo or get_blog_repository()
        if entry_repo is None:
            from blog_service.features.entries.repository import get_entry_repository

            entry_repo = get_entry_repository()
        self._entry_repo = entry_repo

    async def list_blogs(
        self,
        *,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> Connection[Blog]:
        """One page of all blogs, oldest first.

        Raises:
            PaginationValidationError: Bad first/last or empty cursor
            InvalidCursorError: Cursor not minted for the blog list
        """
        settings = get_pagination_settings()
        connection = await self._repo.paginate_all(
            self._session,
            first=first,
            after=after,
            last=last,
            before=before,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        )
        lazy_logger.debug(lambda: f"service.list_blogs -> {len(connection.edges)} blogs")
        return connection

    async def get_by_handle(self, handle: str) -> Blog | None:
        return await self._repo.get_by_handle(self._session, handle)

    async def get_for_user(self, user_id: UUID) -> Blog | None:
        """The user's earliest blog, or None."""
        return await self._repo.get_first_for_user(self._session, user_id)

    async def create_blog(self, user: User | None, payload: BlogCreate) -> Blog:
        """Create a blog owned by `user`.

        Raises:
            UnauthorizedException: Anonymous request
            ConflictException: Handle already taken
        """
        owner = require_user(user)
        if await self._repo.get_by_handle(self._session, payload.handle):
            raise ConflictException(
                detail=f"Blog handle '{payload.handle}' is already taken",
                type="blog-handle-exists",
                extra={"handle": payload.handle},
            )

        blog = await self._repo.create(
            self._session,
            Blog(handle=payload.handle, name=payload.name, user_id=owner.id),
        )
        logger.info(
            "Blog created",
            extra={"blog_id": str(blog.id), "handle": blog.handle, "user_id": str(owner.id)},
        )
        return blog

    async def update_blog(self, user: User | None, blog: Blog, payload: BlogUpdate) -> Blog:
        """Rename a blog (owner only)."""
        ensure_owner(user, blog)
        blog.name = payload.name

        await self._session.flush()
        await self._session.refresh(blog)

        lazy_logger.debug(lambda: f"service.update_blog({blog.handle}) -> updated")
        return blog

    async def delete_blog(self, user: User | None, blog: Blog) -> Blog:
        """Delete a blog and all of its entries (owner only).

        Returns:
            The deleted blog (detached, fields still readable)
        """
        ensure_owner(user, blog)
        removed = await self._entry_repo.delete_for_blog(self._session, blog.id)
        await self._repo.delete(self._session, blog)

        logger.info(
            "Blog deleted",
            extra={"blog_id": str(blog.id), "handle": blog.handle, "entries_deleted": removed},
        )
        return blog

"""Service layer for the entries feature."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blog_service.core.database.base import utcnow
from blog_service.core.exceptions import NotFoundException
from blog_service.core.settings import get_pagination_settings
from blog_service.features.blogs.service import ensure_owner
from blog_service.features.entries.models import Entry
from blog_service.features.entries.repository import EntryRepository, get_entry_repository
from blog_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from blog_service.core.pagination import Connection
    from blog_service.features.blogs.models import Blog
    from blog_service.features.entries.schemas import EntryCreate, EntryUpdate
    from blog_service.features.users.models import User

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class EntryService:
    """Service for the entries of a blog.

    Reads are public. Every write requires the blog's owner.
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: EntryRepository | None = None,
    ) -> None:
        self._session = session
        self._repo = repo or get_entry_repository()

    async def list_entries(
        self,
        blog: Blog,
        *,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> Connection[Entry]:
        """One page of the blog's entries, oldest first.

        Raises:
            PaginationValidationError: Bad first/last or empty cursor
            InvalidCursorError: Cursor not minted for this blog's entries
        """
        settings = get_pagination_settings()
        connection = await self._repo.paginate_for_blog(
            self._session,
            blog.id,
            first=first,
            after=after,
            last=last,
            before=before,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        )
        lazy_logger.debug(
            lambda: f"service.list_entries({blog.handle}) -> {len(connection.edges)} entries"
        )
        return connection

    async def find_entry(self, blog: Blog, entry_id: UUID) -> Entry | None:
        return await self._repo.get_in_blog(self._session, blog.id, entry_id)

    async def get_entry(self, blog: Blog, entry_id: UUID) -> Entry:
        """Get an entry of `blog`.

        Raises:
            NotFoundException: No such entry in this blog
        """
        entry = await self.find_entry(blog, entry_id)
        if entry is None:
            raise NotFoundException(
                detail=f"Entry {entry_id} not found in blog '{blog.handle}'",
                type="entry-not-found",
                extra={"entry_id": str(entry_id), "handle": blog.handle},
            )
        return entry

    async def create_entry(self, user: User | None, blog: Blog, payload: EntryCreate) -> Entry:
        """Write a new draft entry (blog owner only)."""
        ensure_owner(user, blog)
        entry = await self._repo.create(
            self._session,
            Entry(blog_id=blog.id, title=payload.title, content=payload.content),
        )
        logger.info(
            "Entry created",
            extra={"entry_id": str(entry.id), "blog_id": str(blog.id)},
        )
        return entry

    async def update_entry(
        self,
        user: User | None,
        blog: Blog,
        entry_id: UUID,
        payload: EntryUpdate,
    ) -> Entry:
        """Edit title and/or content (blog owner only). Bumps updated_at."""
        ensure_owner(user, blog)
        entry = await self.get_entry(blog, entry_id)

        if payload.title is not None:
            entry.title = payload.title
        if payload.content is not None:
            entry.content = payload.content
        # Always touch the row so updated_at moves even for no-op edits
        entry.updated_at = utcnow()

        await self._session.flush()
        await self._session.refresh(entry)

        lazy_logger.debug(lambda: f"service.update_entry({entry_id}) -> updated")
        return entry

    async def publish_entry(self, user: User | None, blog: Blog, entry_id: UUID) -> Entry:
        """Mark an entry as published (blog owner only). Idempotent."""
        ensure_owner(user, blog)
        entry = await self.get_entry(blog, entry_id)
        if entry.published_at is None:
            entry.published_at = utcnow()
            await self._session.flush()
            await self._session.refresh(entry)
            logger.info("Entry published", extra={"entry_id": str(entry.id), "blog_id": str(blog.id)})
        return entry

    async def delete_entry(self, user: User | None, blog: Blog, entry_id: UUID) -> Entry:
        """Delete an entry (blog owner only).

        Raises:
            NotFoundException: No such entry in this blog
        """
        ensure_owner(user, blog)
        entry = await self.get_entry(blog, entry_id)
        await self._repo.delete(self._session, entry)
        return entry

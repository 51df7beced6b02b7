"""Repository for the entries feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from blog_service.core.database.exceptions import StoreError
from blog_service.core.database.repository import BaseRepository
from blog_service.features.entries.models import Entry

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from blog_service.core.pagination import Connection, CursorCodec


def entries_scope(blog_id: UUID) -> str:
    """Cursor scope for one blog's entries.

    Including the blog id makes a cursor from one blog's entries foreign
    to every other blog.
    """
    return f"entries:{blog_id}"


class EntryRepository(BaseRepository[Entry]):
    """Repository for Entry model."""

    order_by = ((Entry.created_at, "asc"), (Entry.id, "asc"))

    def __init__(self) -> None:
        super().__init__(Entry)

    async def get_in_blog(self, session: AsyncSession, blog_id: UUID, entry_id: UUID) -> Entry | None:
        """Get an entry only if it belongs to `blog_id`."""
        stmt = select(Entry).where(Entry.id == entry_id, Entry.blog_id == blog_id)
        entry = await self.first(session, stmt)
        self._lazy.debug(lambda: f"db.get_in_blog({blog_id}, {entry_id}) -> {entry is not None}")
        return entry

    async def paginate_for_blog(
        self,
        session: AsyncSession,
        blog_id: UUID,
        *,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
        codec: CursorCodec | None = None,
        default_page_size: int = 10,
        max_page_size: int = 100,
    ) -> Connection[Entry]:
        """Page through one blog's entries, oldest first."""
        return await self.paginate(
            session,
            scope=entries_scope(blog_id),
            statement=select(Entry).where(Entry.blog_id == blog_id),
            first=first,
            after=after,
            last=last,
            before=before,
            codec=codec,
            default_page_size=default_page_size,
            max_page_size=max_page_size,
        )

    async def delete_for_blog(self, session: AsyncSession, blog_id: UUID) -> int:
        """Bulk-delete every entry of a blog. Returns the number removed."""
        try:
            result = await session.execute(
                delete(Entry).where(Entry.blog_id == blog_id).execution_options(synchronize_session="fetch")
            )
        except SQLAlchemyError as exc:
            raise StoreError("delete_for_blog", {"blog_id": str(blog_id)}) from exc
        return result.rowcount or 0


_entry_repository: EntryRepository | None = None


def get_entry_repository() -> EntryRepository:
    """Get the shared EntryRepository instance."""
    global _entry_repository
    if _entry_repository is None:
        _entry_repository = EntryRepository()
    return _entry_repository

"""Minimal generic repository for SQLAlchemy models.

Provides basic CRUD operations with explicit session passing, plus keyset
pagination through the connection paginator. For complex queries, use the
session directly.

Example:
    class BlogRepository(BaseRepository[Blog]):
        async def get_by_handle(self, session: AsyncSession, handle: str) -> Blog | None:
            return await self.get_by(session, Blog.handle, handle)

    blog_repo = BlogRepository(Blog)
    blog = await blog_repo.get(session, blog_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.inspection import inspect as sa_inspect

from blog_service.core.database.exceptions import NotFoundError, StoreError
from blog_service.core.pagination.paginator import paginate
from blog_service.core.pagination.store import SQLAlchemyKeysetStore
from blog_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute

    from blog_service.core.pagination import Connection, CursorCodec
    from blog_service.core.pagination.store import SortDirection


class BaseRepository[T]:
    """Minimal generic repository for CRUD operations.

    Provides:
        - get(session, id) -> T | None
        - get_or_raise(session, id) -> T (raises NotFoundError)
        - get_by(session, attr, value) -> T | None
        - list(session, limit, offset) -> Sequence[T]
        - create(session, instance) -> T
        - delete(session, instance) -> None
        - paginate(session, ...) -> Connection[T]

    Driver failures surface as StoreError with the SQLAlchemyError chained.
    Subclasses set `order_by` to the unique ordering used for pagination.
    """

    __slots__ = ("model", "_logger", "_lazy")

    order_by: Sequence[tuple[InstrumentedAttribute[Any], SortDirection]] = ()

    def __init__(self, model: type[T]) -> None:
        self.model = model
        # Standard logger for INFO/WARNING/ERROR
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        # Lazy logger for DEBUG (zero overhead when DEBUG disabled)
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def get(self, session: AsyncSession, id: Any) -> T | None:  # noqa: A002
        """Get entity by primary key."""
        try:
            instance = await session.get(self.model, id)
        except SQLAlchemyError as exc:
            raise StoreError("get", {"entity": self.model.__name__, "id": str(id)}) from exc

        self._lazy.debug(
            lambda: f"db.get: {self.model.__name__}({id}) -> {'found' if instance else 'not found'}"
        )
        return instance

    async def get_or_raise(self, session: AsyncSession, id: Any) -> T:  # noqa: A002
        """Get entity by primary key or raise NotFoundError."""
        instance = await self.get(session, id)
        if instance is None:
            self._logger.info(
                "Entity not found",
                extra={
                    "entity": self.model.__name__,
                    "id": str(id),
                    "operation": "db.get_or_raise",
                },
            )
            raise NotFoundError(self.model.__name__, {"id": id})
        return instance

    async def get_by(
        self,
        session: AsyncSession,
        attr: InstrumentedAttribute[Any],
        value: Any,
    ) -> T | None:
        """Get entity by arbitrary attribute.

        Example:
            blog = await repo.get_by(session, Blog.handle, "my-blog")
        """
        return await self.first(session, select(self.model).where(attr == value))

    async def first(self, session: AsyncSession, statement: Select[Any]) -> T | None:
        """Execute `statement` and return the first entity, or None."""
        try:
            result = await session.execute(statement.limit(1))
        except SQLAlchemyError as exc:
            raise StoreError("first", {"entity": self.model.__name__}) from exc
        instance = result.scalars().first()

        self._lazy.debug(
            lambda: f"db.first: {self.model.__name__} -> {'found' if instance else 'not found'}"
        )
        return instance

    async def list(
        self,
        session: AsyncSession,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> Sequence[T]:
        """List entities with limit/offset, oldest first."""
        stmt = select(self.model).order_by(*self._order_clauses()).limit(limit).offset(offset)
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError("list", {"entity": self.model.__name__}) from exc
        items = result.scalars().all()

        self._lazy.debug(
            lambda: f"db.list: {self.model.__name__}(limit={limit}, offset={offset}) -> {len(items)} items"
        )
        return items

    async def create(self, session: AsyncSession, instance: T) -> T:
        """Persist a new entity.

        Adds to session, flushes to get generated values, and refreshes to
        ensure the instance matches the row.
        """
        session.add(instance)
        try:
            await session.flush()
            await session.refresh(instance)
        except SQLAlchemyError as exc:
            raise StoreError("create", {"entity": self.model.__name__}) from exc

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.create: {self.model.__name__}(id={entity_id})")
        return instance

    async def delete(self, session: AsyncSession, instance: T) -> None:
        """Delete an entity."""
        entity_id = getattr(instance, "id", None)
        try:
            await session.delete(instance)
            await session.flush()
        except SQLAlchemyError as exc:
            raise StoreError("delete", {"entity": self.model.__name__, "id": str(entity_id)}) from exc

        self._logger.info(
            "Entity deleted",
            extra={"entity": self.model.__name__, "id": str(entity_id), "operation": "db.delete"},
        )

    def keyset_store(
        self,
        session: AsyncSession,
        *,
        scope: str,
        statement: Select[Any] | None = None,
    ) -> SQLAlchemyKeysetStore[T]:
        """Entity store over `statement` (default: every row) in `order_by` order."""
        return SQLAlchemyKeysetStore(
            session,
            statement if statement is not None else select(self.model),
            self.order_by or [(self._pk_attr(), "asc")],
            scope=scope,
        )

    async def paginate(
        self,
        session: AsyncSession,
        *,
        scope: str,
        statement: Select[Any] | None = None,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
        codec: CursorCodec | None = None,
        default_page_size: int = 10,
        max_page_size: int = 100,
    ) -> Connection[T]:
        """Return one Relay page of `statement` (see core.pagination.paginate).

        Example:
            conn = await repo.paginate(session, scope="blogs", first=10, after=cursor)
        """
        connection = await paginate(
            self.keyset_store(session, scope=scope, statement=statement),
            first=first,
            after=after,
            last=last,
            before=before,
            codec=codec,
            default_page_size=default_page_size,
            max_page_size=max_page_size,
        )
        self._lazy.debug(
            lambda: f"db.paginate: {self.model.__name__}[{scope}] -> {len(connection.edges)} items, "
            f"has_next={connection.page_info.has_next_page}"
        )
        return connection

    def _order_clauses(self) -> list[Any]:
        if not self.order_by:
            return [self._pk_attr().asc()]
        return [column.asc() if direction == "asc" else column.desc() for column, direction in self.order_by]

    def _pk_attr(self) -> InstrumentedAttribute[Any]:
        mapper = sa_inspect(self.model)
        return getattr(self.model, mapper.primary_key[0].name)

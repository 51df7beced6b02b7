"""Entity stores consumed by the paginator.

An EntityStore exposes one ordered collection through keyset reads. The
SQLAlchemy implementation uses the seek method: instead of OFFSET it adds a
WHERE clause that starts strictly after (or before) a key.

    For ORDER BY created_at ASC, id ASC with key (t1, id1):
    WHERE (created_at > t1) OR (created_at = t1 AND id > id1)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal, Protocol
from uuid import UUID

from sqlalchemy import Select, and_, or_, select
from sqlalchemy.exc import SQLAlchemyError

from blog_service.core.database.exceptions import StoreError
from blog_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute

Key = tuple[Any, ...]
SortDirection = Literal["asc", "desc"]


class EntityStore[T](Protocol):
    """Ordered collection that can be read in windows around a key.

    Keys are tuples of the values of `key_fields`, in order. "After" and
    "before" are relative to the collection's canonical order.
    """

    @property
    def scope(self) -> str:
        """Cursor scope identifying this collection."""
        ...

    @property
    def key_fields(self) -> tuple[str, ...]: ...

    def key_of(self, node: T) -> Key: ...

    def parse_key(self, raw: Mapping[str, Any]) -> Key:
        """Convert decoded cursor values to a key. Raises ValueError/TypeError."""
        ...

    async def fetch_after(self, key: Key | None, limit: int) -> Sequence[T]:
        """Up to `limit` nodes strictly after `key`, in canonical order."""
        ...

    async def fetch_before(self, key: Key | None, limit: int) -> Sequence[T]:
        """Up to `limit` nodes strictly before `key`, nearest first (reverse order)."""
        ...

    async def exists_after(self, key: Key, *, inclusive: bool = False) -> bool: ...

    async def exists_before(self, key: Key, *, inclusive: bool = False) -> bool: ...


class SQLAlchemyKeysetStore[T]:
    """EntityStore over a SQLAlchemy select statement.

    Args:
        session: Session used for every read.
        statement: Base select of the entity (filters already applied).
        order_by: Unique ordering as (column, direction) pairs; the last
            column must be a unique tie-break such as the primary key.
        scope: Cursor scope for this collection.

    Example:
        store = SQLAlchemyKeysetStore(
            session,
            select(Entry).where(Entry.blog_id == blog.id),
            order_by=[(Entry.created_at, "asc"), (Entry.id, "asc")],
            scope=f"entries:{blog.id}",
        )
    """

    __slots__ = ("_session", "_statement", "_order_by", "_scope", "_lazy")

    def __init__(
        self,
        session: AsyncSession,
        statement: Select[Any],
        order_by: Sequence[tuple[InstrumentedAttribute[Any], SortDirection]],
        *,
        scope: str,
    ) -> None:
        if not order_by:
            msg = "order_by must name at least one column"
            raise ValueError(msg)
        self._session = session
        self._statement = statement
        self._order_by = tuple(order_by)
        self._scope = scope
        self._lazy = get_lazy_logger(__name__)

    @property
    def scope(self) -> str:
        return self._scope

    @property
    def key_fields(self) -> tuple[str, ...]:
        return tuple(column.key for column, _ in self._order_by)

    def key_of(self, node: T) -> Key:
        return tuple(getattr(node, column.key) for column, _ in self._order_by)

    def parse_key(self, raw: Mapping[str, Any]) -> Key:
        return tuple(
            self._convert_value(column, raw[column.key]) for column, _ in self._order_by
        )

    async def fetch_after(self, key: Key | None, limit: int) -> Sequence[T]:
        stmt = self._statement
        if key is not None:
            stmt = stmt.where(self._seek_condition(key, forward=True))
        stmt = stmt.order_by(*self._ordering(reverse=False)).limit(limit)
        return await self._fetch("fetch_after", stmt, key, limit)

    async def fetch_before(self, key: Key | None, limit: int) -> Sequence[T]:
        stmt = self._statement
        if key is not None:
            stmt = stmt.where(self._seek_condition(key, forward=False))
        stmt = stmt.order_by(*self._ordering(reverse=True)).limit(limit)
        return await self._fetch("fetch_before", stmt, key, limit)

    async def exists_after(self, key: Key, *, inclusive: bool = False) -> bool:
        condition = self._seek_condition(key, forward=True, inclusive=inclusive)
        return await self._exists("exists_after", condition, key)

    async def exists_before(self, key: Key, *, inclusive: bool = False) -> bool:
        condition = self._seek_condition(key, forward=False, inclusive=inclusive)
        return await self._exists("exists_before", condition, key)

    async def _fetch(self, operation: str, stmt: Select[Any], key: Key | None, limit: int) -> Sequence[T]:
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(operation, {"scope": self._scope}) from exc
        rows = result.scalars().all()
        self._lazy.debug(
            lambda: f"store.{operation}: {self._scope}(key={key}, limit={limit}) -> {len(rows)} rows"
        )
        return rows

    async def _exists(self, operation: str, condition: Any, key: Key) -> bool:
        stmt = select(self._statement.where(condition).exists())
        try:
            found = bool(await self._session.scalar(stmt))
        except SQLAlchemyError as exc:
            raise StoreError(operation, {"scope": self._scope}) from exc
        self._lazy.debug(lambda: f"store.{operation}: {self._scope}(key={key}) -> {found}")
        return found

    def _ordering(self, *, reverse: bool) -> list[Any]:
        clauses = []
        for column, direction in self._order_by:
            ascending = (direction == "asc") != reverse
            clauses.append(column.asc() if ascending else column.desc())
        return clauses

    def _seek_condition(self, key: Key, *, forward: bool, inclusive: bool = False) -> Any:
        """Build the keyset WHERE clause.

        For columns (a, b, c) with key (v1, v2, v3):
            (a op v1) OR
            (a = v1 AND b op v2) OR
            (a = v1 AND b = v2 AND c op v3)
        plus (a = v1 AND b = v2 AND c = v3) when inclusive. 'op' is > or <
        depending on the column's direction and the seek direction.
        """
        or_conditions = []
        for i, (column, direction) in enumerate(self._order_by):
            eq_conditions = [self._order_by[j][0] == key[j] for j in range(i)]
            if forward == (direction == "asc"):
                compare_cond = column > key[i]
            else:
                compare_cond = column < key[i]
            or_conditions.append(and_(*eq_conditions, compare_cond) if eq_conditions else compare_cond)

        if inclusive:
            or_conditions.append(
                and_(*(column == key[i] for i, (column, _) in enumerate(self._order_by)))
            )
        return or_(*or_conditions)

    @staticmethod
    def _convert_value(column: InstrumentedAttribute[Any], value: Any) -> Any:
        """Convert a JSON cursor value back to the column's Python type."""
        type_name = type(column.type).__name__
        if type_name in ("DateTime", "TIMESTAMP"):
            if not isinstance(value, str):
                msg = f"{column.key} must be an ISO-8601 string"
                raise TypeError(msg)
            parsed = datetime.fromisoformat(value)
            if parsed.tzinfo is None:
                return parsed.replace(tzinfo=UTC)
            try:
                return parsed.astimezone(UTC)
            except OverflowError as exc:
                msg = f"{column.key} is outside the supported date range"
                raise ValueError(msg) from exc
        if type_name in ("Uuid", "UUID"):
            if not isinstance(value, str):
                msg = f"{column.key} must be a UUID string"
                raise TypeError(msg)
            return UUID(value)
        if type_name in ("Integer", "BigInteger", "SmallInteger"):
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{column.key} must be an integer"
                raise TypeError(msg)
            return value
        if not isinstance(value, str):
            msg = f"{column.key} must be a string"
            raise TypeError(msg)
        return value

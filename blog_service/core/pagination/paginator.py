"""Relay-style connection paginator.

paginate() turns Relay arguments (first/after, last/before) into at most
three keyset reads against an EntityStore and returns a Connection whose
edges are always in ascending (canonical) order.

Direction rules:
    - `first` given: forward. `last` and `before` are ignored.
    - otherwise `last` given: backward.
    - otherwise `before` given without `after`: backward, default page size.
    - otherwise: forward, default page size.

Page info is probed, never derived from a total count:
    - the traversal direction reads one row past the window;
    - the opposite direction asks the store whether anything exists beyond
      the first (or last) returned node. For an empty window the probe is
      made against the supplied cursor key, inclusively.

Pagination is stateless: everything needed to resume lives in the cursor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from blog_service.core.pagination.cursor import CursorCodec, get_cursor_codec
from blog_service.core.pagination.exceptions import (
    InvalidCursorError,
    PaginationValidationError,
)
from blog_service.core.pagination.schemas import Connection, Edge, PageInfo
from blog_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from blog_service.core.pagination.store import EntityStore, Key

lazy_logger = get_lazy_logger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _validate_size(field: str, value: int | None, max_page_size: int) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise PaginationValidationError(field, f"'{field}' must be an integer")
    if value < 0:
        raise PaginationValidationError(field, f"'{field}' must be non-negative, got {value}")
    if value > max_page_size:
        raise PaginationValidationError(
            field, f"'{field}' must not exceed {max_page_size}, got {value}"
        )


def _validate_cursor_arg(field: str, value: str | None) -> None:
    if value is None:
        return
    if not isinstance(value, str):
        raise PaginationValidationError(field, f"'{field}' must be a string cursor")
    if not value:
        raise PaginationValidationError(field, f"'{field}' must not be empty")


def _decode_key(
    store: EntityStore[Any], codec: CursorCodec, field: str, cursor: str | None
) -> Key | None:
    if cursor is None:
        return None
    try:
        data = codec.decode(cursor, scope=store.scope, key_fields=store.key_fields)
    except InvalidCursorError as exc:
        exc.field = field
        exc.details["field"] = field
        raise
    try:
        return store.parse_key(data.keys)
    except (TypeError, ValueError) as exc:
        raise InvalidCursorError(
            "keys", "Cursor does not match the collection ordering", field=field
        ) from exc


async def paginate[T](
    store: EntityStore[T],
    *,
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
    codec: CursorCodec | None = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
) -> Connection[T]:
    """Return one page of `store` as a Relay connection.

    Args:
        store: Collection to read.
        first: Page size for forward pagination (wins over `last`).
        after: Cursor to start strictly after.
        last: Page size for backward pagination.
        before: Cursor to end strictly before.
        codec: Cursor codec; defaults to the one built from settings.
        default_page_size: Size used when neither first nor last is given.
        max_page_size: Largest accepted first/last.

    Raises:
        PaginationValidationError: Malformed arguments. Raised before any read.
        InvalidCursorError: `after`/`before` is not a cursor of this collection.
        StoreError: The store failed.
    """
    _validate_size("first", first, max_page_size)
    _validate_size("last", last, max_page_size)
    _validate_cursor_arg("after", after)
    _validate_cursor_arg("before", before)

    codec = codec or get_cursor_codec()
    after_key = _decode_key(store, codec, "after", after)
    before_key = _decode_key(store, codec, "before", before)

    if first is not None:
        forward, limit = True, first
    elif last is not None:
        forward, limit = False, last
    elif before_key is not None and after_key is None:
        forward, limit = False, default_page_size
    else:
        forward, limit = True, default_page_size

    if forward:
        rows = list(await store.fetch_after(after_key, limit + 1))
        has_next = len(rows) > limit
        nodes = rows[:limit]
        if nodes:
            has_previous = await store.exists_before(store.key_of(nodes[0]))
        elif after_key is not None:
            has_previous = await store.exists_before(after_key, inclusive=True)
        else:
            has_previous = False
    else:
        rows = list(await store.fetch_before(before_key, limit + 1))
        has_previous = len(rows) > limit
        nodes = rows[:limit]
        nodes.reverse()
        if nodes:
            has_next = await store.exists_after(store.key_of(nodes[-1]))
        elif before_key is not None:
            has_next = await store.exists_after(before_key, inclusive=True)
        else:
            has_next = False

    connection = _build_connection(store, codec, nodes, has_previous, has_next)
    lazy_logger.debug(
        lambda: (
            f"paginate: {store.scope}({'first' if forward else 'last'}={limit}) -> "
            f"{len(nodes)} edges, has_prev={has_previous}, has_next={has_next}"
        )
    )
    return connection


def _build_connection[T](
    store: EntityStore[T],
    codec: CursorCodec,
    nodes: Sequence[T],
    has_previous: bool,
    has_next: bool,
) -> Connection[T]:
    key_fields = store.key_fields
    edges = tuple(
        Edge(node=node, cursor=codec.encode(store.scope, dict(zip(key_fields, store.key_of(node), strict=True))))
        for node in nodes
    )
    return Connection(
        edges=edges,
        page_info=PageInfo(
            has_previous_page=has_previous,
            has_next_page=has_next,
            start_cursor=edges[0].cursor if edges else None,
            end_cursor=edges[-1].cursor if edges else None,
        ),
    )

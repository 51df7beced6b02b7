"""Cursor-based (keyset) pagination with Relay connections.

    from blog_service.core.pagination import SQLAlchemyKeysetStore, paginate

    store = SQLAlchemyKeysetStore(
        session,
        select(Blog),
        order_by=[(Blog.created_at, "asc"), (Blog.id, "asc")],
        scope="blogs",
    )
    connection = await paginate(store, first=10, after=cursor)
"""

from __future__ import annotations

from blog_service.core.database.exceptions import StoreError
from blog_service.core.pagination.cursor import (
    CURSOR_VERSION,
    CursorCodec,
    CursorData,
    get_cursor_codec,
)
from blog_service.core.pagination.exceptions import (
    InvalidCursorError,
    PaginationError,
    PaginationValidationError,
)
from blog_service.core.pagination.paginator import paginate
from blog_service.core.pagination.schemas import Connection, Edge, PageInfo
from blog_service.core.pagination.store import EntityStore, Key, SQLAlchemyKeysetStore

__all__ = [
    "CURSOR_VERSION",
    "Connection",
    "CursorCodec",
    "CursorData",
    "Edge",
    "EntityStore",
    "InvalidCursorError",
    "Key",
    "PageInfo",
    "PaginationError",
    "PaginationValidationError",
    "SQLAlchemyKeysetStore",
    "StoreError",
    "get_cursor_codec",
    "paginate",
]

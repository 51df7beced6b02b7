"""Database infrastructure: engine, session factory and lifecycle hooks."""

from __future__ import annotations

from blog_service.infra.database.session import (
    AsyncSessionLocal,
    build_engine,
    build_sessionmaker,
    close_database,
    create_tables,
    engine,
    get_async_session,
    init_database,
)

__all__ = [
    "AsyncSessionLocal",
    "build_engine",
    "build_sessionmaker",
    "close_database",
    "create_tables",
    "engine",
    "get_async_session",
    "init_database",
]

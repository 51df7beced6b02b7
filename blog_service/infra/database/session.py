"""Database engine and session management (async SQLAlchemy)."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_service.core.settings import get_app_settings, get_db_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

db_settings = get_db_settings()
app_settings = get_app_settings()


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine for `url`.

    In-memory SQLite gets a StaticPool so every session shares the single
    connection that holds the database.
    """
    kwargs: dict[str, Any] = {"echo": echo}
    if url.startswith("sqlite") and ":memory:" in url:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_async_engine(url, **kwargs)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(db_settings.url, echo=db_settings.echo or app_settings.debug)
AsyncSessionLocal = build_sessionmaker(engine)


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Get async database session.

    Example:
        async with get_async_session() as session:
            result = await session.execute(select(Blog))
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create all tables known to the model metadata (idempotent)."""
    # Importing the models registers their tables on Base.metadata
    import blog_service.features.blogs.models
    import blog_service.features.entries.models
    import blog_service.features.users.models  # noqa: F401
    from blog_service.core.database import Base

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_database() -> None:
    """Check connectivity and optionally create tables.

    Raises:
        ConnectionError: If the database cannot be reached.
    """
    logger.info("Initializing database connection", extra={"create_tables": db_settings.create_tables})

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        if db_settings.create_tables:
            await create_tables()
    except SQLAlchemyError as e:
        logger.exception("Database initialization failed", extra={"error": str(e)})
        msg = f"Unable to connect to database: {e}"
        raise ConnectionError(msg) from e

    logger.info(
        "Database connection established successfully",
        extra={"driver": engine.dialect.driver},
    )


async def close_database() -> None:
    """Dispose the engine's connection pool. Called during shutdown."""
    logger.info("Closing database connection")
    await engine.dispose()
    logger.info("Database connection closed successfully")

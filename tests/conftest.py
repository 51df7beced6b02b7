"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings for an isolated in-memory run
    - Database Fixtures: SQLAlchemy engine and session on sqlite+aiosqlite
    - Data Fixtures: factories for users, blogs and entries
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests run without external infrastructure (set before any settings load)
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DB_CREATE_TABLES", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("GRAPHQL_DISABLE_PLAYGROUND", "true")
os.environ.setdefault("PAGINATION_DEFAULT_PAGE_SIZE", "10")
os.environ.setdefault("PAGINATION_MAX_PAGE_SIZE", "100")

from blog_service.core.pagination import get_cursor_codec  # noqa: E402
from blog_service.core.settings import clear_all_caches  # noqa: E402
from blog_service.features.blogs.models import Blog  # noqa: E402
from blog_service.features.entries.models import Entry  # noqa: E402
from blog_service.features.users.models import User  # noqa: E402
from blog_service.infra.database import build_engine, build_sessionmaker, create_tables  # noqa: E402

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

# Fixed clock for created_at so ordering in assertions is deterministic
BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _reset_settings_caches() -> None:
    """Settings and the cursor codec are cached; start every test from the environment."""
    clear_all_caches()
    get_cursor_codec.cache_clear()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory SQLite database with all tables created."""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await create_tables(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session on the test database.

    Example:
        async def test_create_blog(db_session):
            db_session.add(Blog(handle="notes", name="Notes", user_id=user.id))
            await db_session.commit()
    """
    session_factory = build_sessionmaker(db_engine)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


# ============================================================================
# Data Fixtures
# ============================================================================

UserFactory = Callable[..., Awaitable[User]]
BlogFactory = Callable[..., Awaitable[Blog]]
EntryFactory = Callable[..., Awaitable[list[Entry]]]


@pytest.fixture
def make_user(db_session: AsyncSession) -> UserFactory:
    """Factory creating committed users.

    Example:
        alice = await make_user("alice")  # alice@example.com
    """

    async def _make(username: str, email: str | None = None) -> User:
        user = User(username=username, email=email or f"{username}@example.com")
        db_session.add(user)
        await db_session.commit()
        return user

    return _make


@pytest.fixture
def make_blog(db_session: AsyncSession) -> BlogFactory:
    """Factory creating committed blogs with an explicit creation time."""

    async def _make(owner: User, handle: str, *, name: str | None = None, offset: int = 0) -> Blog:
        blog = Blog(
            handle=handle,
            name=name or handle.title(),
            user_id=owner.id,
            created_at=BASE_TIME + timedelta(seconds=offset),
        )
        db_session.add(blog)
        await db_session.commit()
        return blog

    return _make


@pytest.fixture
def make_entries(db_session: AsyncSession) -> EntryFactory:
    """Factory creating `count` entries one second apart, oldest first."""

    async def _make(blog: Blog, count: int, *, prefix: str = "Entry") -> list[Entry]:
        entries = [
            Entry(
                blog_id=blog.id,
                title=f"{prefix} {i}",
                content=f"Content of {prefix.lower()} {i}",
                created_at=BASE_TIME + timedelta(seconds=i),
            )
            for i in range(count)
        ]
        db_session.add_all(entries)
        await db_session.commit()
        return entries

    return _make


@pytest.fixture
async def alice(make_user: UserFactory) -> User:
    return await make_user("alice")


@pytest.fixture
async def bob(make_user: UserFactory) -> User:
    return await make_user("bob")


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(db_session: AsyncSession) -> FastAPI:
    """FastAPI application whose requests use the test session.

    The lifespan is not run by ASGITransport, so nothing touches the
    module-level engine.
    """
    from blog_service.app.main import create_app
    from blog_service.core.dependencies.database import get_db_session

    application = create_app()

    async def _test_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    application.dependency_overrides[get_db_session] = _test_session
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for the app.

    Example:
        async def test_health(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

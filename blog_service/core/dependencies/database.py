"""Database dependencies for FastAPI route handlers.

`get_db_session()` ties a session to the HTTP request. Writes are committed
explicitly by the mutation that made them; anything left uncommitted when
the request ends is rolled back by session close.

Outside FastAPI (scripts, background work) use
`blog_service.infra.database.get_async_session()` instead.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from blog_service.infra.database import get_async_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency yielding a request-scoped database session.

    Example:
        @router.get("/health/db")
        async def db_check(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with get_async_session() as session:
        yield session

"""Repository for the users feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from blog_service.core.database.exceptions import StoreError
from blog_service.core.database.repository import BaseRepository
from blog_service.features.users.models import User

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    order_by = ((User.created_at, "asc"), (User.id, "asc"))

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(self, session: AsyncSession, email: str) -> User | None:
        """Get a user by email (case-insensitive; emails are stored lowercase)."""
        user = await self.get_by(session, User.email, email.strip().lower())
        self._lazy.debug(lambda: f"db.get_by_email({email!r}) -> {user is not None}")
        return user

    async def get_many(self, session: AsyncSession, ids: Sequence[UUID]) -> Sequence[User]:
        """Fetch users by id in one query (order not guaranteed)."""
        if not ids:
            return []
        try:
            result = await session.execute(select(User).where(User.id.in_(ids)))
        except SQLAlchemyError as exc:
            raise StoreError("get_many", {"entity": "User", "count": len(ids)}) from exc
        users = result.scalars().all()

        self._lazy.debug(lambda: f"db.get_many: User x{len(ids)} -> {len(users)} found")
        return users


_user_repository: UserRepository | None = None


def get_user_repository() -> UserRepository:
    """Get the shared UserRepository instance."""
    global _user_repository
    if _user_repository is None:
        _user_repository = UserRepository()
    return _user_repository

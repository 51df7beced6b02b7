"""DataLoader for batch-loading users.

Listing a page of blogs and asking for each blog's `user` would otherwise
issue one query per blog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from strawberry.dataloader import DataLoader

from blog_service.features.users.repository import get_user_repository

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from blog_service.features.users.models import User


class UserDataLoader:
    """Batch-load users by ID, cached for the lifetime of one request.

    Usage:
        loader = UserDataLoader(session)
        user = await loader.load(uuid)  # Batched with other loads
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._loader: DataLoader[UUID, User | None] = DataLoader(load_fn=self._batch_load_users)

    async def _batch_load_users(self, ids: list[UUID]) -> list[User | None]:
        """Load all requested users in one query, in request order; None for missing."""
        if not ids:
            return []

        users = await get_user_repository().get_many(self._session, ids)
        by_id = {user.id: user for user in users}
        return [by_id.get(id_) for id_ in ids]

    async def load(self, id_: UUID) -> User | None:
        return await self._loader.load(id_)

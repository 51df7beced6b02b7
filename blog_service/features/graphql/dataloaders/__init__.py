"""DataLoader container and factory.

Each GraphQL request gets its own DataLoader instances so batching and
caching never cross request boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from blog_service.features.graphql.dataloaders.users import UserDataLoader

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


@dataclass
class DataLoaders:
    """Container for all DataLoader instances (one per request).

    Usage in resolver:
        user = await info.context.loaders.users.load(blog.user_id)
    """

    users: UserDataLoader


def create_dataloaders(session: AsyncSession) -> DataLoaders:
    """Factory for creating request-scoped DataLoaders."""
    return DataLoaders(users=UserDataLoader(session))


__all__ = ["DataLoaders", "UserDataLoader", "create_dataloaders"]

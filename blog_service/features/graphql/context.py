"""Per-request GraphQL context.

Built by ``get_graphql_context`` in the router for every operation. It carries
the request's database session, a fresh set of DataLoaders, the user resolved
from the identity header and the request id used as the log correlation id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response

    from blog_service.features.graphql.dataloaders import DataLoaders
    from blog_service.features.users.models import User


@dataclass
class GraphQLContext(BaseContext):
    """Context available to resolvers as ``info.context``.

    Resolvers never open their own sessions. Mutations commit through
    ``unit_of_work`` on ``session``, and ``loaders`` live only as long as
    this context so cached users never leak between requests.
    """

    request: Request | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    session: AsyncSession = field(default=None)  # type: ignore[assignment]
    loaders: DataLoaders = field(default=None)  # type: ignore[assignment]
    user: User | None = None
    correlation_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


__all__ = ["GraphQLContext"]

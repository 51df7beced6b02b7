"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint (mounted at GRAPHQL_PATH by app/router.py)
- GraphQL IDE on GET, unless disabled
- Request context with identity, session, and DataLoaders
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, cast

from fastapi import BackgroundTasks, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from blog_service.core.dependencies.auth import OptionalUser
from blog_service.core.dependencies.database import get_db_session
from blog_service.core.settings import get_graphql_settings
from blog_service.features.graphql.context import GraphQLContext
from blog_service.features.graphql.dataloaders import create_dataloaders
from blog_service.features.graphql.schema import schema

logger = logging.getLogger(__name__)


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    user: OptionalUser,
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies.

    Following Strawberry's FastAPI integration pattern, this provides
    the standard context fields (request, response, background_tasks)
    plus application-specific dependencies. The session is the same one
    used to resolve the user, since FastAPI caches dependencies per request.
    """
    correlation_id = getattr(request.state, "request_id", None)

    return GraphQLContext(
        request=request,
        response=response,
        background_tasks=background_tasks,
        session=session,
        loaders=create_dataloaders(session),
        user=user,
        correlation_id=correlation_id,
    )


def create_graphql_router() -> GraphQLRouter:
    """Create GraphQL router with settings-based configuration.

    The router serves its root; mount it with `prefix=GRAPHQL_PATH`.
    """
    settings = get_graphql_settings()

    graphql_app: GraphQLRouter = GraphQLRouter(
        schema,
        context_getter=cast("Any", get_graphql_context),
        graphql_ide=settings.get_graphql_ide() or None,
    )

    logger.debug("GraphQL router created", extra={"path": settings.path, "ide": settings.get_graphql_ide()})
    return graphql_app


__all__ = ["create_graphql_router", "get_graphql_context"]

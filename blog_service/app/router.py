"""Router registration for the FastAPI application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blog_service.features.graphql.router import create_graphql_router
from blog_service.features.health.router import router as health_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from blog_service.core.settings import GraphQLSettings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, graphql_settings: GraphQLSettings) -> None:
    """Mount the health probes and the GraphQL endpoint.

    Args:
        app: FastAPI application instance.
        graphql_settings: Controls the GraphQL mount path and IDE.
    """
    app.include_router(health_router)

    app.include_router(
        create_graphql_router(),
        prefix=graphql_settings.path,
        tags=["graphql"],
    )
    logger.info(
        "GraphQL endpoint mounted",
        extra={"path": graphql_settings.path, "ide": graphql_settings.get_graphql_ide()},
    )

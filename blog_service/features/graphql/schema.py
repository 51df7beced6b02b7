"""GraphQL schema assembly.

Combines the Query and Mutation root types into a single schema with the
configured extensions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import strawberry
from strawberry.extensions import QueryDepthLimiter

from blog_service.features.graphql.error_handler import ErrorClassificationExtension, log_error
from blog_service.features.graphql.resolvers import Mutation, Query

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

# blog -> entries -> edges -> node -> field is 5 deep; leave room for nested mutations
MAX_QUERY_DEPTH = 10


class BlogSchema(strawberry.Schema):
    """Schema that logs errors through the service's error handler."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            log_error(error, execution_context)


def get_extensions() -> list:
    """Strawberry extensions, outermost first."""
    extensions = [
        QueryDepthLimiter(max_depth=MAX_QUERY_DEPTH),
        ErrorClassificationExtension,
    ]
    logger.debug(f"GraphQL extensions configured: depth limit={MAX_QUERY_DEPTH}")
    return extensions


schema = BlogSchema(
    query=Query,
    mutation=Mutation,
    extensions=get_extensions(),
)

__all__ = ["MAX_QUERY_DEPTH", "BlogSchema", "get_extensions", "schema"]

"""GraphQL API: schema, context and FastAPI router."""

from __future__ import annotations

from blog_service.features.graphql.context import GraphQLContext
from blog_service.features.graphql.schema import schema

__all__ = ["GraphQLContext", "schema"]

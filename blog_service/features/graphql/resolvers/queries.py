"""Query resolvers for the GraphQL API.

Provides read operations:
- blogs(first, after, last, before): Page through all blogs
- blog(handle): Get a blog by handle
- blogForUser(userId): Get a user's blog
- me: The authenticated user
"""

from __future__ import annotations

import logging
from uuid import UUID

import strawberry
from strawberry.types import Info

from blog_service.features.blogs.service import BlogService
from blog_service.features.graphql.context import GraphQLContext
from blog_service.features.graphql.types.base import AfterArg, BeforeArg, FirstArg, LastArg
from blog_service.features.graphql.types.blogs import BlogConnection, BlogType
from blog_service.features.graphql.types.users import UserType

logger = logging.getLogger(__name__)


@strawberry.type(description="Root query type")
class Query:
    """GraphQL Query resolvers."""

    @strawberry.field(description="Page through all blogs, oldest first")
    async def blogs(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> BlogConnection:
        """List blogs with Relay-style cursor pagination.

        `first` wins when both `first` and `last` are given. Without either,
        a forward page of the configured default size is returned.
        """
        connection = await BlogService(info.context.session).list_blogs(
            first=first,
            after=after,
            last=last,
            before=before,
        )
        return BlogConnection.from_connection(connection)

    @strawberry.field(description="Get a blog by its handle")
    async def blog(self, info: Info[GraphQLContext, None], handle: str) -> BlogType | None:
        blog = await BlogService(info.context.session).get_by_handle(handle)
        return BlogType.from_model(blog) if blog is not None else None

    @strawberry.field(description="Get the blog of a user")
    async def blog_for_user(
        self,
        info: Info[GraphQLContext, None],
        user_id: strawberry.ID,
    ) -> BlogType | None:
        """The user's earliest blog; None for unknown users or malformed IDs."""
        try:
            user_uuid = UUID(str(user_id))
        except ValueError:
            return None

        blog = await BlogService(info.context.session).get_for_user(user_uuid)
        return BlogType.from_model(blog) if blog is not None else None

    @strawberry.field(description="The authenticated user, or null")
    def me(self, info: Info[GraphQLContext, None]) -> UserType | None:
        user = info.context.user
        return UserType.from_model(user) if user is not None else None


__all__ = ["Query"]

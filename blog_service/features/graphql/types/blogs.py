"""GraphQL types for blogs.

A BlogType keeps its ORM row privately so nested fields (owner, entries,
a single entry) can be resolved against it:

    query {
      blog(handle: "notes") {
        name
        user { username }
        entries(first: 5) { edges { node { title } } pageInfo { hasNextPage } }
      }
    }
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

import strawberry
from strawberry.types import Info

from blog_service.core.pagination import Connection
from blog_service.features.blogs.models import Blog
from blog_service.features.blogs.schemas import BlogCreate, BlogUpdate
from blog_service.features.entries.service import EntryService
from blog_service.features.graphql.context import GraphQLContext
from blog_service.features.graphql.types.base import (
    AfterArg,
    BeforeArg,
    FirstArg,
    LastArg,
    PageInfoType,
    as_utc,
)
from blog_service.features.graphql.types.entries import EntryConnection, EntryType
from blog_service.features.graphql.types.users import UserType


@strawberry.type(name="Blog", description="A blog owned by one user")
class BlogType:
    id: strawberry.ID
    handle: str
    name: str
    created: datetime
    updated: datetime
    user_id: strawberry.ID

    model: strawberry.Private[Blog]

    @classmethod
    def from_model(cls, blog: Blog) -> BlogType:
        return cls(
            id=strawberry.ID(str(blog.id)),
            handle=blog.handle,
            name=blog.name,
            created=as_utc(blog.created_at),
            updated=as_utc(blog.updated_at),
            user_id=strawberry.ID(str(blog.user_id)),
            model=blog,
        )

    @strawberry.field(description="Owner of the blog")
    async def user(self, info: Info[GraphQLContext, None]) -> UserType | None:
        user = await info.context.loaders.users.load(self.model.user_id)
        return UserType.from_model(user) if user is not None else None

    @strawberry.field(description="Entries of the blog, oldest first")
    async def entries(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> EntryConnection:
        connection = await EntryService(info.context.session).list_entries(
            self.model,
            first=first,
            after=after,
            last=last,
            before=before,
        )
        return EntryConnection.from_connection(connection)

    @strawberry.field(description="A single entry of this blog")
    async def entry(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> EntryType | None:  # noqa: A002
        try:
            entry_uuid = UUID(str(id))
        except ValueError:
            return None

        entry = await EntryService(info.context.session).find_entry(self.model, entry_uuid)
        return EntryType.from_model(entry) if entry is not None else None


@strawberry.type(name="BlogEdge", description="Edge containing a blog node and cursor")
class BlogEdge:
    node: BlogType
    cursor: str


@strawberry.type(name="BlogConnection", description="Paginated list of blogs")
class BlogConnection:
    """Relay-style connection for blog pagination."""

    edges: list[BlogEdge]
    page_info: PageInfoType

    @classmethod
    def from_connection(cls, connection: Connection[Blog]) -> BlogConnection:
        return cls(
            edges=[
                BlogEdge(node=BlogType.from_model(edge.node), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )


@strawberry.input(name="BlogCreateInput", description="Input for creating a blog")
class BlogCreateInput:
    handle: str
    name: str

    def to_pydantic(self) -> BlogCreate:
        return BlogCreate(handle=self.handle, name=self.name)


@strawberry.input(name="BlogUpdateInput", description="Input for renaming a blog")
class BlogUpdateInput:
    name: str

    def to_pydantic(self) -> BlogUpdate:
        return BlogUpdate(name=self.name)


__all__ = [
    "BlogConnection",
    "BlogCreateInput",
    "BlogEdge",
    "BlogType",
    "BlogUpdateInput",
]

"""Mutation resolvers for the GraphQL API.

Writes are grouped under the object they change:

    mutation {
      createBlog(blog: {handle: "notes", name: "Notes"}) { id }
      blog(handle: "notes") {
        createEntry(entry: {title: "Hello"}) { id }
        entry(id: "...") { publish { published } }
      }
    }

Every mutation requires an authenticated user. Ownership is enforced by the
services, so a non-owner gets one AUTHORIZATION_ERROR for each write.
Each write commits its own unit of work.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

import strawberry
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.types import Info

from blog_service.core.database.exceptions import StoreError
from blog_service.core.exceptions import AppException, NotFoundException, ValidationException
from blog_service.features.blogs.models import Blog
from blog_service.features.blogs.service import BlogService
from blog_service.features.entries.models import Entry
from blog_service.features.entries.service import EntryService
from blog_service.features.graphql.context import GraphQLContext
from blog_service.features.graphql.permissions import IsAuthenticated
from blog_service.features.graphql.types.blogs import BlogCreateInput, BlogType, BlogUpdateInput
from blog_service.features.graphql.types.entries import EntryCreateInput, EntryType, EntryUpdateInput

logger = logging.getLogger(__name__)


@asynccontextmanager
async def unit_of_work(session: AsyncSession) -> AsyncIterator[None]:
    """Commit when the block succeeds.

    Domain errors (AppException) propagate without a rollback so the objects
    already loaded in the session stay readable. Anything else rolls back.
    A failed commit (a unique constraint lost to a concurrent write) rolls
    back and surfaces as StoreError.
    """
    try:
        yield
    except AppException:
        # Ownership and existence checks fail before anything is written
        raise
    except Exception:
        await session.rollback()
        raise

    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StoreError("commit", {"error": type(exc).__name__}) from exc


def parse_id(value: strawberry.ID, *, field: str = "id") -> UUID:
    try:
        return UUID(str(value))
    except ValueError as exc:
        raise ValidationException(
            detail=f"'{value}' is not a valid ID",
            extra={"field": field},
        ) from exc


@strawberry.type(description="Changes to one entry of a blog")
class EntryMutations:
    blog: strawberry.Private[Blog]
    entry_id: strawberry.Private[UUID]

    @strawberry.field(description="Edit the entry's title and/or content")
    async def update(self, info: Info[GraphQLContext, None], entry: EntryUpdateInput) -> EntryType:
        ctx = info.context
        payload = entry.to_pydantic()
        async with unit_of_work(ctx.session):
            updated = await EntryService(ctx.session).update_entry(ctx.user, self.blog, self.entry_id, payload)
            result = EntryType.from_model(updated)
        return result

    @strawberry.field(description="Publish the entry")
    async def publish(self, info: Info[GraphQLContext, None]) -> EntryType:
        ctx = info.context
        async with unit_of_work(ctx.session):
            published = await EntryService(ctx.session).publish_entry(ctx.user, self.blog, self.entry_id)
            result = EntryType.from_model(published)
        return result

    @strawberry.field(description="Delete the entry and return it")
    async def delete(self, info: Info[GraphQLContext, None]) -> EntryType:
        ctx = info.context
        async with unit_of_work(ctx.session):
            deleted = await EntryService(ctx.session).delete_entry(ctx.user, self.blog, self.entry_id)
            result = EntryType.from_model(deleted)
        logger.info(
            "Entry deleted",
            extra={"entry_id": str(self.entry_id), "handle": self.blog.handle},
        )
        return result


@strawberry.type(description="Changes to one blog")
class BlogMutations:
    blog: strawberry.Private[Blog]

    @strawberry.field(description="Rename the blog")
    async def update(self, info: Info[GraphQLContext, None], blog: BlogUpdateInput) -> BlogType:
        ctx = info.context
        payload = blog.to_pydantic()
        async with unit_of_work(ctx.session):
            updated = await BlogService(ctx.session).update_blog(ctx.user, self.blog, payload)
            result = BlogType.from_model(updated)
        return result

    @strawberry.field(description="Delete the blog with all its entries and return it")
    async def delete(self, info: Info[GraphQLContext, None]) -> BlogType:
        ctx = info.context
        async with unit_of_work(ctx.session):
            deleted = await BlogService(ctx.session).delete_blog(ctx.user, self.blog)
            result = BlogType.from_model(deleted)
        return result

    @strawberry.field(description="Write a new draft entry")
    async def create_entry(
        self,
        info: Info[GraphQLContext, None],
        entry: EntryCreateInput,
    ) -> EntryType:
        ctx = info.context
        payload = entry.to_pydantic()
        async with unit_of_work(ctx.session):
            created: Entry = await EntryService(ctx.session).create_entry(ctx.user, self.blog, payload)
            result = EntryType.from_model(created)
        return result

    @strawberry.field(description="Select an entry of this blog to change")
    async def entry(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> EntryMutations | None:  # noqa: A002
        entry_id = parse_id(id)
        entry = await EntryService(info.context.session).get_entry(self.blog, entry_id)
        return EntryMutations(blog=self.blog, entry_id=entry.id)


@strawberry.type(description="Root mutation type")
class Mutation:
    """GraphQL Mutation resolvers."""

    @strawberry.mutation(description="Create a blog owned by the caller", permission_classes=[IsAuthenticated])
    async def create_blog(self, info: Info[GraphQLContext, None], blog: BlogCreateInput) -> BlogType:
        ctx = info.context
        payload = blog.to_pydantic()
        async with unit_of_work(ctx.session):
            created = await BlogService(ctx.session).create_blog(ctx.user, payload)
            result = BlogType.from_model(created)
        return result

    @strawberry.mutation(description="Select a blog to change", permission_classes=[IsAuthenticated])
    async def blog(self, info: Info[GraphQLContext, None], handle: str) -> BlogMutations | None:
        blog = await BlogService(info.context.session).get_by_handle(handle)
        if blog is None:
            raise NotFoundException(
                detail=f"Blog '{handle}' not found",
                type="blog-not-found",
                extra={"handle": handle},
            )
        return BlogMutations(blog=blog)


__all__ = ["BlogMutations", "EntryMutations", "Mutation", "unit_of_work"]

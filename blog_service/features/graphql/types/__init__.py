"""Strawberry types exposed by the GraphQL API."""

from __future__ import annotations

from blog_service.features.graphql.types.base import PageInfoType
from blog_service.features.graphql.types.blogs import (
    BlogConnection,
    BlogCreateInput,
    BlogEdge,
    BlogType,
    BlogUpdateInput,
)
from blog_service.features.graphql.types.entries import (
    EntryConnection,
    EntryCreateInput,
    EntryEdge,
    EntryType,
    EntryUpdateInput,
)
from blog_service.features.graphql.types.users import UserType

__all__ = [
    "BlogConnection",
    "BlogCreateInput",
    "BlogEdge",
    "BlogType",
    "BlogUpdateInput",
    "EntryConnection",
    "EntryCreateInput",
    "EntryEdge",
    "EntryType",
    "EntryUpdateInput",
    "PageInfoType",
    "UserType",
]

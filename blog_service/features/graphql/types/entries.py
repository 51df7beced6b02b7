"""GraphQL types for blog entries.

EntryType is built from the ORM model; the inputs are validated again by
the EntryCreate/EntryUpdate Pydantic schemas before reaching the service.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import strawberry

from blog_service.features.entries.schemas import EntryCreate, EntryUpdate
from blog_service.features.graphql.types.base import PageInfoType, as_utc

if TYPE_CHECKING:
    from blog_service.core.pagination import Connection
    from blog_service.features.entries.models import Entry


@strawberry.type(name="Entry", description="A post in a blog")
class EntryType:
    id: strawberry.ID
    blog_id: strawberry.ID
    title: str
    content: str
    published: datetime | None
    created: datetime
    updated: datetime

    @classmethod
    def from_model(cls, entry: Entry) -> EntryType:
        return cls(
            id=strawberry.ID(str(entry.id)),
            blog_id=strawberry.ID(str(entry.blog_id)),
            title=entry.title,
            content=entry.content,
            published=as_utc(entry.published_at),
            created=as_utc(entry.created_at),
            updated=as_utc(entry.updated_at),
        )


@strawberry.type(name="EntryEdge", description="Edge containing an entry node and cursor")
class EntryEdge:
    node: EntryType
    cursor: str


@strawberry.type(name="EntryConnection", description="Paginated list of a blog's entries")
class EntryConnection:
    """Relay-style connection for entry pagination."""

    edges: list[EntryEdge]
    page_info: PageInfoType

    @classmethod
    def from_connection(cls, connection: Connection[Entry]) -> EntryConnection:
        return cls(
            edges=[
                EntryEdge(node=EntryType.from_model(edge.node), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )


@strawberry.input(name="EntryCreateInput", description="Input for writing a new entry")
class EntryCreateInput:
    title: str
    content: str = ""

    def to_pydantic(self) -> EntryCreate:
        return EntryCreate(title=self.title, content=self.content)


@strawberry.input(name="EntryUpdateInput", description="Input for editing an entry")
class EntryUpdateInput:
    """Omitted fields are left unchanged."""

    title: str | None = None
    content: str | None = None

    def to_pydantic(self) -> EntryUpdate:
        return EntryUpdate(title=self.title, content=self.content)


__all__ = [
    "EntryConnection",
    "EntryCreateInput",
    "EntryEdge",
    "EntryType",
    "EntryUpdateInput",
]

"""Relay connection containers returned by the paginator.

These are plain frozen dataclasses rather than pydantic models: nodes are
ORM instances, and the GraphQL layer converts them to its own types.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class PageInfo:
    """Window boundaries and whether more nodes exist on either side."""

    has_previous_page: bool = False
    has_next_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None


@dataclass(slots=True, frozen=True)
class Edge[T]:
    """A node paired with the cursor that resumes iteration after it."""

    node: T
    cursor: str


@dataclass(slots=True, frozen=True)
class Connection[T]:
    """Edges in ascending key order plus page info.

    Example:
        conn = await paginate(store, first=2)
        for edge in conn.edges:
            print(edge.cursor, edge.node.title)
        if conn.page_info.has_next_page:
            conn = await paginate(store, first=2, after=conn.page_info.end_cursor)
    """

    edges: Sequence[Edge[T]] = field(default_factory=tuple)
    page_info: PageInfo = field(default_factory=PageInfo)

    @property
    def nodes(self) -> list[T]:
        return [edge.node for edge in self.edges]

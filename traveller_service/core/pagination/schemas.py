"""Relay connection schemas.

These are the transport-neutral shapes produced by the connection
builder. The GraphQL layer mirrors them with Strawberry types.

All models are frozen: a connection is built once per request and never
mutated afterwards.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following the GraphQL Relay specification.

    Attributes:
        has_next_page: Whether items exist after the current page
        has_previous_page: Whether items exist before the current page
        start_cursor: Cursor of the first edge, None for an empty page
        end_cursor: Cursor of the last edge, None for an empty page
    """

    model_config = ConfigDict(frozen=True)

    has_next_page: bool = Field(description="Whether more items exist")
    has_previous_page: bool = Field(description="Whether previous items exist")
    start_cursor: str | None = Field(default=None, description="Cursor of the first item")
    end_cursor: str | None = Field(default=None, description="Cursor of the last item")


class Edge(BaseModel, Generic[T]):
    """A node paired with its cursor."""

    model_config = ConfigDict(frozen=True)

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")


class Connection(BaseModel, Generic[T]):
    """A page of results in the Relay connection shape.

    ``total_count`` is the size of the whole logical collection, not of
    the page.

    Usage:
        connection = connection_from_sequence(worlds, PageArgs(first=10), ModelConnectionFactory())
        next_args = PageArgs(first=10, after=connection.page_info.end_cursor)
    """

    model_config = ConfigDict(frozen=True)

    edges: list[Edge] = Field(default_factory=list, description="Items with cursors")
    nodes: list[T] = Field(default_factory=list, description="Items without edge wrappers")
    page_info: PageInfo = Field(description="Pagination metadata")
    total_count: int = Field(ge=0, description="Size of the full collection")

    @property
    def cursors(self) -> list[str]:
        """Cursors of the edges on this page, in order."""
        return [edge.cursor for edge in self.edges]

"""Base GraphQL types: the Relay ``Node`` interface and ``PageInfo``."""

from __future__ import annotations

import strawberry


@strawberry.interface(description="An object with a globally unique, opaque ID")
class Node:
    """Relay Node interface.

    ``id`` is the base64 global id (``Type:databaseId``) accepted by the
    ``node`` and ``nodes`` queries.
    """

    id: strawberry.ID = strawberry.field(description="Global object identifier")


@strawberry.type(
    name="PageInfo",
    description="Pagination metadata following GraphQL Relay specification",
)
class PageInfoType:
    """GraphQL Relay PageInfo for cursor-based pagination.

    Mirrors traveller_service.core.pagination.schemas.PageInfo.
    """

    has_previous_page: bool = strawberry.field(description="Whether previous items exist")
    has_next_page: bool = strawberry.field(description="Whether more items exist")
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last item",
    )


__all__ = ["Node", "PageInfoType"]

"""Assemble Relay connections from collections and pre-paged results.

Two entry points share one per-entity :class:`ConnectionFactory`:

- :func:`connection_from_sequence` slices a fully materialized, ordered
  collection. Every cursor is the item's index in the *unsliced*
  collection, so ``after=<endCursor>`` keeps working page after page.
- :func:`connection_from_page` wraps a page already limited by the
  database. Cursors are positions within that page (optionally shifted by
  ``index_offset``) and the navigation flags are taken from the page.

Example:
    factory = ModelConnectionFactory()
    first_page = connection_from_sequence(worlds, PageArgs(first=3), factory)
    second_page = connection_from_sequence(
        worlds, PageArgs(first=3, after=first_page.page_info.end_cursor), factory
    )
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from traveller_service.core.pagination.cursor import CursorCodec
from traveller_service.core.pagination.schemas import Connection, Edge, PageInfo
from traveller_service.core.pagination.slicer import PageArgs, compute_slice

logger = logging.getLogger(__name__)


@runtime_checkable
class ConnectionFactory[NodeT, EdgeT, ConnectionT](Protocol):
    """Per-entity callbacks used to build edges and the final connection."""

    def create_edge(self, node: NodeT, cursor: str) -> EdgeT: ...

    def get_cursor(self, edge: EdgeT) -> str: ...

    def create_connection(
        self,
        edges: list[EdgeT],
        nodes: list[NodeT],
        has_next_page: bool,
        has_previous_page: bool,
        start_cursor: str | None,
        end_cursor: str | None,
        total_count: int,
    ) -> ConnectionT: ...


class PagedResult(Protocol):
    """What :func:`connection_from_page` needs from a backing-store page.

    :class:`traveller_service.core.database.repository.SearchResult`
    satisfies this protocol.
    """

    @property
    def items(self) -> Sequence[Any]: ...

    @property
    def total(self) -> int: ...

    @property
    def has_next(self) -> bool: ...

    @property
    def has_prev(self) -> bool: ...


class ModelConnectionFactory:
    """Default factory producing the pydantic :class:`Connection` schema."""

    def create_edge(self, node: Any, cursor: str) -> Edge[Any]:
        return Edge(node=node, cursor=cursor)

    def get_cursor(self, edge: Edge[Any]) -> str:
        return edge.cursor

    def create_connection(
        self,
        edges: list[Edge[Any]],
        nodes: list[Any],
        has_next_page: bool,
        has_previous_page: bool,
        start_cursor: str | None,
        end_cursor: str | None,
        total_count: int,
    ) -> Connection[Any]:
        return Connection(
            edges=edges,
            nodes=nodes,
            page_info=PageInfo(
                has_next_page=has_next_page,
                has_previous_page=has_previous_page,
                start_cursor=start_cursor,
                end_cursor=end_cursor,
            ),
            total_count=total_count,
        )


def _finish[NodeT, EdgeT, ConnectionT](
    factory: ConnectionFactory[NodeT, EdgeT, ConnectionT],
    edges: list[EdgeT],
    nodes: list[NodeT],
    *,
    has_next_page: bool,
    has_previous_page: bool,
    total_count: int,
) -> ConnectionT:
    start_cursor = factory.get_cursor(edges[0]) if edges else None
    end_cursor = factory.get_cursor(edges[-1]) if edges else None
    return factory.create_connection(
        edges,
        nodes,
        has_next_page,
        has_previous_page,
        start_cursor,
        end_cursor,
        total_count,
    )


def connection_from_sequence[NodeT, EdgeT, ConnectionT](
    items: Sequence[NodeT],
    args: PageArgs | None,
    factory: ConnectionFactory[NodeT, EdgeT, ConnectionT],
) -> ConnectionT:
    """Build a connection over a fully materialized, ordered collection.

    Args:
        items: The whole ordered collection
        args: Relay arguments (None returns everything)
        factory: Per-entity edge/connection callbacks

    Returns:
        Whatever ``factory.create_connection`` produces
    """
    bounds = compute_slice(len(items), args)
    edges: list[EdgeT] = []
    nodes: list[NodeT] = []
    for index in bounds.indices():
        node = items[index]
        edges.append(factory.create_edge(node, CursorCodec.encode(index)))
        nodes.append(node)

    logger.debug(
        "Sliced collection of %d items to [%d, %d)",
        bounds.total_count,
        bounds.start,
        bounds.end,
    )
    return _finish(
        factory,
        edges,
        nodes,
        has_next_page=bounds.has_next_page,
        has_previous_page=bounds.has_previous_page,
        total_count=bounds.total_count,
    )


def connection_from_page[NodeT, EdgeT, ConnectionT](
    page: PagedResult,
    factory: ConnectionFactory[NodeT, EdgeT, ConnectionT],
    *,
    index_offset: int = 0,
) -> ConnectionT:
    """Build a connection from a page already limited by the backing store.

    Cursors are the page-local index of each item, so they are only valid
    for the same query shape. Pass the page's offset as ``index_offset``
    to mint cursors that address the whole collection instead.

    Args:
        page: Result exposing ``items``, ``total``, ``has_next`` and ``has_prev``
        factory: Per-entity edge/connection callbacks
        index_offset: Added to every local index before encoding

    Returns:
        Whatever ``factory.create_connection`` produces
    """
    if index_offset < 0:
        raise ValueError(f"index_offset must be non-negative, got {index_offset}")

    edges: list[EdgeT] = []
    nodes: list[NodeT] = []
    for local_index, node in enumerate(page.items):
        edges.append(factory.create_edge(node, CursorCodec.encode(index_offset + local_index)))
        nodes.append(node)

    return _finish(
        factory,
        edges,
        nodes,
        has_next_page=page.has_next,
        has_previous_page=page.has_prev,
        total_count=page.total,
    )

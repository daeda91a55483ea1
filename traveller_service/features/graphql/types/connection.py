"""Relay Edge/Connection type factory and its builder adapter.

Annotations here refer to local variables of the factory, so this module
does not use postponed annotations.

Example:
    WorldEdge, WorldConnection = create_connection_types(WorldNode, "World")
    factory = StrawberryConnectionFactory(WorldEdge, WorldConnection, WorldNode.from_model)

    connection = connection_from_sequence(worlds, args, factory)
"""

from collections.abc import Callable
from typing import Any

import strawberry

from traveller_service.features.graphql.types.base import PageInfoType
from traveller_service.infra.metrics.prometheus import connection_page_size


def create_connection_types(node_type: type, type_name_prefix: str) -> tuple[type, type]:
    """Create the ``<Prefix>Edge`` and ``<Prefix>Connection`` types for a node type.

    Args:
        node_type: Strawberry type of the connection's nodes
        type_name_prefix: Prefix for the schema names (e.g. "World")

    Returns:
        (edge_type, connection_type)
    """

    @strawberry.type(
        name=f"{type_name_prefix}Edge",
        description=f"Edge containing a {type_name_prefix} node and cursor",
    )
    class Edge:
        node: node_type = strawberry.field(description="The item at the end of the edge")  # type: ignore[valid-type]
        cursor: str = strawberry.field(description="Opaque cursor for this edge")

    @strawberry.type(
        name=f"{type_name_prefix}Connection",
        description=f"Relay connection of {type_name_prefix} nodes",
    )
    class Connection:
        edges: list[Edge] = strawberry.field(description="Edges for the requested page")
        nodes: list[node_type] = strawberry.field(  # type: ignore[valid-type]
            description="Nodes of the requested page, in edge order"
        )
        page_info: PageInfoType = strawberry.field(description="Pagination information")
        total_count: int = strawberry.field(
            description="Number of items in the whole collection, not just this page"
        )

    Edge.__name__ = Edge.__qualname__ = f"{type_name_prefix}Edge"
    Connection.__name__ = Connection.__qualname__ = f"{type_name_prefix}Connection"

    return Edge, Connection


class StrawberryConnectionFactory:
    """ConnectionFactory producing Strawberry edge/connection objects.

    Rows are converted to node types once, when their edge is created;
    the connection's ``nodes`` list reuses the edges' nodes.
    """

    def __init__(
        self,
        edge_type: type,
        connection_type: type,
        to_node: Callable[[Any], Any],
    ) -> None:
        self.edge_type = edge_type
        self.connection_type = connection_type
        self.to_node = to_node

    def create_edge(self, node: Any, cursor: str) -> Any:
        return self.edge_type(node=self.to_node(node), cursor=cursor)

    def get_cursor(self, edge: Any) -> str:
        return edge.cursor

    def create_connection(
        self,
        edges: list[Any],
        nodes: list[Any],
        has_next_page: bool,
        has_previous_page: bool,
        start_cursor: str | None,
        end_cursor: str | None,
        total_count: int,
    ) -> Any:
        connection_page_size.labels(connection=self.connection_type.__name__).observe(len(edges))
        return self.connection_type(
            edges=edges,
            nodes=[edge.node for edge in edges],
            page_info=PageInfoType(
                has_next_page=has_next_page,
                has_previous_page=has_previous_page,
                start_cursor=start_cursor,
                end_cursor=end_cursor,
            ),
            total_count=total_count,
        )


__all__ = ["StrawberryConnectionFactory", "create_connection_types"]

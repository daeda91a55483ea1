"""Tests for Relay object identification through ``node`` and ``nodes``."""

from __future__ import annotations

import base64
from typing import Any

import pytest

from traveller_service.core.relay import NodeType, to_global_id
from traveller_service.features.graphql.node import NODE_LOOKUPS, node_registry
from traveller_service.features.graphql.schema import schema
from traveller_service.features.graphql.types import NODE_TYPES, WorldNode
from traveller_service.infra.metrics.prometheus import REGISTRY

NODE_QUERY = """
query Node($id: ID!) {
    node(id: $id) {
        __typename
        id
        ... on World { name uwp databaseId }
        ... on Character { name status }
        ... on Spaceship { name type }
    }
}
"""

OVERSIZED_WORLD_ID = base64.b64encode(b"World:" + b"9" * 5000).decode("ascii")

NODES_QUERY = """
query Nodes($ids: [ID!]!) {
    nodes(ids: $ids) {
        __typename
        id
    }
}
"""


async def execute(context, query: str, **variables: Any) -> dict[str, Any]:
    result = await schema.execute(query, variable_values=variables, context_value=context)
    assert result.errors is None, result.errors
    assert result.data is not None
    return result.data


class TestNodeRegistry:
    """Test suite for the application's node registry."""

    def test_every_node_type_registered(self):
        """Test that each entity kind has a lookup and the registry is frozen."""
        assert node_registry.frozen is True
        assert node_registry.type_tags == frozenset(str(t) for t in NodeType)
        assert set(NODE_LOOKUPS) == set(NodeType)

    def test_schema_names_match_type_tags(self):
        """Test that every GraphQL node type is named after its global id tag."""
        schema_names = {t.__strawberry_definition__.name for t in NODE_TYPES}

        assert schema_names == {str(t) for t in NodeType}

    async def test_lookup_returns_graphql_type(self, graphql_context):
        """Test that the registry resolves to GraphQL objects, not rows."""
        world = await node_registry.node(to_global_id("World", 1), graphql_context)

        assert isinstance(world, WorldNode)
        assert world.name == "Regina"


class TestNodeQuery:
    """Test suite for the node query."""

    async def test_world(self, graphql_context):
        """Test fetching a world by global id with an inline fragment."""
        global_id = to_global_id("World", 1)
        data = await execute(graphql_context, NODE_QUERY, id=global_id)

        assert data["node"] == {
            "__typename": "World",
            "id": global_id,
            "name": "Regina",
            "uwp": "A788899-C",
            "databaseId": 1,
        }

    async def test_character(self, graphql_context):
        """Test that the concrete type is chosen from the global id."""
        data = await execute(graphql_context, NODE_QUERY, id=to_global_id("Character", 5))

        assert data["node"]["__typename"] == "Character"
        assert data["node"]["name"] == "Alexander Jamison"
        assert data["node"]["status"] == "DEAD"

    async def test_spaceship(self, graphql_context):
        """Test an equipment type with a renamed type field."""
        data = await execute(graphql_context, NODE_QUERY, id=to_global_id("Spaceship", 2))

        assert data["node"]["name"] == "Type-A Free Trader"
        assert data["node"]["type"] == "TRADER"

    async def test_id_round_trips_through_connection(self, graphql_context):
        """Test that ids returned by connections resolve through node."""
        listing = await execute(graphql_context, "{ skills(last: 1) { nodes { id name } } }")
        skill = listing["skills"]["nodes"][0]

        data = await execute(graphql_context, "query($id: ID!) { node(id: $id) { ... on Skill { name } } }", id=skill["id"])

        assert data["node"] == {"name": skill["name"]}

    @pytest.mark.parametrize(
        "global_id",
        [
            "garbage",
            to_global_id("World", 999),
            to_global_id("Starport", 1),
            to_global_id("World", -1),
            OVERSIZED_WORLD_ID,
        ],
    )
    async def test_unresolvable_ids_are_null(self, graphql_context, global_id: str):
        """Test that malformed, unknown and missing ids resolve to null without errors."""
        data = await execute(graphql_context, NODE_QUERY, id=global_id)

        assert data["node"] is None

    async def test_other_tenants_row_is_null(self, graphql_context, other_tenant):
        """Test that another tenant's row is hidden."""
        global_id = to_global_id("World", other_tenant["world_id"])
        data = await execute(graphql_context, NODE_QUERY, id=global_id)

        assert data["node"] is None

    async def test_resolution_metrics(self, graphql_context):
        """Test that lookups are counted by type and outcome."""
        labels_found = {"type": "World", "outcome": "found"}
        labels_missing = {"type": "World", "outcome": "missing"}
        found_before = REGISTRY.get_sample_value("graphql_node_resolutions_total", labels_found) or 0
        missing_before = REGISTRY.get_sample_value("graphql_node_resolutions_total", labels_missing) or 0

        await execute(graphql_context, NODE_QUERY, id=to_global_id("World", 1))
        await execute(graphql_context, NODE_QUERY, id=to_global_id("World", 999))

        assert REGISTRY.get_sample_value("graphql_node_resolutions_total", labels_found) == found_before + 1
        assert REGISTRY.get_sample_value("graphql_node_resolutions_total", labels_missing) == missing_before + 1


class TestNodesQuery:
    """Test suite for the nodes query."""

    async def test_mixed_types_in_order(self, graphql_context):
        """Test that results keep input order across entity kinds."""
        ids = [
            to_global_id("Weapon", 2),
            to_global_id("World", 3),
            to_global_id("Career", 1),
        ]
        data = await execute(graphql_context, NODES_QUERY, ids=ids)

        assert [n["__typename"] for n in data["nodes"]] == ["Weapon", "World", "Career"]
        assert [n["id"] for n in data["nodes"]] == ids

    async def test_unresolvable_ids_dropped(self, graphql_context, other_tenant):
        """Test that invalid, unknown, missing and foreign ids are skipped."""
        ids = [
            "garbage",
            to_global_id("Armor", 1),
            to_global_id("Starport", 1),
            to_global_id("Vehicle", 999),
            to_global_id("World", other_tenant["world_id"]),
            OVERSIZED_WORLD_ID,
            to_global_id("Vehicle", 2),
        ]
        data = await execute(graphql_context, NODES_QUERY, ids=ids)

        assert [n["__typename"] for n in data["nodes"]] == ["Armor", "Vehicle"]

    async def test_empty(self, graphql_context):
        """Test that an empty id list resolves to an empty list."""
        data = await execute(graphql_context, NODES_QUERY, ids=[])

        assert data["nodes"] == []

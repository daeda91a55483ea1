"""Tests for the GraphQL connections, executed against the schema directly."""

from __future__ import annotations

import base64
from typing import Any

import pytest

from traveller_service.core.pagination import CursorCodec
from traveller_service.core.relay import to_global_id
from traveller_service.core.settings import GraphQLSettings
from traveller_service.features.graphql.context import GraphQLContext
from traveller_service.features.graphql.schema import schema

WORLDS_QUERY = """
query Worlds($first: Int, $after: String, $last: Int, $before: String) {
    worlds(first: $first, after: $after, last: $last, before: $before) {
        edges {
            cursor
            node { name }
        }
        pageInfo {
            hasNextPage
            hasPreviousPage
            startCursor
            endCursor
        }
        totalCount
    }
}
"""

SEARCH_WORLDS_QUERY = """
query SearchWorlds($term: String, $first: Int, $after: String) {
    searchWorlds(term: $term, first: $first, after: $after) {
        edges { cursor node { name } }
        pageInfo { hasNextPage hasPreviousPage endCursor }
        totalCount
    }
}
"""


async def execute(context: GraphQLContext, query: str, **variables: Any) -> dict[str, Any]:
    result = await schema.execute(query, variable_values=variables, context_value=context)
    assert result.errors is None, result.errors
    assert result.data is not None
    return result.data


def names(connection: dict[str, Any]) -> list[str]:
    return [edge["node"]["name"] for edge in connection["edges"]]


class TestWorldsConnection:
    """Test suite for forward and backward pagination over worlds."""

    async def test_first_page(self, graphql_context):
        """Test the first page of a forward walk."""
        data = await execute(graphql_context, WORLDS_QUERY, first=3)
        worlds = data["worlds"]

        assert names(worlds) == ["Regina", "Efate", "Yori"]
        assert [edge["cursor"] for edge in worlds["edges"]] == ["MA==", "MQ==", "Mg=="]
        assert worlds["pageInfo"] == {
            "hasNextPage": True,
            "hasPreviousPage": False,
            "startCursor": "MA==",
            "endCursor": "Mg==",
        }
        assert worlds["totalCount"] == 7

    async def test_walk_forward_with_end_cursor(self, graphql_context):
        """Test that following endCursor visits every world once."""
        pages: list[list[str]] = []
        after = None
        while True:
            data = await execute(graphql_context, WORLDS_QUERY, first=3, after=after)
            pages.append(names(data["worlds"]))
            if not data["worlds"]["pageInfo"]["hasNextPage"]:
                break
            after = data["worlds"]["pageInfo"]["endCursor"]

        assert pages == [["Regina", "Efate", "Yori"], ["Jenghe", "Knorbes", "Alell"], ["Forboldn"]]

    async def test_last(self, graphql_context):
        """Test backward pagination from the end."""
        data = await execute(graphql_context, WORLDS_QUERY, last=2)

        assert names(data["worlds"]) == ["Alell", "Forboldn"]
        assert data["worlds"]["pageInfo"]["hasPreviousPage"] is True
        assert data["worlds"]["pageInfo"]["hasNextPage"] is False

    async def test_before(self, graphql_context):
        """Test that before stops at the cursor's position."""
        data = await execute(graphql_context, WORLDS_QUERY, before=CursorCodec.encode(3))

        assert names(data["worlds"]) == ["Regina", "Efate", "Yori"]
        assert data["worlds"]["pageInfo"]["hasNextPage"] is True

    async def test_first_and_last_compose_when_lenient(self, graphql_context):
        """Test that first then last narrow the page outside strict mode."""
        data = await execute(graphql_context, WORLDS_QUERY, first=3, last=2)

        assert names(data["worlds"]) == ["Efate", "Yori"]

    async def test_malformed_cursor_ignored_when_lenient(self, graphql_context):
        """Test that an unusable cursor is ignored outside strict mode."""
        data = await execute(graphql_context, WORLDS_QUERY, first=2, after="garbage")

        assert names(data["worlds"]) == ["Regina", "Efate"]

    async def test_empty_page(self, graphql_context):
        """Test that an empty page has null cursors."""
        data = await execute(graphql_context, WORLDS_QUERY, first=0)

        assert data["worlds"]["edges"] == []
        assert data["worlds"]["pageInfo"]["startCursor"] is None
        assert data["worlds"]["pageInfo"]["endCursor"] is None
        assert data["worlds"]["totalCount"] == 7

    async def test_last_zero_is_empty(self, graphql_context):
        """Test that last=0 also yields an empty page with null cursors."""
        data = await execute(graphql_context, WORLDS_QUERY, last=0)

        assert data["worlds"]["edges"] == []
        assert data["worlds"]["pageInfo"]["startCursor"] is None
        assert data["worlds"]["pageInfo"]["endCursor"] is None
        assert data["worlds"]["totalCount"] == 7

    async def test_oversized_cursor_ignored(self, graphql_context):
        """Test that a cursor holding thousands of digits is ignored, not an error."""
        after = base64.b64encode(b"1" * 5000).decode("ascii")

        data = await execute(graphql_context, WORLDS_QUERY, first=2, after=after)

        assert names(data["worlds"]) == ["Regina", "Efate"]

    async def test_other_tenant_sees_only_its_rows(self, graphql_context, other_tenant):
        """Test that connections are scoped to the context's tenant."""
        from traveller_service.core.dependencies.tenant import TenantContext

        context = GraphQLContext(
            session=graphql_context.session,
            tenant=TenantContext(tenant_id=other_tenant["tenant_id"]),
            settings=GraphQLSettings(),
        )
        data = await execute(context, WORLDS_QUERY)

        assert names(data["worlds"]) == ["Mora"]
        assert data["worlds"]["totalCount"] == 1


class TestStrictPagination:
    """Test suite for strict Relay argument validation."""

    @pytest.fixture
    def strict_context(self, graphql_context) -> GraphQLContext:
        return GraphQLContext(
            session=graphql_context.session,
            tenant=graphql_context.tenant,
            settings=GraphQLSettings(strict_relay_pagination=True, default_page_size=5, max_page_size=5),
        )

    @pytest.mark.parametrize(
        ("variables", "message"),
        [
            ({"first": 3, "last": 2}, "first` and `last"),
            ({"first": -1}, "non-negative"),
            ({"first": 50}, "maximum page size of 5"),
            ({"first": 2, "after": "garbage"}, "not a valid cursor"),
            ({"first": 2, "after": base64.b64encode(b"1" * 5000).decode("ascii")}, "not a valid cursor"),
        ],
    )
    async def test_rejects_non_standard_arguments(self, strict_context, variables, message):
        """Test that strict mode turns lenient cases into errors."""
        result = await schema.execute(WORLDS_QUERY, variable_values=variables, context_value=strict_context)

        assert result.errors is not None
        assert message in result.errors[0].message

    async def test_accepts_standard_arguments(self, strict_context):
        """Test that standard arguments still work in strict mode."""
        data = await execute(strict_context, WORLDS_QUERY, first=2, after=CursorCodec.encode(4))

        assert names(data["worlds"]) == ["Alell", "Forboldn"]


class TestSearchWorlds:
    """Test suite for database-paged search connections."""

    async def test_first_page(self, graphql_context):
        """Test the first page of matches."""
        data = await execute(graphql_context, SEARCH_WORLDS_QUERY, term="e", first=2)
        search = data["searchWorlds"]

        assert names(search) == ["Regina", "Efate"]
        assert search["pageInfo"] == {"hasNextPage": True, "hasPreviousPage": False, "endCursor": "MQ=="}
        assert search["totalCount"] == 5

    async def test_next_page_from_end_cursor(self, graphql_context):
        """Test that cursors are absolute positions in the search result."""
        data = await execute(graphql_context, SEARCH_WORLDS_QUERY, term="e", first=2, after="MQ==")
        search = data["searchWorlds"]

        assert names(search) == ["Jenghe", "Knorbes"]
        assert [edge["cursor"] for edge in search["edges"]] == ["Mg==", "Mw=="]
        assert search["pageInfo"]["hasPreviousPage"] is True
        assert search["pageInfo"]["hasNextPage"] is True

    async def test_last_page(self, graphql_context):
        """Test the final page of matches."""
        data = await execute(graphql_context, SEARCH_WORLDS_QUERY, term="e", first=2, after="Mw==")
        search = data["searchWorlds"]

        assert names(search) == ["Alell"]
        assert search["pageInfo"]["hasNextPage"] is False

    async def test_default_page_size(self, graphql_context):
        """Test that the default page size applies without first/last."""
        data = await execute(graphql_context, SEARCH_WORLDS_QUERY)

        assert len(data["searchWorlds"]["edges"]) == 7
        assert data["searchWorlds"]["totalCount"] == 7

    async def test_search_characters(self, graphql_context):
        """Test character search by name fragment."""
        data = await execute(
            graphql_context,
            "{ searchCharacters(term: \"jamison\") { nodes { name } totalCount } }",
        )

        assert [n["name"] for n in data["searchCharacters"]["nodes"]] == ["Jamison", "Alexander Jamison"]
        assert data["searchCharacters"]["totalCount"] == 2


ZONE_QUERY = """
query ByZone($zone: TravelZone!, $first: Int, $after: String) {
    worldsByTravelZone(travelZone: $zone, first: $first, after: $after) {
        edges { cursor node { name travelZone } }
        pageInfo { hasNextPage hasPreviousPage endCursor }
        totalCount
    }
}
"""


class TestFilteredConnections:
    """Test suite for worldsByTravelZone, worldsByType and skillsByCategory."""

    async def test_worlds_by_travel_zone(self, graphql_context):
        """Test that only worlds in the requested zone are listed."""
        data = await execute(graphql_context, ZONE_QUERY, zone="AMBER")
        connection = data["worldsByTravelZone"]

        assert names(connection) == ["Jenghe", "Alell"]
        assert {edge["node"]["travelZone"] for edge in connection["edges"]} == {"AMBER"}
        assert connection["totalCount"] == 2

    async def test_travel_zone_cursors_walk_the_filtered_list(self, graphql_context):
        """Test that cursors index the filtered list, so endCursor pages forward."""
        first = await execute(graphql_context, ZONE_QUERY, zone="AMBER", first=1)
        page_info = first["worldsByTravelZone"]["pageInfo"]

        second = await execute(
            graphql_context, ZONE_QUERY, zone="AMBER", first=1, after=page_info["endCursor"]
        )

        assert names(first["worldsByTravelZone"]) == ["Jenghe"]
        assert page_info == {"hasNextPage": True, "hasPreviousPage": False, "endCursor": "MA=="}
        assert names(second["worldsByTravelZone"]) == ["Alell"]
        assert second["worldsByTravelZone"]["pageInfo"]["hasNextPage"] is False
        assert second["worldsByTravelZone"]["pageInfo"]["hasPreviousPage"] is True

    async def test_travel_zone_scoped_to_tenant(self, graphql_context, other_tenant):
        """Test that another tenant's world in the same zone is not listed."""
        data = await execute(graphql_context, ZONE_QUERY, zone="GREEN")

        assert names(data["worldsByTravelZone"]) == ["Regina", "Efate", "Yori", "Knorbes"]

    async def test_worlds_by_type(self, graphql_context):
        """Test filtering worlds by their classification."""
        data = await execute(
            graphql_context, "{ worldsByType(type: GARDEN) { nodes { name type } totalCount } }"
        )

        assert data["worldsByType"] == {"nodes": [{"name": "Regina", "type": "GARDEN"}], "totalCount": 1}

    async def test_skills_by_category(self, graphql_context):
        """Test filtering skills by category with backward paging."""
        data = await execute(
            graphql_context,
            "{ skillsByCategory(category: SPACE, last: 1) { nodes { name } totalCount pageInfo { hasPreviousPage } } }",
        )
        connection = data["skillsByCategory"]

        assert connection["nodes"] == [{"name": "Astrogation"}]
        assert connection["totalCount"] == 2
        assert connection["pageInfo"]["hasPreviousPage"] is True

    async def test_empty_filter_result(self, graphql_context):
        """Test that a category with no rows is an empty connection."""
        data = await execute(
            graphql_context, "{ skillsByCategory(category: SOCIAL) { edges { cursor } totalCount } }"
        )

        assert data["skillsByCategory"] == {"edges": [], "totalCount": 0}


class TestOtherConnections:
    """Test suite for the remaining entity connections."""

    @pytest.mark.parametrize(
        ("field", "count"),
        [
            ("characters", 5),
            ("careers", 4),
            ("skills", 5),
            ("weapons", 3),
            ("armor", 2),
            ("vehicles", 2),
            ("spaceships", 2),
        ],
    )
    async def test_total_counts(self, graphql_context, field: str, count: int):
        """Test that every connection pages its own table."""
        query = f"{{ {field}(first: 1) {{ nodes {{ id databaseId }} totalCount pageInfo {{ hasNextPage }} }} }}"
        data = await execute(graphql_context, query)

        assert data[field]["totalCount"] == count
        assert len(data[field]["nodes"]) == 1
        assert data[field]["pageInfo"]["hasNextPage"] is True

    async def test_nodes_and_edges_agree(self, graphql_context):
        """Test that the nodes shortcut mirrors the edges."""
        data = await execute(
            graphql_context,
            "{ characters(last: 2) { edges { node { id } } nodes { id } } }",
        )
        connection = data["characters"]

        assert [edge["node"]["id"] for edge in connection["edges"]] == [n["id"] for n in connection["nodes"]]


class TestFieldNaming:
    """Test suite for exposed field names and enum values."""

    async def test_world_fields(self, graphql_context):
        """Test camelCase fields, the renamed type field and enum names."""
        data = await execute(
            graphql_context,
            "{ worlds(first: 1) { nodes { id databaseId name uwp type travelZone hexCoordinates techLevel } } }",
        )

        assert data["worlds"]["nodes"][0] == {
            "id": to_global_id("World", 1),
            "databaseId": 1,
            "name": "Regina",
            "uwp": "A788899-C",
            "type": "GARDEN",
            "travelZone": "GREEN",
            "hexCoordinates": "1910",
            "techLevel": 12,
        }

    async def test_depth_limit(self, graphql_context, monkeypatch):
        """Test that queries deeper than the configured limit are rejected."""
        from traveller_service.core.settings import clear_all_settings_caches
        from traveller_service.features.graphql.schema import create_schema

        monkeypatch.setenv("GRAPHQL_MAX_QUERY_DEPTH", "2")
        clear_all_settings_caches()
        shallow_schema = create_schema()

        result = await shallow_schema.execute(
            "{ worlds { edges { node { name } } } }", context_value=graphql_context
        )

        assert result.errors is not None
        assert "maximum operation depth" in result.errors[0].message

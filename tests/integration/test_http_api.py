"""End-to-end tests through the FastAPI app: tenancy header, health, metrics."""

from __future__ import annotations

import pytest

from traveller_service.core.relay import to_global_id

WORLD_NAMES_QUERY = "{ worlds { nodes { name } totalCount } }"


async def post_graphql(client, query: str, variables: dict | None = None, headers: dict | None = None):
    return await client.post(
        "/graphql",
        json={"query": query, "variables": variables or {}},
        headers=headers or {},
    )


class TestGraphQLEndpoint:
    """Test suite for POST /graphql."""

    async def test_default_tenant_fallback(self, client, seeded, other_tenant):
        """Test that requests without a tenant header use the default tenant."""
        response = await post_graphql(client, WORLD_NAMES_QUERY)

        assert response.status_code == 200
        body = response.json()
        assert "errors" not in body
        assert body["data"]["worlds"]["totalCount"] == 7

    async def test_tenant_header_by_name(self, client, seeded, other_tenant):
        """Test selecting a tenant by name."""
        response = await post_graphql(client, WORLD_NAMES_QUERY, headers={"X-Tenant-ID": "spinward"})

        assert response.json()["data"]["worlds"]["nodes"] == [{"name": "Mora"}]

    async def test_tenant_header_by_id(self, client, seeded, other_tenant):
        """Test selecting a tenant by numeric id."""
        response = await post_graphql(
            client, WORLD_NAMES_QUERY, headers={"X-Tenant-ID": str(other_tenant["tenant_id"])}
        )

        assert response.json()["data"]["worlds"]["totalCount"] == 1

    @pytest.mark.parametrize("header", ["99999999999999999999999", str(2**63)])
    async def test_out_of_range_tenant_id_falls_back(self, client, seeded, other_tenant, header: str):
        """Test that a numeric header beyond the key range falls back to the default tenant."""
        response = await post_graphql(client, WORLD_NAMES_QUERY, headers={"X-Tenant-ID": header})

        assert response.status_code == 200
        assert response.json()["data"]["worlds"]["totalCount"] == 7

    async def test_out_of_range_tenant_id_single_tenant_mode(self, client, db_session):
        """Test that an out-of-range header without a default tenant serves unscoped data."""
        response = await post_graphql(
            client, WORLD_NAMES_QUERY, headers={"X-Tenant-ID": "99999999999999999999999"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["worlds"]["totalCount"] == 0

    async def test_node_respects_tenant_header(self, client, seeded, other_tenant):
        """Test that node lookups are scoped by the request's tenant."""
        query = "query($id: ID!) { node(id: $id) { ... on World { name } } }"
        variables = {"id": to_global_id("World", other_tenant["world_id"])}

        hidden = await post_graphql(client, query, variables)
        visible = await post_graphql(client, query, variables, headers={"X-Tenant-ID": "spinward"})

        assert hidden.json()["data"]["node"] is None
        assert visible.json()["data"]["node"] == {"name": "Mora"}

    async def test_single_tenant_mode(self, client, db_session):
        """Test that without any tenant the API serves unscoped data."""
        response = await post_graphql(client, WORLD_NAMES_QUERY)

        assert response.status_code == 200
        assert response.json()["data"]["worlds"]["totalCount"] == 0

    async def test_required_tenant_missing(self, client, db_session, monkeypatch):
        """Test that a required but unresolvable tenant is a 400 problem response."""
        from traveller_service.core.settings import clear_all_settings_caches

        monkeypatch.setenv("APP_REQUIRE_TENANT", "true")
        clear_all_settings_caches()

        response = await post_graphql(client, WORLD_NAMES_QUERY, headers={"X-Tenant-ID": "nobody"})

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Tenant not specified"
        assert body["type"] == "tenant-required"


class TestHealthEndpoints:
    """Test suite for the health endpoints."""

    async def test_liveness(self, client):
        """Test that liveness reports the service."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["service"] == "traveller-service"

    async def test_readiness(self, client):
        """Test that readiness checks the database."""
        response = await client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "ok"}


class TestMiddleware:
    """Test suite for request ID and metrics middleware."""

    async def test_request_id_echoed(self, client):
        """Test that a client request id is echoed back."""
        response = await client.get("/health", headers={"X-Request-ID": "trace-me"})

        assert response.headers["x-request-id"] == "trace-me"

    async def test_request_id_generated(self, client):
        """Test that a request id is generated when absent."""
        response = await client.get("/health")

        assert len(response.headers["x-request-id"]) == 36

    async def test_process_time_header(self, client):
        """Test that responses carry their processing time."""
        response = await client.get("/health")

        assert float(response.headers["x-process-time"]) >= 0

    async def test_metrics_exposed(self, client, seeded):
        """Test that the scrape endpoint reports HTTP and GraphQL metrics."""
        await client.get("/health")
        await post_graphql(client, "{ worlds(first: 2) { totalCount } }")

        response = await client.get("/metrics")

        assert response.status_code == 200
        assert 'http_requests_total{method="GET",endpoint="/health",status="200"}' in response.text
        assert 'graphql_connection_page_size_count{connection="WorldConnection"}' in response.text


@pytest.mark.parametrize("path", ["/docs", "/openapi.json"])
async def test_docs_served_outside_production(client, path: str):
    """Test that API docs are available in the test environment."""
    response = await client.get(path)

    assert response.status_code == 200

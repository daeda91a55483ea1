"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings defaults for an isolated run
    - Database Fixtures: in-memory SQLite engine, session and seeded catalogue
    - GraphQL Fixtures: request context for executing the schema directly
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from traveller_service.features.tenants.seed import SeedSummary

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("GRAPHQL_STRICT_RELAY_PAGINATION", "false")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings from the environment for every test."""
    from traveller_service.core.settings import clear_all_settings_caches

    clear_all_settings_caches()
    yield
    clear_all_settings_caches()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine shared by every connection of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session over a freshly created schema, rolled back after the test."""
    from traveller_service.core.models import Base

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def seeded(db_session: AsyncSession) -> SeedSummary:
    """The demo catalogue under the tenant named ``default``."""
    from traveller_service.features.tenants.seed import seed_catalogue

    return await seed_catalogue(db_session, "default")


@pytest.fixture
async def other_tenant(db_session: AsyncSession, seeded: SeedSummary) -> dict[str, int]:
    """A second tenant owning a single world.

    Returns:
        Mapping with ``tenant_id`` and ``world_id``
    """
    from traveller_service.features.tenants.models import Tenant
    from traveller_service.features.worlds.models import TravelZone, World, WorldType

    tenant = Tenant(name="spinward", description="Second campaign")
    db_session.add(tenant)
    await db_session.flush()

    world = World(
        name="Mora",
        world_type=WorldType.HIGH_POPULATION,
        travel_zone=TravelZone.GREEN,
        hex_coordinates="3124",
        tenant_id=tenant.id,
    )
    world.apply_uwp("AA99AC7-F")
    db_session.add(world)
    await db_session.flush()
    return {"tenant_id": tenant.id, "world_id": world.id}


# ============================================================================
# GraphQL Fixtures
# ============================================================================


@pytest.fixture
def graphql_context(db_session: AsyncSession, seeded: SeedSummary):
    """GraphQL context scoped to the seeded tenant."""
    from traveller_service.core.dependencies.tenant import TenantContext
    from traveller_service.core.settings import GraphQLSettings
    from traveller_service.features.graphql.context import GraphQLContext

    return GraphQLContext(
        session=db_session,
        tenant=TenantContext(tenant_id=seeded.tenant_id, tenant_name="default"),
        settings=GraphQLSettings(),
    )


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(db_session: AsyncSession) -> FastAPI:
    """FastAPI application whose requests share the test session."""
    from traveller_service.app.main import create_app
    from traveller_service.core.dependencies.database import get_db_session

    application = create_app()

    async def override_db_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    application.dependency_overrides[get_db_session] = override_db_session
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client bound to the app (lifespan is not run)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

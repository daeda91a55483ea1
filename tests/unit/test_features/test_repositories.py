"""Tests for the tenant-aware repositories against SQLite."""

from __future__ import annotations

import pytest
from sqlalchemy import select

from traveller_service.core.database.exceptions import NotFoundError
from traveller_service.features.careers.models import SkillCategory
from traveller_service.features.careers.repository import get_skill_repository
from traveller_service.features.characters.repository import get_character_repository
from traveller_service.features.equipment.repository import get_spaceship_repository
from traveller_service.features.tenants.repository import get_tenant_repository
from traveller_service.features.worlds.models import TravelZone, World, WorldType
from traveller_service.features.worlds.repository import get_world_repository

SEEDED_WORLDS = ["Regina", "Efate", "Yori", "Jenghe", "Knorbes", "Alell", "Forboldn"]


class TestSeedCatalogue:
    """Test suite for the demo dataset."""

    async def test_counts(self, seeded):
        """Test the number of rows created per table."""
        assert seeded.counts == {
            "worlds": 7,
            "characters": 5,
            "careers": 4,
            "skills": 5,
            "weapons": 3,
            "armor": 2,
            "vehicles": 2,
            "spaceships": 2,
        }

    async def test_rows_belong_to_tenant(self, db_session, seeded):
        """Test that every seeded world is owned by the seeded tenant."""
        result = await db_session.execute(select(World.tenant_id).distinct())

        assert result.scalars().all() == [seeded.tenant_id]

    async def test_uwp_decoded_on_seed(self, db_session, seeded):
        """Test that seeded worlds carry decoded characteristics."""
        regina = await get_world_repository().get(db_session, 1)

        assert regina is not None
        assert regina.name == "Regina"
        assert regina.tech_level == 12


class TestTenantAwareRepository:
    """Test suite for tenant filtering and ordering."""

    async def test_list_for_tenant_ordered_by_id(self, db_session, seeded, other_tenant):
        """Test that listing returns only the tenant's rows in id order."""
        worlds = await get_world_repository().list_for_tenant(db_session, tenant_id=seeded.tenant_id)

        assert [w.name for w in worlds] == SEEDED_WORLDS

    async def test_list_unscoped_sees_everything(self, db_session, seeded, other_tenant):
        """Test that no tenant id disables filtering."""
        worlds = await get_world_repository().list_for_tenant(db_session, tenant_id=None)

        assert [w.name for w in worlds] == [*SEEDED_WORLDS, "Mora"]

    async def test_null_tenant_rows_hidden_when_scoped(self, db_session, seeded):
        """Test that unowned rows only appear in single-tenant mode."""
        orphan = World(name="Orphan", world_type=WorldType.ASTEROID, travel_zone=TravelZone.GREEN)
        orphan.apply_uwp("E000000-0")
        db_session.add(orphan)
        await db_session.flush()
        repo = get_world_repository()

        scoped = await repo.list_for_tenant(db_session, tenant_id=seeded.tenant_id)
        unscoped = await repo.list_for_tenant(db_session, tenant_id=None)

        assert "Orphan" not in [w.name for w in scoped]
        assert "Orphan" in [w.name for w in unscoped]

    async def test_get_for_tenant_hides_other_tenants(self, db_session, seeded, other_tenant):
        """Test that a row of another tenant is indistinguishable from a missing one."""
        repo = get_world_repository()

        assert await repo.get_for_tenant(db_session, other_tenant["world_id"], tenant_id=seeded.tenant_id) is None
        mora = await repo.get_for_tenant(db_session, other_tenant["world_id"], tenant_id=other_tenant["tenant_id"])
        assert mora is not None
        assert mora.name == "Mora"

    async def test_get_for_tenant_missing(self, db_session, seeded):
        """Test that unknown ids return None."""
        assert await get_world_repository().get_for_tenant(db_session, 999, tenant_id=None) is None

    async def test_count_for_tenant(self, db_session, seeded, other_tenant):
        """Test counting within a tenant."""
        repo = get_world_repository()

        assert await repo.count_for_tenant(db_session, tenant_id=seeded.tenant_id) == 7
        assert await repo.count_for_tenant(db_session, tenant_id=other_tenant["tenant_id"]) == 1

    async def test_search_for_tenant(self, db_session, seeded, other_tenant):
        """Test case-insensitive name search with paging."""
        result = await get_world_repository().search_for_tenant(
            db_session, "E", tenant_id=seeded.tenant_id, limit=2, offset=2
        )

        assert [w.name for w in result.items] == ["Jenghe", "Knorbes"]
        assert result.total == 5
        assert result.has_next is True
        assert result.has_prev is True
        assert result.page == 2
        assert result.pages == 3

    async def test_search_without_term(self, db_session, seeded):
        """Test that an empty term matches every row."""
        result = await get_character_repository().search_for_tenant(
            db_session, None, tenant_id=seeded.tenant_id, limit=10, offset=0
        )

        assert result.total == 5
        assert result.has_next is False

    async def test_search_limit_zero_counts_only(self, db_session, seeded):
        """Test that a zero limit returns no items but the full count."""
        result = await get_spaceship_repository().search_for_tenant(
            db_session, "type", tenant_id=seeded.tenant_id, limit=0, offset=0
        )

        assert result.items == []
        assert result.total == 2

    async def test_list_by_travel_zone(self, db_session, seeded):
        """Test the travel-zone filter."""
        worlds = await get_world_repository().list_by_travel_zone(
            db_session, TravelZone.AMBER, tenant_id=seeded.tenant_id
        )

        assert [w.name for w in worlds] == ["Jenghe", "Alell"]

    async def test_list_by_type(self, db_session, seeded):
        """Test the world type filter."""
        worlds = await get_world_repository().list_by_type(
            db_session, WorldType.DESERT, tenant_id=seeded.tenant_id
        )

        assert [w.name for w in worlds] == ["Yori"]

    async def test_list_by_category(self, db_session, seeded):
        """Test the skill category filter."""
        skills = await get_skill_repository().list_by_category(
            db_session, SkillCategory.SPACE, tenant_id=seeded.tenant_id
        )

        assert [s.name for s in skills] == ["Pilot", "Astrogation"]

    async def test_filter_for_tenant_combines_criteria(self, db_session, seeded, other_tenant):
        """Test that every criterion applies and other tenants stay hidden."""
        worlds = await get_world_repository().filter_for_tenant(
            db_session,
            World.travel_zone == TravelZone.GREEN,
            World.tech_level >= 12,
            tenant_id=seeded.tenant_id,
        )

        assert [w.name for w in worlds] == ["Regina", "Efate"]

    async def test_get_or_raise(self, db_session, seeded):
        """Test that get_or_raise raises for unknown ids."""
        with pytest.raises(NotFoundError) as exc_info:
            await get_world_repository().get_or_raise(db_session, 999)

        assert exc_info.value.model_name == "World"


class TestTenantRepository:
    """Test suite for TenantRepository.resolve."""

    async def test_resolve_by_name_and_id(self, db_session, seeded):
        """Test that tenants resolve by name or numeric id."""
        repo = get_tenant_repository()

        by_name = await repo.resolve(db_session, "default")
        by_id = await repo.resolve(db_session, str(seeded.tenant_id))

        assert by_name is not None
        assert by_name is by_id

    async def test_resolve_blank(self, db_session, seeded):
        """Test that a blank identifier resolves to nothing."""
        assert await get_tenant_repository().resolve(db_session, "   ") is None

    @pytest.mark.parametrize("identifier", [str(2**63), "9" * 23, "1" * 5000])
    async def test_resolve_out_of_range_id(self, db_session, seeded, identifier: str):
        """Test that ids beyond the 64-bit key range match no tenant instead of failing."""
        assert await get_tenant_repository().resolve(db_session, identifier) is None

"""Repository for the worlds feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from traveller_service.core.database.repository import TenantAwareRepository
from traveller_service.features.worlds.models import TravelZone, World, WorldType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession


class WorldRepository(TenantAwareRepository[World]):
    """Repository for World model."""

    def __init__(self) -> None:
        super().__init__(World)

    async def list_by_travel_zone(
        self,
        session: AsyncSession,
        zone: TravelZone,
        *,
        tenant_id: int | None,
    ) -> Sequence[World]:
        """Worlds in one travel zone, ordered by id."""
        return await self.filter_for_tenant(session, World.travel_zone == zone, tenant_id=tenant_id)

    async def list_by_type(
        self,
        session: AsyncSession,
        world_type: WorldType,
        *,
        tenant_id: int | None,
    ) -> Sequence[World]:
        return await self.filter_for_tenant(session, World.world_type == world_type, tenant_id=tenant_id)


_world_repository: WorldRepository | None = None


def get_world_repository() -> WorldRepository:
    """Get the shared WorldRepository instance."""
    global _world_repository
    if _world_repository is None:
        _world_repository = WorldRepository()
    return _world_repository

"""Repository for the tenants feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from traveller_service.core.database.repository import BaseRepository
from traveller_service.features.tenants.models import Tenant

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

# Primary keys are signed 64-bit integers
_MAX_TENANT_ID = 2**63 - 1


class TenantRepository(BaseRepository[Tenant]):
    """Repository for Tenant model."""

    def __init__(self) -> None:
        super().__init__(Tenant)

    async def get_by_name(self, session: AsyncSession, name: str) -> Tenant | None:
        return await self.get_by(session, Tenant.name, name)

    async def resolve(self, session: AsyncSession, identifier: str) -> Tenant | None:
        """Find a tenant from a header value: numeric id first, then name.

        Example:
            await repo.resolve(session, "3")        # tenant with id 3
            await repo.resolve(session, "imperium") # tenant named "imperium"

        Numeric values past the 64-bit key range match no tenant.
        """
        value = identifier.strip()
        if not value:
            return None
        if value.isascii() and value.isdigit():
            if len(value) > 19 or int(value) > _MAX_TENANT_ID:
                self._lazy.debug(lambda: f"db.resolve: tenant id {value[:24]!r} out of range")
                return None
            return await self.get(session, int(value))
        return await self.get_by_name(session, value)


_tenant_repository: TenantRepository | None = None


def get_tenant_repository() -> TenantRepository:
    """Get the shared TenantRepository instance."""
    global _tenant_repository
    if _tenant_repository is None:
        _tenant_repository = TenantRepository()
    return _tenant_repository

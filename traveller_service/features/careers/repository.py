"""Repositories for careers and skills."""

from __future__ import annotations

from typing import TYPE_CHECKING

from traveller_service.core.database.repository import TenantAwareRepository
from traveller_service.features.careers.models import Career, Skill, SkillCategory

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession


class CareerRepository(TenantAwareRepository[Career]):
    def __init__(self) -> None:
        super().__init__(Career)


class SkillRepository(TenantAwareRepository[Skill]):
    def __init__(self) -> None:
        super().__init__(Skill)

    async def list_by_category(
        self,
        session: AsyncSession,
        category: SkillCategory,
        *,
        tenant_id: int | None,
    ) -> Sequence[Skill]:
        """Skills in one category, ordered by id."""
        return await self.filter_for_tenant(session, Skill.category == category, tenant_id=tenant_id)


_career_repository: CareerRepository | None = None
_skill_repository: SkillRepository | None = None


def get_career_repository() -> CareerRepository:
    """Get the shared CareerRepository instance."""
    global _career_repository
    if _career_repository is None:
        _career_repository = CareerRepository()
    return _career_repository


def get_skill_repository() -> SkillRepository:
    """Get the shared SkillRepository instance."""
    global _skill_repository
    if _skill_repository is None:
        _skill_repository = SkillRepository()
    return _skill_repository

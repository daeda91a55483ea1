"""Repository for the characters feature."""

from __future__ import annotations

from traveller_service.core.database.repository import TenantAwareRepository
from traveller_service.features.characters.models import Character


class CharacterRepository(TenantAwareRepository[Character]):
    """Repository for Character model.

    Inherits tenant-scoped get/list/count/search from TenantAwareRepository.
    """

    def __init__(self) -> None:
        super().__init__(Character)


_character_repository: CharacterRepository | None = None


def get_character_repository() -> CharacterRepository:
    """Get the shared CharacterRepository instance."""
    global _character_repository
    if _character_repository is None:
        _character_repository = CharacterRepository()
    return _character_repository

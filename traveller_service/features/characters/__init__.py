"""Characters feature."""

from __future__ import annotations

from .models import Character, CharacterStatus
from .repository import CharacterRepository, get_character_repository

__all__ = ["Character", "CharacterRepository", "CharacterStatus", "get_character_repository"]

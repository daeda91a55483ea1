"""GraphQL types for the Characters feature."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import strawberry

from traveller_service.core.relay import NodeType, to_global_id
from traveller_service.features.characters.models import CharacterStatus
from traveller_service.features.graphql.types.base import Node
from traveller_service.features.graphql.types.connection import create_connection_types

if TYPE_CHECKING:
    from traveller_service.features.characters.models import Character

strawberry.enum(CharacterStatus, description="Whether a character is still in play")


@strawberry.type(name="Character", description="A player or non-player character")
class CharacterNode(Node):
    """GraphQL type for Character entity."""

    database_id: int = strawberry.field(description="Primary key in the catalogue database")
    name: str
    age: int
    gender: str | None
    credits: int = strawberry.field(description="Cash on hand in credits (Cr)")
    background: str | None
    status: CharacterStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, character: Character) -> CharacterNode:
        """Convert SQLAlchemy model to GraphQL type."""
        return cls(
            id=strawberry.ID(to_global_id(NodeType.CHARACTER, character.id)),
            database_id=character.id,
            name=character.name,
            age=character.age,
            gender=character.gender,
            credits=character.credits,
            background=character.background,
            status=character.status,
            created_at=character.created_at,
            updated_at=character.updated_at,
        )


CharacterEdge, CharacterConnection = create_connection_types(CharacterNode, "Character")

__all__ = ["CharacterConnection", "CharacterEdge", "CharacterNode"]

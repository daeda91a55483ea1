"""GraphQL types for careers and skills."""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from traveller_service.core.relay import NodeType, to_global_id
from traveller_service.features.careers.models import SkillCategory
from traveller_service.features.graphql.types.base import Node
from traveller_service.features.graphql.types.connection import create_connection_types

if TYPE_CHECKING:
    from traveller_service.features.careers.models import Career, Skill

strawberry.enum(SkillCategory, description="Broad grouping of skills")


@strawberry.type(name="Career", description="A career path characters serve terms in")
class CareerNode(Node):
    database_id: int = strawberry.field(description="Primary key in the catalogue database")
    name: str
    description: str | None
    qualification_dm: int = strawberry.field(description="DM applied to the qualification roll")

    @classmethod
    def from_model(cls, career: Career) -> CareerNode:
        return cls(
            id=strawberry.ID(to_global_id(NodeType.CAREER, career.id)),
            database_id=career.id,
            name=career.name,
            description=career.description,
            qualification_dm=career.qualification_dm,
        )


@strawberry.type(name="Skill", description="A trained skill at a given level")
class SkillNode(Node):
    database_id: int = strawberry.field(description="Primary key in the catalogue database")
    name: str
    level: int
    category: SkillCategory
    primary_characteristic: str | None

    @classmethod
    def from_model(cls, skill: Skill) -> SkillNode:
        return cls(
            id=strawberry.ID(to_global_id(NodeType.SKILL, skill.id)),
            database_id=skill.id,
            name=skill.name,
            level=skill.level,
            category=skill.category,
            primary_characteristic=skill.primary_characteristic,
        )


CareerEdge, CareerConnection = create_connection_types(CareerNode, "Career")
SkillEdge, SkillConnection = create_connection_types(SkillNode, "Skill")

__all__ = [
    "CareerConnection",
    "CareerEdge",
    "CareerNode",
    "SkillConnection",
    "SkillEdge",
    "SkillNode",
]

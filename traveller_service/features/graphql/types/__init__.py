"""Strawberry types for the GraphQL API."""

from traveller_service.features.graphql.types.base import Node, PageInfoType
from traveller_service.features.graphql.types.careers import (
    CareerConnection,
    CareerNode,
    SkillConnection,
    SkillNode,
)
from traveller_service.features.graphql.types.characters import CharacterConnection, CharacterNode
from traveller_service.features.graphql.types.connection import (
    StrawberryConnectionFactory,
    create_connection_types,
)
from traveller_service.features.graphql.types.equipment import (
    ArmorConnection,
    ArmorNode,
    SpaceshipConnection,
    SpaceshipNode,
    VehicleConnection,
    VehicleNode,
    WeaponConnection,
    WeaponNode,
)
from traveller_service.features.graphql.types.worlds import WorldConnection, WorldNode

NODE_TYPES = (
    CharacterNode,
    CareerNode,
    SkillNode,
    WorldNode,
    WeaponNode,
    ArmorNode,
    VehicleNode,
    SpaceshipNode,
)

__all__ = [
    "NODE_TYPES",
    "ArmorConnection",
    "ArmorNode",
    "CareerConnection",
    "CareerNode",
    "CharacterConnection",
    "CharacterNode",
    "Node",
    "PageInfoType",
    "SkillConnection",
    "SkillNode",
    "SpaceshipConnection",
    "SpaceshipNode",
    "StrawberryConnectionFactory",
    "VehicleConnection",
    "VehicleNode",
    "WeaponConnection",
    "WeaponNode",
    "WorldConnection",
    "WorldNode",
    "create_connection_types",
]

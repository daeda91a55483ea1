"""GraphQL types for the equipment catalogue."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import strawberry

from traveller_service.core.relay import NodeType, to_global_id
from traveller_service.features.equipment.models import (
    ArmorType,
    SpaceshipType,
    VehicleType,
    WeaponType,
)
from traveller_service.features.graphql.types.base import Node
from traveller_service.features.graphql.types.connection import create_connection_types

if TYPE_CHECKING:
    from traveller_service.features.equipment.models import Armor, Spaceship, Vehicle, Weapon

strawberry.enum(WeaponType)
strawberry.enum(ArmorType)
strawberry.enum(VehicleType)
strawberry.enum(SpaceshipType)


@strawberry.type(name="Weapon", description="A personal weapon")
class WeaponNode(Node):
    database_id: int = strawberry.field(description="Primary key in the catalogue database")
    name: str
    weapon_type: WeaponType = strawberry.field(name="type")
    tech_level: int
    damage_formula: str = strawberry.field(description="Dice expression, e.g. 3D6")
    range: int = strawberry.field(description="Effective range in metres")
    automatic: bool
    magazine: int
    cost: int = strawberry.field(description="Price in credits")
    weight: Decimal | None = strawberry.field(description="Weight in kg")

    @classmethod
    def from_model(cls, weapon: Weapon) -> WeaponNode:
        return cls(
            id=strawberry.ID(to_global_id(NodeType.WEAPON, weapon.id)),
            database_id=weapon.id,
            name=weapon.name,
            weapon_type=weapon.weapon_type,
            tech_level=weapon.tech_level,
            damage_formula=weapon.damage_formula,
            range=weapon.range,
            automatic=weapon.automatic,
            magazine=weapon.magazine,
            cost=weapon.cost,
            weight=weapon.weight,
        )


@strawberry.type(name="Armor", description="Protective armor")
class ArmorNode(Node):
    database_id: int = strawberry.field(description="Primary key in the catalogue database")
    name: str
    armor_type: ArmorType = strawberry.field(name="type")
    tech_level: int
    protection: int
    cost: int = strawberry.field(description="Price in credits")
    weight: Decimal | None = strawberry.field(description="Weight in kg")
    powered: bool

    @classmethod
    def from_model(cls, armor: Armor) -> ArmorNode:
        return cls(
            id=strawberry.ID(to_global_id(NodeType.ARMOR, armor.id)),
            database_id=armor.id,
            name=armor.name,
            armor_type=armor.armor_type,
            tech_level=armor.tech_level,
            protection=armor.protection,
            cost=armor.cost,
            weight=armor.weight,
            powered=armor.powered,
        )


@strawberry.type(name="Vehicle", description="A planetary vehicle")
class VehicleNode(Node):
    database_id: int = strawberry.field(description="Primary key in the catalogue database")
    name: str
    vehicle_type: VehicleType = strawberry.field(name="type")
    description: str | None
    tech_level: int
    cost: int = strawberry.field(description="Price in credits")
    max_speed: int = strawberry.field(description="Top speed in km/h")
    passenger_capacity: int

    @classmethod
    def from_model(cls, vehicle: Vehicle) -> VehicleNode:
        return cls(
            id=strawberry.ID(to_global_id(NodeType.VEHICLE, vehicle.id)),
            database_id=vehicle.id,
            name=vehicle.name,
            vehicle_type=vehicle.vehicle_type,
            description=vehicle.description,
            tech_level=vehicle.tech_level,
            cost=vehicle.cost,
            max_speed=vehicle.max_speed,
            passenger_capacity=vehicle.passenger_capacity,
        )


@strawberry.type(name="Spaceship", description="A starship or small craft")
class SpaceshipNode(Node):
    database_id: int = strawberry.field(description="Primary key in the catalogue database")
    name: str
    ship_type: SpaceshipType = strawberry.field(name="type")
    description: str | None
    tech_level: int
    cost_mcr: Decimal = strawberry.field(description="Price in megacredits (MCr)")
    displacement_tons: int
    jump_drive_rating: int

    @classmethod
    def from_model(cls, ship: Spaceship) -> SpaceshipNode:
        return cls(
            id=strawberry.ID(to_global_id(NodeType.SPACESHIP, ship.id)),
            database_id=ship.id,
            name=ship.name,
            ship_type=ship.ship_type,
            description=ship.description,
            tech_level=ship.tech_level,
            cost_mcr=ship.cost_mcr,
            displacement_tons=ship.displacement_tons,
            jump_drive_rating=ship.jump_drive_rating,
        )


WeaponEdge, WeaponConnection = create_connection_types(WeaponNode, "Weapon")
ArmorEdge, ArmorConnection = create_connection_types(ArmorNode, "Armor")
VehicleEdge, VehicleConnection = create_connection_types(VehicleNode, "Vehicle")
SpaceshipEdge, SpaceshipConnection = create_connection_types(SpaceshipNode, "Spaceship")

__all__ = [
    "ArmorConnection",
    "ArmorEdge",
    "ArmorNode",
    "SpaceshipConnection",
    "SpaceshipEdge",
    "SpaceshipNode",
    "VehicleConnection",
    "VehicleEdge",
    "VehicleNode",
    "WeaponConnection",
    "WeaponEdge",
    "WeaponNode",
]

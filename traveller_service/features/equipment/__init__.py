"""Equipment catalogue: weapons, armor, vehicles and spaceships."""

from __future__ import annotations

from .models import (
    Armor,
    ArmorType,
    Spaceship,
    SpaceshipType,
    Vehicle,
    VehicleType,
    Weapon,
    WeaponType,
)
from .repository import (
    ArmorRepository,
    SpaceshipRepository,
    VehicleRepository,
    WeaponRepository,
    get_armor_repository,
    get_spaceship_repository,
    get_vehicle_repository,
    get_weapon_repository,
)

__all__ = [
    "Armor",
    "ArmorRepository",
    "ArmorType",
    "Spaceship",
    "SpaceshipRepository",
    "SpaceshipType",
    "Vehicle",
    "VehicleRepository",
    "VehicleType",
    "Weapon",
    "WeaponRepository",
    "WeaponType",
    "get_armor_repository",
    "get_spaceship_repository",
    "get_vehicle_repository",
    "get_weapon_repository",
]

"""Repositories for the equipment catalogue."""

from __future__ import annotations

from functools import lru_cache

from traveller_service.core.database.repository import TenantAwareRepository
from traveller_service.features.equipment.models import Armor, Spaceship, Vehicle, Weapon


class WeaponRepository(TenantAwareRepository[Weapon]):
    def __init__(self) -> None:
        super().__init__(Weapon)


class ArmorRepository(TenantAwareRepository[Armor]):
    def __init__(self) -> None:
        super().__init__(Armor)


class VehicleRepository(TenantAwareRepository[Vehicle]):
    def __init__(self) -> None:
        super().__init__(Vehicle)


class SpaceshipRepository(TenantAwareRepository[Spaceship]):
    def __init__(self) -> None:
        super().__init__(Spaceship)


@lru_cache(maxsize=1)
def get_weapon_repository() -> WeaponRepository:
    return WeaponRepository()


@lru_cache(maxsize=1)
def get_armor_repository() -> ArmorRepository:
    return ArmorRepository()


@lru_cache(maxsize=1)
def get_vehicle_repository() -> VehicleRepository:
    return VehicleRepository()


@lru_cache(maxsize=1)
def get_spaceship_repository() -> SpaceshipRepository:
    return SpaceshipRepository()

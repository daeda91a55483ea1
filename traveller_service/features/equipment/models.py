"""SQLAlchemy models for weapons, armor, vehicles and spaceships."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from sqlalchemy import Boolean, Enum, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traveller_service.core.database import TenantMixin, TimestampedBase


class WeaponType(StrEnum):
    MELEE = "MELEE"
    PISTOL = "PISTOL"
    RIFLE = "RIFLE"
    SHOTGUN = "SHOTGUN"
    SUBMACHINE_GUN = "SUBMACHINE_GUN"
    ASSAULT_RIFLE = "ASSAULT_RIFLE"
    HEAVY_WEAPON = "HEAVY_WEAPON"
    EXPLOSIVE = "EXPLOSIVE"
    ENERGY = "ENERGY"
    NATURAL = "NATURAL"


class ArmorType(StrEnum):
    CLOTH = "CLOTH"
    MESH = "MESH"
    FLAK = "FLAK"
    ABLAT = "ABLAT"
    REFLEC = "REFLEC"
    COMBAT = "COMBAT"
    BATTLE_DRESS = "BATTLE_DRESS"


class VehicleType(StrEnum):
    GROUND_CAR = "GROUND_CAR"
    GROUND_TRUCK = "GROUND_TRUCK"
    AIR_RAFT = "AIR_RAFT"
    AIRCRAFT = "AIRCRAFT"
    GRAV_VEHICLE = "GRAV_VEHICLE"
    GRAV_BELT = "GRAV_BELT"
    WATERCRAFT = "WATERCRAFT"
    SMALL_CRAFT = "SMALL_CRAFT"
    WALKER = "WALKER"
    TRACKED_VEHICLE = "TRACKED_VEHICLE"
    WHEELED_VEHICLE = "WHEELED_VEHICLE"
    EXOTIC = "EXOTIC"


class SpaceshipType(StrEnum):
    SCOUT = "SCOUT"
    COURIER = "COURIER"
    TRADER = "TRADER"
    FREIGHTER = "FREIGHTER"
    LINER = "LINER"
    YACHT = "YACHT"
    PATROL_SHIP = "PATROL_SHIP"
    CORVETTE = "CORVETTE"
    DESTROYER = "DESTROYER"
    CRUISER = "CRUISER"
    CARRIER = "CARRIER"
    RESEARCH_VESSEL = "RESEARCH_VESSEL"
    MINING_SHIP = "MINING_SHIP"


class Weapon(TimestampedBase, TenantMixin):
    """A personal weapon from the equipment catalogue."""

    __tablename__ = "weapons"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    weapon_type: Mapped[WeaponType] = mapped_column(
        "type", Enum(WeaponType, native_enum=False, length=30), nullable=False
    )
    tech_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    damage_formula: Mapped[str] = mapped_column(
        String(20), nullable=False, comment="Dice expression, e.g. 3D6"
    )
    range: Mapped[int] = mapped_column(Integer, nullable=False, default=0, comment="Metres")
    automatic: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    magazine: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cost: Mapped[int] = mapped_column(Integer, nullable=False, default=0, comment="Credits")
    weight: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True, comment="kg")

    def __repr__(self) -> str:
        return f"<Weapon(id={self.id}, name={self.name!r})>"


class Armor(TimestampedBase, TenantMixin):
    """Protective armor from the equipment catalogue."""

    __tablename__ = "armor"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    armor_type: Mapped[ArmorType] = mapped_column(
        "type", Enum(ArmorType, native_enum=False, length=30), nullable=False
    )
    tech_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    protection: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cost: Mapped[int] = mapped_column(Integer, nullable=False, default=0, comment="Credits")
    weight: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True, comment="kg")
    powered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Armor(id={self.id}, name={self.name!r})>"


class Vehicle(TimestampedBase, TenantMixin):
    """A planetary vehicle."""

    __tablename__ = "vehicles"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    vehicle_type: Mapped[VehicleType] = mapped_column(
        "type", Enum(VehicleType, native_enum=False, length=30), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    tech_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cost: Mapped[int] = mapped_column(Integer, nullable=False, default=0, comment="Credits")
    max_speed: Mapped[int] = mapped_column(Integer, nullable=False, default=0, comment="km/h")
    passenger_capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Vehicle(id={self.id}, name={self.name!r})>"


class Spaceship(TimestampedBase, TenantMixin):
    """A starship or small craft."""

    __tablename__ = "spaceships"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    ship_type: Mapped[SpaceshipType] = mapped_column(
        "type", Enum(SpaceshipType, native_enum=False, length=30), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    tech_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cost_mcr: Mapped[Decimal] = mapped_column(
        Numeric(14, 2), nullable=False, default=Decimal("0"), comment="Megacredits"
    )
    displacement_tons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    jump_drive_rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Spaceship(id={self.id}, name={self.name!r})>"

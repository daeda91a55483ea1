"""SQLAlchemy models for the worlds feature."""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from traveller_service.core.database import TenantMixin, TimestampedBase
from traveller_service.features.worlds.uwp import parse_uwp


class WorldType(StrEnum):
    GARDEN = "GARDEN"
    DESERT = "DESERT"
    ICE = "ICE"
    OCEAN = "OCEAN"
    ASTEROID = "ASTEROID"
    VACUUM = "VACUUM"
    HIGH_GRAVITY = "HIGH_GRAVITY"
    LOW_GRAVITY = "LOW_GRAVITY"
    HIGH_TECH = "HIGH_TECH"
    LOW_TECH = "LOW_TECH"
    HIGH_POPULATION = "HIGH_POPULATION"
    LOW_POPULATION = "LOW_POPULATION"
    AGRICULTURAL = "AGRICULTURAL"
    INDUSTRIAL = "INDUSTRIAL"
    PRIMITIVE = "PRIMITIVE"
    WATER_WORLD = "WATER_WORLD"


class TravelZone(StrEnum):
    GREEN = "GREEN"
    AMBER = "AMBER"
    RED = "RED"


class World(TimestampedBase, TenantMixin):
    """A world in a subsector, described by its UWP.

    The characteristic columns mirror the UWP; use :meth:`apply_uwp` to
    keep them in sync when the code changes.
    """

    __tablename__ = "worlds"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    uwp: Mapped[str] = mapped_column(String(20), nullable=False, comment="Universal World Profile")
    world_type: Mapped[WorldType] = mapped_column(
        "type", Enum(WorldType, native_enum=False, length=30), nullable=False
    )
    travel_zone: Mapped[TravelZone] = mapped_column(
        Enum(TravelZone, native_enum=False, length=10),
        nullable=False,
        default=TravelZone.GREEN,
    )
    hex_coordinates: Mapped[str | None] = mapped_column(String(4), nullable=True)

    starport_class: Mapped[str | None] = mapped_column(String(1), nullable=True)
    size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    atmosphere: Mapped[int | None] = mapped_column(Integer, nullable=True)
    hydrographics: Mapped[int | None] = mapped_column(Integer, nullable=True)
    population: Mapped[int | None] = mapped_column(Integer, nullable=True)
    government: Mapped[int | None] = mapped_column(Integer, nullable=True)
    law_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    tech_level: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def apply_uwp(self, code: str) -> None:
        """Set the UWP and copy its decoded characteristics onto the row."""
        self.uwp = code
        profile = parse_uwp(code)
        if profile is None:
            return
        self.starport_class = profile.starport_class
        self.size = profile.size
        self.atmosphere = profile.atmosphere
        self.hydrographics = profile.hydrographics
        self.population = profile.population
        self.government = profile.government
        self.law_level = profile.law_level
        self.tech_level = profile.tech_level

    def __repr__(self) -> str:
        return f"<World(id={self.id}, name={self.name!r}, uwp={self.uwp!r})>"

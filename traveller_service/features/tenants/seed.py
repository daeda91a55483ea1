"""Demo dataset: one tenant plus a small Traveller catalogue.

Used by ``traveller-service db seed`` and by the test fixtures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from traveller_service.features.careers.models import Career, Skill, SkillCategory
from traveller_service.features.characters.models import Character, CharacterStatus
from traveller_service.features.equipment.models import (
    Armor,
    ArmorType,
    Spaceship,
    SpaceshipType,
    Vehicle,
    VehicleType,
    Weapon,
    WeaponType,
)
from traveller_service.features.tenants.models import Tenant
from traveller_service.features.worlds.models import TravelZone, World, WorldType

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

# (name, uwp, type, zone, hex)
WORLDS = (
    ("Regina", "A788899-C", WorldType.GARDEN, TravelZone.GREEN, "1910"),
    ("Efate", "A646930-D", WorldType.HIGH_POPULATION, TravelZone.GREEN, "1705"),
    ("Yori", "C560757-A", WorldType.DESERT, TravelZone.GREEN, "2110"),
    ("Jenghe", "B665776-7", WorldType.AGRICULTURAL, TravelZone.AMBER, "1913"),
    ("Knorbes", "C7C4656-8", WorldType.INDUSTRIAL, TravelZone.GREEN, "1807"),
    ("Alell", "B56789C-A", WorldType.LOW_TECH, TravelZone.AMBER, "1906"),
    ("Forboldn", "C200423-7", WorldType.VACUUM, TravelZone.RED, "2406"),
)

# (name, age, gender, credits, status)
CHARACTERS = (
    ("Jamison", 34, "male", 12000, CharacterStatus.ALIVE),
    ("Marc Hault-Oberlindes", 42, "male", 150000, CharacterStatus.ALIVE),
    ("Kelly Ortega", 27, "female", 3500, CharacterStatus.ALIVE),
    ("Anders Casarii", 58, "male", 80000, CharacterStatus.RETIRED),
    ("Alexander Jamison", 30, "male", 500, CharacterStatus.DEAD),
)

# (name, description, qualification DM)
CAREERS = (
    ("Navy", "Imperial Navy, the interstellar armed forces", -1),
    ("Scout", "Exploration and communications service", 0),
    ("Merchant", "Free traders and megacorporate lines", 0),
    ("Army", "Planetary surface forces", 1),
)

# (name, level, category, characteristic)
SKILLS = (
    ("Pilot", 2, SkillCategory.SPACE, "DEX"),
    ("Gun Combat", 1, SkillCategory.COMBAT, "DEX"),
    ("Astrogation", 1, SkillCategory.SPACE, "EDU"),
    ("Broker", 0, SkillCategory.TRADE, "INT"),
    ("Medic", 1, SkillCategory.SCIENCE, "EDU"),
)


@dataclass(frozen=True, slots=True)
class SeedSummary:
    """Number of rows created per table."""

    tenant_id: int
    counts: dict[str, int]


async def seed_catalogue(session: AsyncSession, tenant_name: str = "default") -> SeedSummary:
    """Create a tenant and fill it with demo rows of every kind.

    The caller owns the transaction; rows are flushed, not committed.
    """
    tenant = Tenant(name=tenant_name, description=f"Demo campaign '{tenant_name}'")
    session.add(tenant)
    await session.flush()

    worlds = []
    for name, uwp, world_type, zone, hex_coordinates in WORLDS:
        world = World(
            name=name,
            world_type=world_type,
            travel_zone=zone,
            hex_coordinates=hex_coordinates,
            tenant_id=tenant.id,
        )
        world.apply_uwp(uwp)
        worlds.append(world)

    characters = [
        Character(
            name=name,
            age=age,
            gender=gender,
            credits=credits,
            status=status,
            tenant_id=tenant.id,
        )
        for name, age, gender, credits, status in CHARACTERS
    ]
    careers = [
        Career(name=name, description=description, qualification_dm=dm, tenant_id=tenant.id)
        for name, description, dm in CAREERS
    ]
    skills = [
        Skill(
            name=name,
            level=level,
            category=category,
            primary_characteristic=characteristic,
            tenant_id=tenant.id,
        )
        for name, level, category, characteristic in SKILLS
    ]
    weapons = [
        Weapon(
            name="Autopistol",
            weapon_type=WeaponType.PISTOL,
            tech_level=6,
            damage_formula="3D6-3",
            range=10,
            magazine=15,
            cost=200,
            weight=Decimal("1.00"),
            tenant_id=tenant.id,
        ),
        Weapon(
            name="Gauss Rifle",
            weapon_type=WeaponType.RIFLE,
            tech_level=12,
            damage_formula="4D6",
            range=600,
            automatic=True,
            magazine=80,
            cost=1500,
            weight=Decimal("3.50"),
            tenant_id=tenant.id,
        ),
        Weapon(
            name="Cutlass",
            weapon_type=WeaponType.MELEE,
            tech_level=2,
            damage_formula="3D6",
            cost=200,
            weight=Decimal("1.00"),
            tenant_id=tenant.id,
        ),
    ]
    armor = [
        Armor(
            name="Cloth",
            armor_type=ArmorType.CLOTH,
            tech_level=7,
            protection=5,
            cost=250,
            weight=Decimal("2.00"),
            tenant_id=tenant.id,
        ),
        Armor(
            name="Battle Dress",
            armor_type=ArmorType.BATTLE_DRESS,
            tech_level=13,
            protection=22,
            cost=200000,
            weight=Decimal("26.00"),
            powered=True,
            tenant_id=tenant.id,
        ),
    ]
    vehicles = [
        Vehicle(
            name="Air/Raft",
            vehicle_type=VehicleType.AIR_RAFT,
            description="Open-topped grav vehicle",
            tech_level=8,
            cost=250000,
            max_speed=400,
            passenger_capacity=4,
            tenant_id=tenant.id,
        ),
        Vehicle(
            name="ATV",
            vehicle_type=VehicleType.TRACKED_VEHICLE,
            description="All-terrain vehicle",
            tech_level=7,
            cost=150000,
            max_speed=100,
            passenger_capacity=8,
            tenant_id=tenant.id,
        ),
    ]
    spaceships = [
        Spaceship(
            name="Type-S Scout/Courier",
            ship_type=SpaceshipType.SCOUT,
            description="100-ton exploration ship",
            tech_level=12,
            cost_mcr=Decimal("36.94"),
            displacement_tons=100,
            jump_drive_rating=2,
            tenant_id=tenant.id,
        ),
        Spaceship(
            name="Type-A Free Trader",
            ship_type=SpaceshipType.TRADER,
            description="200-ton merchant ship",
            tech_level=12,
            cost_mcr=Decimal("51.88"),
            displacement_tons=200,
            jump_drive_rating=1,
            tenant_id=tenant.id,
        ),
    ]

    groups = {
        "worlds": worlds,
        "characters": characters,
        "careers": careers,
        "skills": skills,
        "weapons": weapons,
        "armor": armor,
        "vehicles": vehicles,
        "spaceships": spaceships,
    }
    for rows in groups.values():
        session.add_all(rows)
    await session.flush()

    counts = {table: len(rows) for table, rows in groups.items()}
    logger.info("Seeded tenant %r", tenant_name, extra={"tenant_id": tenant.id, **counts})
    return SeedSummary(tenant_id=tenant.id, counts=counts)

"""Import every model so Base.metadata knows all tables.

Alembic's env.py and ``init_database(create_tables=True)`` import from here.
"""

from traveller_service.core.database.base import Base
from traveller_service.features.careers.models import Career, Skill
from traveller_service.features.characters.models import Character
from traveller_service.features.equipment.models import Armor, Spaceship, Vehicle, Weapon
from traveller_service.features.tenants.models import Tenant
from traveller_service.features.worlds.models import World

__all__ = [
    "Armor",
    "Base",
    "Career",
    "Character",
    "Skill",
    "Spaceship",
    "Tenant",
    "Vehicle",
    "Weapon",
    "World",
]

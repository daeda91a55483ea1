"""GraphQL types for the Worlds feature.

The UWP characteristics are exposed both as the raw code and as decoded
integer fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from traveller_service.core.relay import NodeType, to_global_id
from traveller_service.features.graphql.types.base import Node
from traveller_service.features.graphql.types.connection import create_connection_types
from traveller_service.features.worlds.models import TravelZone, WorldType

if TYPE_CHECKING:
    from traveller_service.features.worlds.models import World

strawberry.enum(WorldType, description="Trade or environment classification of a world")
strawberry.enum(TravelZone, description="Travellers' Aid Society travel advisory")


@strawberry.type(name="World", description="A world described by its Universal World Profile")
class WorldNode(Node):
    """GraphQL type for World entity."""

    database_id: int = strawberry.field(description="Primary key in the catalogue database")
    name: str
    uwp: str = strawberry.field(description="Universal World Profile, e.g. A788899-C")
    world_type: WorldType = strawberry.field(name="type")
    travel_zone: TravelZone
    hex_coordinates: str | None = strawberry.field(description="Subsector hex, e.g. 1910")
    starport_class: str | None
    size: int | None
    atmosphere: int | None
    hydrographics: int | None
    population: int | None
    government: int | None
    law_level: int | None
    tech_level: int | None

    @classmethod
    def from_model(cls, world: World) -> WorldNode:
        """Convert SQLAlchemy model to GraphQL type."""
        return cls(
            id=strawberry.ID(to_global_id(NodeType.WORLD, world.id)),
            database_id=world.id,
            name=world.name,
            uwp=world.uwp,
            world_type=world.world_type,
            travel_zone=world.travel_zone,
            hex_coordinates=world.hex_coordinates,
            starport_class=world.starport_class,
            size=world.size,
            atmosphere=world.atmosphere,
            hydrographics=world.hydrographics,
            population=world.population,
            government=world.government,
            law_level=world.law_level,
            tech_level=world.tech_level,
        )


WorldEdge, WorldConnection = create_connection_types(WorldNode, "World")

__all__ = ["WorldConnection", "WorldEdge", "WorldNode"]

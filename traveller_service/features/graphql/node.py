"""Global id resolution for the ``node`` and ``nodes`` queries.

Each entity kind registers one lookup: load the row by primary key within
the request's tenant, then wrap it in its GraphQL type. The registry is
built and frozen when this module is imported.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from traveller_service.core.relay import GlobalIdRegistry, NodeLookup, NodeType
from traveller_service.features.careers.repository import (
    get_career_repository,
    get_skill_repository,
)
from traveller_service.features.characters.repository import get_character_repository
from traveller_service.features.equipment.repository import (
    get_armor_repository,
    get_spaceship_repository,
    get_vehicle_repository,
    get_weapon_repository,
)
from traveller_service.features.graphql.types import (
    ArmorNode,
    CareerNode,
    CharacterNode,
    SkillNode,
    SpaceshipNode,
    VehicleNode,
    WeaponNode,
    WorldNode,
)
from traveller_service.features.worlds.repository import get_world_repository
from traveller_service.infra.metrics.prometheus import graphql_node_resolutions_total

if TYPE_CHECKING:
    from traveller_service.core.database.repository import TenantAwareRepository
    from traveller_service.features.graphql.context import GraphQLContext

logger = logging.getLogger(__name__)


def repository_lookup(
    type_tag: NodeType,
    get_repository: Callable[[], TenantAwareRepository[Any]],
    to_node: Callable[[Any], Any],
) -> Callable[[GraphQLContext, int], Awaitable[Any | None]]:
    """Build a lookup that loads a row for the context's tenant.

    Rows owned by another tenant resolve to None, exactly like missing rows.
    """

    async def lookup(context: GraphQLContext, local_id: int) -> Any | None:
        row = await get_repository().get_for_tenant(
            context.session, local_id, tenant_id=context.tenant_id
        )
        outcome = "missing" if row is None else "found"
        graphql_node_resolutions_total.labels(type=str(type_tag), outcome=outcome).inc()
        return None if row is None else to_node(row)

    return lookup


NODE_LOOKUPS: dict[NodeType, NodeLookup[GraphQLContext]] = {
    NodeType.CHARACTER: repository_lookup(
        NodeType.CHARACTER, get_character_repository, CharacterNode.from_model
    ),
    NodeType.CAREER: repository_lookup(NodeType.CAREER, get_career_repository, CareerNode.from_model),
    NodeType.SKILL: repository_lookup(NodeType.SKILL, get_skill_repository, SkillNode.from_model),
    NodeType.WORLD: repository_lookup(NodeType.WORLD, get_world_repository, WorldNode.from_model),
    NodeType.WEAPON: repository_lookup(NodeType.WEAPON, get_weapon_repository, WeaponNode.from_model),
    NodeType.ARMOR: repository_lookup(NodeType.ARMOR, get_armor_repository, ArmorNode.from_model),
    NodeType.VEHICLE: repository_lookup(
        NodeType.VEHICLE, get_vehicle_repository, VehicleNode.from_model
    ),
    NodeType.SPACESHIP: repository_lookup(
        NodeType.SPACESHIP, get_spaceship_repository, SpaceshipNode.from_model
    ),
}


def create_node_registry() -> GlobalIdRegistry[GraphQLContext]:
    """Create a frozen registry with a lookup for every entity kind."""
    registry: GlobalIdRegistry[GraphQLContext] = GlobalIdRegistry()
    for type_tag, lookup in NODE_LOOKUPS.items():
        registry.register(type_tag, lookup)
    registry.freeze()
    logger.debug("Node registry ready for types: %s", ", ".join(sorted(registry.type_tags)))
    return registry


node_registry = create_node_registry()

__all__ = ["NODE_LOOKUPS", "create_node_registry", "node_registry", "repository_lookup"]

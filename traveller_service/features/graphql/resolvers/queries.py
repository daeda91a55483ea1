"""Query resolvers for the GraphQL API.

Provides:
- node(id) / nodes(ids): Relay global object identification
- characters, careers, skills, worlds, weapons, armor, vehicles,
  spaceships: connections over the tenant's rows, ordered by id
- worldsByTravelZone, worldsByType, skillsByCategory: filtered connections
- searchWorlds / searchCharacters: name search paged by the database
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

import strawberry
from strawberry.types import Info

from traveller_service.core.pagination import (
    PageArgs,
    connection_from_page,
    connection_from_sequence,
    page_request_from_args,
    validate_strict_page_args,
)
from traveller_service.features.careers.models import SkillCategory
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
from traveller_service.features.graphql.context import GraphQLContext
from traveller_service.features.graphql.node import node_registry
from traveller_service.features.graphql.types.base import Node
from traveller_service.features.graphql.types.careers import (
    CareerConnection,
    CareerEdge,
    CareerNode,
    SkillConnection,
    SkillEdge,
    SkillNode,
)
from traveller_service.features.graphql.types.characters import (
    CharacterConnection,
    CharacterEdge,
    CharacterNode,
)
from traveller_service.features.graphql.types.connection import StrawberryConnectionFactory
from traveller_service.features.graphql.types.equipment import (
    ArmorConnection,
    ArmorEdge,
    ArmorNode,
    SpaceshipConnection,
    SpaceshipEdge,
    SpaceshipNode,
    VehicleConnection,
    VehicleEdge,
    VehicleNode,
    WeaponConnection,
    WeaponEdge,
    WeaponNode,
)
from traveller_service.features.graphql.types.worlds import WorldConnection, WorldEdge, WorldNode
from traveller_service.features.worlds.models import TravelZone, WorldType
from traveller_service.features.worlds.repository import get_world_repository

logger = logging.getLogger(__name__)

# Type aliases for annotated arguments with descriptions
FirstArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (forward pagination)"),
]
AfterArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start after (forward pagination)"),
]
LastArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (backward pagination)"),
]
BeforeArg = Annotated[
    str | None, strawberry.argument(description="Cursor to end before (backward pagination)"),
]
TermArg = Annotated[
    str | None, strawberry.argument(description="Case-insensitive name fragment"),
]

CHARACTERS = StrawberryConnectionFactory(CharacterEdge, CharacterConnection, CharacterNode.from_model)
CAREERS = StrawberryConnectionFactory(CareerEdge, CareerConnection, CareerNode.from_model)
SKILLS = StrawberryConnectionFactory(SkillEdge, SkillConnection, SkillNode.from_model)
WORLDS = StrawberryConnectionFactory(WorldEdge, WorldConnection, WorldNode.from_model)
WEAPONS = StrawberryConnectionFactory(WeaponEdge, WeaponConnection, WeaponNode.from_model)
ARMOR = StrawberryConnectionFactory(ArmorEdge, ArmorConnection, ArmorNode.from_model)
VEHICLES = StrawberryConnectionFactory(VehicleEdge, VehicleConnection, VehicleNode.from_model)
SPACESHIPS = StrawberryConnectionFactory(SpaceshipEdge, SpaceshipConnection, SpaceshipNode.from_model)


def page_args(
    context: GraphQLContext,
    first: int | None,
    after: str | None,
    last: int | None,
    before: str | None,
) -> PageArgs:
    """Collect Relay arguments, validating them when strict pagination is on."""
    args = PageArgs(first=first, after=after, last=last, before=before)
    if context.settings.strict_relay_pagination:
        validate_strict_page_args(args, max_page_size=context.settings.max_page_size)
    return args


async def list_connection(
    context: GraphQLContext,
    repository: Any,
    factory: StrawberryConnectionFactory,
    args: PageArgs,
) -> Any:
    """Slice the tenant's full, id-ordered collection."""
    items = await repository.list_for_tenant(context.session, tenant_id=context.tenant_id)
    return connection_from_sequence(items, args, factory)


async def search_connection(
    context: GraphQLContext,
    repository: Any,
    factory: StrawberryConnectionFactory,
    term: str | None,
    args: PageArgs,
) -> Any:
    """Page a name search in the database.

    Cursors are absolute positions in the search result, so the
    ``endCursor`` of one page can be passed as ``after`` for the next.
    """
    request = page_request_from_args(
        args,
        default_size=context.settings.default_page_size,
        max_size=context.settings.max_page_size,
    )
    result = await repository.search_for_tenant(
        context.session,
        term,
        tenant_id=context.tenant_id,
        limit=request.limit,
        offset=request.offset,
    )
    logger.debug(
        "Search %r page %d (size %d) matched %d rows",
        term,
        request.page,
        request.size,
        result.total,
    )
    return connection_from_page(result, factory, index_offset=request.offset)


@strawberry.type(description="Root query type")
class Query:
    """GraphQL Query resolvers."""

    @strawberry.field(description="Fetch any object by its global ID")
    async def node(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,  # noqa: A002
    ) -> Node | None:
        """Resolve one global id.

        Malformed ids, unknown types and missing rows all resolve to null.
        """
        return await node_registry.node(str(id), info.context)

    @strawberry.field(description="Fetch several objects by global ID; unresolvable IDs are skipped")
    async def nodes(
        self,
        info: Info[GraphQLContext, None],
        ids: list[strawberry.ID],
    ) -> list[Node]:
        return await node_registry.nodes([str(i) for i in ids], info.context)

    @strawberry.field(description="Characters, ordered by id")
    async def characters(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> CharacterConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await list_connection(ctx, get_character_repository(), CHARACTERS, args)

    @strawberry.field(description="Careers, ordered by id")
    async def careers(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> CareerConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await list_connection(ctx, get_career_repository(), CAREERS, args)

    @strawberry.field(description="Skills, ordered by id")
    async def skills(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> SkillConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await list_connection(ctx, get_skill_repository(), SKILLS, args)

    @strawberry.field(description="Skills in one category, ordered by id")
    async def skills_by_category(
        self,
        info: Info[GraphQLContext, None],
        category: SkillCategory,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> SkillConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        skills = await get_skill_repository().list_by_category(
            ctx.session, category, tenant_id=ctx.tenant_id
        )
        return connection_from_sequence(skills, args, SKILLS)

    @strawberry.field(description="Worlds, ordered by id")
    async def worlds(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> WorldConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await list_connection(ctx, get_world_repository(), WORLDS, args)

    @strawberry.field(description="Worlds in one travel zone, ordered by id")
    async def worlds_by_travel_zone(
        self,
        info: Info[GraphQLContext, None],
        travel_zone: TravelZone,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> WorldConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        worlds = await get_world_repository().list_by_travel_zone(
            ctx.session, travel_zone, tenant_id=ctx.tenant_id
        )
        return connection_from_sequence(worlds, args, WORLDS)

    @strawberry.field(description="Worlds of one type, ordered by id")
    async def worlds_by_type(
        self,
        info: Info[GraphQLContext, None],
        world_type: Annotated[WorldType, strawberry.argument(name="type")],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> WorldConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        worlds = await get_world_repository().list_by_type(
            ctx.session, world_type, tenant_id=ctx.tenant_id
        )
        return connection_from_sequence(worlds, args, WORLDS)

    @strawberry.field(description="Weapons, ordered by id")
    async def weapons(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> WeaponConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await list_connection(ctx, get_weapon_repository(), WEAPONS, args)

    @strawberry.field(description="Armor, ordered by id")
    async def armor(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> ArmorConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await list_connection(ctx, get_armor_repository(), ARMOR, args)

    @strawberry.field(description="Vehicles, ordered by id")
    async def vehicles(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> VehicleConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await list_connection(ctx, get_vehicle_repository(), VEHICLES, args)

    @strawberry.field(description="Spaceships, ordered by id")
    async def spaceships(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> SpaceshipConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await list_connection(ctx, get_spaceship_repository(), SPACESHIPS, args)

    @strawberry.field(description="Search worlds by name, paged by the database")
    async def search_worlds(
        self,
        info: Info[GraphQLContext, None],
        term: TermArg = None,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> WorldConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await search_connection(ctx, get_world_repository(), WORLDS, term, args)

    @strawberry.field(description="Search characters by name, paged by the database")
    async def search_characters(
        self,
        info: Info[GraphQLContext, None],
        term: TermArg = None,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> CharacterConnection:
        ctx = info.context
        args = page_args(ctx, first, after, last, before)
        return await search_connection(ctx, get_character_repository(), CHARACTERS, term, args)


__all__ = ["Query"]

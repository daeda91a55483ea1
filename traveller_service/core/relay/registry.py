"""Polymorphic node lookup by global id.

The registry maps each type tag to an async lookup closure. It is filled
once at import time and frozen, after which it is only read.

    registry = GlobalIdRegistry()
    registry.register(NodeType.WORLD, load_world)
    registry.freeze()

    world = await registry.node(global_id, context)

Lookups receive the per-request context (database session and tenant)
explicitly, so the registry itself holds no request state.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from traveller_service.core.exceptions import InvalidGlobalIdException
from traveller_service.core.relay.global_id import from_global_id

logger = logging.getLogger(__name__)

type NodeLookup[ContextT] = Callable[[ContextT, int], Awaitable[Any | None]]


class GlobalIdRegistry[ContextT]:
    """Dispatch table from type tag to node lookup."""

    def __init__(self) -> None:
        self._lookups: dict[str, NodeLookup[ContextT]] = {}
        self._frozen = False

    def register(self, type_tag: str, lookup: NodeLookup[ContextT]) -> None:
        """Register the lookup for one entity kind.

        Raises:
            RuntimeError: If the registry is frozen
            ValueError: If the tag is already registered
        """
        if self._frozen:
            raise RuntimeError("Cannot register node lookups on a frozen registry")
        tag = str(type_tag)
        if tag in self._lookups:
            raise ValueError(f"Node lookup already registered for {tag!r}")
        self._lookups[tag] = lookup

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def type_tags(self) -> frozenset[str]:
        return frozenset(self._lookups)

    @property
    def lookups(self) -> Mapping[str, NodeLookup[ContextT]]:
        return MappingProxyType(self._lookups)

    async def node(self, global_id: str, context: ContextT) -> Any | None:
        """Resolve one global id.

        Returns None when the id cannot be decoded, its type tag has no
        registered lookup, the lookup finds nothing, or the lookup fails.
        Lookup failures are logged with their traceback.
        """
        try:
            decoded = from_global_id(global_id)
        except InvalidGlobalIdException as e:
            logger.debug("Unresolvable global id %r: %s", global_id, e.reason)
            return None

        lookup = self._lookups.get(decoded.type_tag)
        if lookup is None:
            logger.debug("No node lookup registered for type %r", decoded.type_tag)
            return None

        try:
            result = await lookup(context, decoded.local_id)
        except Exception:
            logger.exception("Node lookup failed for %s:%d", decoded.type_tag, decoded.local_id)
            return None
        if result is None:
            logger.debug("Node %s:%d not found", decoded.type_tag, decoded.local_id)
        return result

    async def nodes(self, global_ids: Iterable[str], context: ContextT) -> list[Any]:
        """Resolve several global ids, keeping order and dropping misses.

        Ids are resolved one after another: the lookups share the
        request's database session, which does not allow concurrent use.
        """
        resolved: list[Any] = []
        for global_id in global_ids:
            result = await self.node(global_id, context)
            if result is not None:
                resolved.append(result)
        return resolved

"""Relay global object identification."""

from traveller_service.core.relay.global_id import (
    GlobalId,
    NodeType,
    from_global_id,
    to_global_id,
)
from traveller_service.core.relay.registry import GlobalIdRegistry, NodeLookup

__all__ = [
    "GlobalId",
    "GlobalIdRegistry",
    "NodeLookup",
    "NodeType",
    "from_global_id",
    "to_global_id",
]

"""Worlds feature: planets described by Universal World Profiles."""

from __future__ import annotations

from .models import TravelZone, World, WorldType
from .repository import WorldRepository, get_world_repository
from .uwp import UWP, parse_uwp

__all__ = [
    "UWP",
    "TravelZone",
    "World",
    "WorldRepository",
    "WorldType",
    "get_world_repository",
    "parse_uwp",
]

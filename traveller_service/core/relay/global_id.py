"""Relay global object identifiers.

A global id wraps an entity kind and its integer primary key into one
opaque token:

    ("World", 42)  ->  "World:42"  ->  "V29ybGQ6NDI="

Decoding is strict: the token must be standard base64 over UTF-8 text
with exactly one ``:`` and a signed 64-bit decimal id.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from enum import StrEnum

from traveller_service.core.exceptions import InvalidGlobalIdException

SEPARATOR = ":"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
# At most 19 digits, so int() only ever sees values near the 64-bit range
_DECIMAL_RE = re.compile(r"[+-]?[0-9]{1,19}")


class NodeType(StrEnum):
    """Type tags of the entity kinds reachable through ``node``/``nodes``."""

    CHARACTER = "Character"
    CAREER = "Career"
    SKILL = "Skill"
    WORLD = "World"
    WEAPON = "Weapon"
    ARMOR = "Armor"
    VEHICLE = "Vehicle"
    SPACESHIP = "Spaceship"


@dataclass(frozen=True, slots=True)
class GlobalId:
    """Decoded global id: a type tag and a local (database) id."""

    type_tag: str
    local_id: int

    def encode(self) -> str:
        return to_global_id(self.type_tag, self.local_id)

    def __str__(self) -> str:
        return self.encode()


def to_global_id(type_tag: str, local_id: int) -> str:
    """Encode a type tag and local id as an opaque global id.

    Raises:
        ValueError: If the tag is empty or contains the separator
    """
    tag = str(type_tag)
    if not tag or SEPARATOR in tag:
        raise ValueError(f"Invalid type tag {tag!r}")
    payload = f"{tag}{SEPARATOR}{int(local_id)}"
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def from_global_id(value: str) -> GlobalId:
    """Decode an opaque global id.

    Args:
        value: Global id supplied by a client

    Returns:
        GlobalId with the type tag and local id

    Raises:
        InvalidGlobalIdException: If the token is not base64/UTF-8, does
            not contain exactly one separator, or the id is not a 64-bit
            decimal integer
    """
    try:
        payload = base64.b64decode(value.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError, AttributeError) as e:
        raise InvalidGlobalIdException(str(value), "not valid base64") from e

    parts = payload.split(SEPARATOR)
    if len(parts) != 2:
        raise InvalidGlobalIdException(value, f"expected exactly one {SEPARATOR!r} separator")

    type_tag, raw_id = parts
    if not type_tag:
        raise InvalidGlobalIdException(value, "empty type tag")
    if not _DECIMAL_RE.fullmatch(raw_id):
        raise InvalidGlobalIdException(value, f"id {raw_id[:24]!r} is not a 64-bit decimal integer")

    local_id = int(raw_id)
    if not _INT64_MIN <= local_id <= _INT64_MAX:
        raise InvalidGlobalIdException(value, f"id {raw_id!r} is out of range")

    return GlobalId(type_tag=type_tag, local_id=local_id)

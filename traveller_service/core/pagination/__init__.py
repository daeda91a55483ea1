"""Relay cursor pagination.

Offset cursors (base64 of an item's index) over ordered collections:

- CursorCodec: encode an index as an opaque cursor and back
- compute_slice: turn ``first/after/last/before`` into ``[start, end)``
- connection_from_sequence / connection_from_page: build edges, page
  info and total count through a per-entity ConnectionFactory
- page_request_from_args: offset/limit request for database-paged queries

Example:
    connection = connection_from_sequence(
        worlds, PageArgs(first=3, after=cursor), ModelConnectionFactory()
    )
"""

from traveller_service.core.pagination.connection import (
    ConnectionFactory,
    ModelConnectionFactory,
    PagedResult,
    connection_from_page,
    connection_from_sequence,
)
from traveller_service.core.pagination.cursor import INVALID_CURSOR, CursorCodec
from traveller_service.core.pagination.pageable import PageRequest, page_request_from_args
from traveller_service.core.pagination.schemas import Connection, Edge, PageInfo
from traveller_service.core.pagination.slicer import PageArgs, SliceBounds, compute_slice
from traveller_service.core.pagination.validation import validate_strict_page_args

__all__ = [
    "INVALID_CURSOR",
    "Connection",
    "ConnectionFactory",
    "CursorCodec",
    "Edge",
    "ModelConnectionFactory",
    "PageArgs",
    "PageInfo",
    "PageRequest",
    "PagedResult",
    "SliceBounds",
    "compute_slice",
    "connection_from_page",
    "connection_from_sequence",
    "page_request_from_args",
    "validate_strict_page_args",
]

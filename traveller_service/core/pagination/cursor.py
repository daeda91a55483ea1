"""Offset cursor encoding and decoding for Relay connections.

A cursor is the zero-based position of an item within one ordered result
set, rendered as base64 over its decimal representation:

    index 2  ->  "2"  ->  "Mg=="

Cursors are only meaningful relative to the ordering that produced them.
They carry no version or integrity tag, so if the ordering of the
underlying collection changes between calls, a cursor silently points at
a different logical position.
"""

from __future__ import annotations

import base64
import binascii
import logging

logger = logging.getLogger(__name__)

INVALID_CURSOR = -1
"""Sentinel returned by :meth:`CursorCodec.decode` for unusable cursors."""

# Longest decimal payload accepted: a signed 64-bit index has 19 digits
MAX_CURSOR_DIGITS = 19


class CursorCodec:
    """Encode and decode opaque offset cursors.

    Usage:
        cursor = CursorCodec.encode(4)      # "NA=="
        CursorCodec.decode(cursor)          # 4
        CursorCodec.decode("not-a-cursor")  # -1
    """

    @staticmethod
    def encode(index: int) -> str:
        """Encode a zero-based position as an opaque cursor.

        Args:
            index: Non-negative position in the ordered result set

        Returns:
            Standard base64 string (with padding)

        Raises:
            ValueError: If index is negative
        """
        if index < 0:
            raise ValueError(f"Cursor index must be non-negative, got {index}")
        return base64.b64encode(str(index).encode("utf-8")).decode("ascii")

    @staticmethod
    def decode(cursor: str | None) -> int:
        """Decode a cursor back to its position.

        Never raises: anything that was not produced by :meth:`encode`
        (bad base64, non-UTF-8 payload, signs, whitespace, non-digits,
        payloads longer than ``MAX_CURSOR_DIGITS``)
        decodes to ``INVALID_CURSOR``.

        Args:
            cursor: Cursor string supplied by a client, or None

        Returns:
            Decoded non-negative index, or ``INVALID_CURSOR``
        """
        if not cursor:
            return INVALID_CURSOR
        try:
            payload = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
        except (binascii.Error, UnicodeError, ValueError):
            logger.debug("Ignoring malformed cursor %r", cursor)
            return INVALID_CURSOR

        if len(payload) > MAX_CURSOR_DIGITS:
            logger.debug("Ignoring oversized cursor payload of %d characters", len(payload))
            return INVALID_CURSOR
        if not payload or not (payload.isascii() and payload.isdigit()):
            logger.debug("Ignoring non-numeric cursor payload %r", payload)
            return INVALID_CURSOR
        return int(payload)

    @staticmethod
    def is_valid(cursor: str | None) -> bool:
        """Return True when the cursor decodes to a usable index."""
        return CursorCodec.decode(cursor) != INVALID_CURSOR

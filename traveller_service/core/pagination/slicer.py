"""Slice bounds computation for Relay connection arguments.

Given the size of a fully ordered collection and the four Relay
arguments, :func:`compute_slice` returns the half-open range
``[start, end)`` of items that belong on the requested page.

The arguments are applied in a fixed order:

1. ``after`` moves ``start`` past the cursor's index
2. ``before`` moves ``end`` down to the cursor's index
3. ``first`` keeps at most ``first`` items from the front
4. ``last`` keeps at most ``last`` items from the back

Malformed and out-of-range cursors are ignored rather than rejected, and
``first`` and ``last`` may be combined (``first`` narrows from the front,
then ``last`` narrows what remains from the back). Callers that want
strict Relay behaviour layer :mod:`traveller_service.core.pagination.validation`
on top.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from traveller_service.core.pagination.cursor import CursorCodec


class PageArgs(BaseModel):
    """Relay connection arguments.

    Any subset may be supplied. Negative ``first``/``last`` values are
    accepted and treated as absent by the slicer.
    """

    model_config = ConfigDict(frozen=True)

    first: int | None = Field(default=None, description="Take at most N items from the front")
    after: str | None = Field(default=None, description="Start after this cursor")
    last: int | None = Field(default=None, description="Take at most N items from the back")
    before: str | None = Field(default=None, description="End before this cursor")

    @property
    def is_empty(self) -> bool:
        """True when no argument was supplied."""
        return self.first is None and self.after is None and self.last is None and self.before is None


@dataclass(frozen=True, slots=True)
class SliceBounds:
    """Half-open ``[start, end)`` range over a collection of ``total_count`` items."""

    start: int
    end: int
    total_count: int

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    @property
    def has_next_page(self) -> bool:
        return self.end < self.total_count

    @property
    def has_previous_page(self) -> bool:
        return self.start > 0

    def indices(self) -> range:
        """Positions covered by the slice, in the unsliced collection."""
        return range(self.start, self.end)


def compute_slice(total_count: int, args: PageArgs | None = None) -> SliceBounds:
    """Compute the slice of a collection selected by Relay arguments.

    Args:
        total_count: Size of the full ordered collection
        args: Pagination arguments (None means "everything")

    Returns:
        SliceBounds with ``0 <= start <= end <= total_count``

    Raises:
        ValueError: If total_count is negative

    Example:
        >>> bounds = compute_slice(5, PageArgs(after=CursorCodec.encode(1), first=2))
        >>> (bounds.start, bounds.end)
        (2, 4)
    """
    if total_count < 0:
        raise ValueError(f"total_count must be non-negative, got {total_count}")

    start = 0
    end = total_count
    if args is None:
        return SliceBounds(start=start, end=end, total_count=total_count)

    if args.after is not None:
        after_index = CursorCodec.decode(args.after)
        if 0 <= after_index < total_count:
            start = after_index + 1

    if args.before is not None:
        before_index = CursorCodec.decode(args.before)
        if 0 <= before_index < total_count:
            end = before_index

    if args.first is not None and args.first >= 0:
        end = min(start + args.first, end)

    if args.last is not None and args.last >= 0:
        start = max(end - args.last, start)

    # before at or ahead of after leaves nothing between them
    if end < start:
        end = start

    return SliceBounds(start=start, end=end, total_count=total_count)

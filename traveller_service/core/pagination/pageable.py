"""Translate Relay arguments into an offset/limit page request.

Used where the backing store pages the data (``BaseRepository.search``)
instead of the connection builder slicing a materialized list. The
request is page-aligned: the cursor's index is divided by the page size
to pick a page number.

    size = first, else last, else the default size
    page = after // size + 1          when ``after`` is a valid cursor
         = max(0, before // size - 1) when ``before`` is a valid cursor
         = 0                          otherwise
"""

from __future__ import annotations

from dataclasses import dataclass

from traveller_service.core.pagination.cursor import CursorCodec
from traveller_service.core.pagination.slicer import PageArgs


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Zero-based page number and page size."""

    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size


def page_request_from_args(
    args: PageArgs | None,
    *,
    default_size: int,
    max_size: int | None = None,
) -> PageRequest:
    """Build a page request from Relay arguments.

    Malformed cursors are ignored, negative sizes fall back to
    ``default_size`` and sizes above ``max_size`` are capped. A size of
    zero yields an empty request (offset 0, limit 0).

    Args:
        args: Relay arguments, or None for the first default-sized page
        default_size: Page size when neither ``first`` nor ``last`` is usable
        max_size: Optional upper bound on the page size

    Returns:
        PageRequest for ``BaseRepository.search``

    Example:
        >>> page_request_from_args(PageArgs(first=10, after=CursorCodec.encode(9)), default_size=10)
        PageRequest(page=1, size=10)
    """
    if args is None:
        args = PageArgs()

    if args.first is not None:
        size = args.first
    elif args.last is not None:
        size = args.last
    else:
        size = default_size

    if size < 0:
        size = default_size
    if max_size is not None:
        size = min(size, max_size)
    if size == 0:
        return PageRequest(page=0, size=0)

    after_index = CursorCodec.decode(args.after)
    before_index = CursorCodec.decode(args.before)
    if after_index >= 0:
        page = after_index // size + 1
    elif before_index >= 0:
        page = max(0, before_index // size - 1)
    else:
        page = 0

    return PageRequest(page=page, size=size)

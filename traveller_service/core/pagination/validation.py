"""Strict Relay argument validation.

The slicer is deliberately forgiving. When strict mode is enabled
(``GRAPHQL_STRICT_RELAY_PAGINATION=true``) resolvers call
:func:`validate_strict_page_args` first, which rejects the argument
combinations the Relay specification does not allow.
"""

from __future__ import annotations

from traveller_service.core.exceptions import ValidationException
from traveller_service.core.pagination.cursor import CursorCodec
from traveller_service.core.pagination.slicer import PageArgs


def validate_strict_page_args(args: PageArgs, *, max_page_size: int | None = None) -> PageArgs:
    """Validate Relay arguments, raising on anything non-standard.

    Args:
        args: Arguments supplied by the client
        max_page_size: Optional upper bound on ``first``/``last``

    Returns:
        The same arguments, unchanged

    Raises:
        ValidationException: On the first violated rule
    """
    if args.first is not None and args.last is not None:
        raise ValidationException(
            detail="Passing both `first` and `last` to paginate a connection is not supported",
            type="invalid-pagination",
            extra={"field": "first,last"},
        )
    if args.first is not None and args.before is not None:
        raise ValidationException(
            detail="`first` cannot be combined with `before`",
            type="invalid-pagination",
            extra={"field": "first,before"},
        )
    if args.last is not None and args.after is not None:
        raise ValidationException(
            detail="`last` cannot be combined with `after`",
            type="invalid-pagination",
            extra={"field": "last,after"},
        )

    for field, value in (("first", args.first), ("last", args.last)):
        if value is None:
            continue
        if value < 0:
            raise ValidationException(
                detail=f"`{field}` must be a non-negative integer",
                type="invalid-pagination",
                extra={"field": field, "value": value},
            )
        if max_page_size is not None and value > max_page_size:
            raise ValidationException(
                detail=f"`{field}` exceeds the maximum page size of {max_page_size}",
                type="invalid-pagination",
                extra={"field": field, "value": value, "max": max_page_size},
            )

    for field, cursor in (("after", args.after), ("before", args.before)):
        if cursor is not None and not CursorCodec.is_valid(cursor):
            raise ValidationException(
                detail=f"`{field}` is not a valid cursor",
                type="invalid-cursor",
                extra={"field": field, "value": cursor},
            )

    return args

"""CLI utilities for running async operations and formatting output."""

from traveller_service.cli.utils.async_runner import coro
from traveller_service.cli.utils.formatters import (
    counts_table,
    error,
    fail,
    header,
    info,
    success,
    warning,
)

__all__ = [
    "coro",
    "counts_table",
    "error",
    "fail",
    "header",
    "info",
    "success",
    "warning",
]

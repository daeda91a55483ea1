"""Logging infrastructure.

Structured logging built on the standard library:
- JSONL format for log aggregation
- Automatic context injection (request_id, tenant_id)
- QueueHandler + QueueListener for non-blocking I/O
- Lazy evaluation for expensive debug messages
- OpenTelemetry trace correlation

Basic usage:
    import logging

    from traveller_service.infra.logging import set_log_context

    logger = logging.getLogger(__name__)

    set_log_context(request_id="abc-123", tenant_id=1)
    logger.info("Resolving node")  # includes request_id and tenant_id

    from traveller_service.infra.logging import get_lazy_logger

    lazy_logger = get_lazy_logger(__name__)
    lazy_logger.debug(lambda: f"Slice: {describe(bounds)}")
"""

from traveller_service.infra.logging.config import configure_logging, setup_logging, shutdown
from traveller_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from traveller_service.infra.logging.formatters import JSONFormatter
from traveller_service.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]

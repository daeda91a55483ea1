"""Prometheus metrics."""

from traveller_service.infra.metrics.prometheus import (
    REGISTRY,
    application_info,
    connection_page_size,
    graphql_node_resolutions_total,
    http_request_duration_seconds,
    http_requests_total,
)

__all__ = [
    "REGISTRY",
    "application_info",
    "connection_page_size",
    "graphql_node_resolutions_total",
    "http_request_duration_seconds",
    "http_requests_total",
]

"""Prometheus metrics for monitoring."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram, Info

# Custom registry so tests and multiple app instances don't collide with the default one
REGISTRY = CollectorRegistry()

# Covers response times from 1ms to 10s
DEFAULT_LATENCY_BUCKETS = (
    0.001,
    0.005,
    0.01,
    0.025,
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
)

# Edges per returned connection page
PAGE_SIZE_BUCKETS = (0, 1, 5, 10, 25, 50, 100, 250, 1000)

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
    registry=REGISTRY,
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=DEFAULT_LATENCY_BUCKETS,
    registry=REGISTRY,
)

# Relay metrics
graphql_node_resolutions_total = Counter(
    "graphql_node_resolutions_total",
    "Global id resolutions by type tag and outcome (found, missing)",
    ["type", "outcome"],
    registry=REGISTRY,
)

connection_page_size = Histogram(
    "graphql_connection_page_size",
    "Number of edges returned per connection",
    ["connection"],
    buckets=PAGE_SIZE_BUCKETS,
    registry=REGISTRY,
)

# Application info
application_info = Info(
    "app",
    "Application information",
    registry=REGISTRY,
)

"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from traveller_service.core.settings import get_graphql_settings
from traveller_service.features.health.router import router as health_router
from traveller_service.features.metrics.router import router as metrics_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from traveller_service.core.settings.graphql import GraphQLSettings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, graphql_settings: GraphQLSettings | None = None) -> None:
    """Register all routers with the application.

    Args:
        app: FastAPI application instance.
        graphql_settings: Optional override controlling GraphQL availability.
    """
    graphql_settings = graphql_settings or get_graphql_settings()

    # Metrics and health have no prefix (/metrics, /health)
    app.include_router(metrics_router, tags=["observability"])
    app.include_router(health_router, tags=["health"])

    if graphql_settings.enabled:
        from traveller_service.features.graphql.router import create_graphql_router

        app.include_router(
            create_graphql_router(), prefix=graphql_settings.path, tags=["graphql"]
        )
        logger.info(
            "GraphQL endpoint enabled at %s (IDE: %s)",
            graphql_settings.path,
            graphql_settings.graphql_ide or "disabled",
        )

"""Application lifespan management.

Startup Order:
1. Logging and application info metric
2. Database (when configured): connectivity check, optional create_all

Shutdown Order: reverse of startup.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from traveller_service.core.settings import get_app_settings, get_db_settings
from traveller_service.infra.database import close_database, init_database
from traveller_service.infra.logging.config import setup_logging, shutdown
from traveller_service.infra.metrics.prometheus import application_info

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan events.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application runtime.
    """
    setup_logging()

    app_settings = get_app_settings()
    db_settings = get_db_settings()

    application_info.info(
        {
            "version": app_settings.version,
            "service": app_settings.service_name,
            "environment": app_settings.environment,
        }
    )
    logger.info(
        "Application starting",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
        },
    )

    if db_settings.is_configured:
        await init_database(create_tables=db_settings.create_tables)
    else:
        logger.warning("Database not configured; GraphQL queries will fail")

    try:
        yield
    finally:
        logger.info("Application shutting down", extra={"service": app_settings.service_name})
        if db_settings.is_configured:
            await close_database()
        shutdown()

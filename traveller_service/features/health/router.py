"""Liveness and readiness endpoints.

Endpoints:
    GET /health       - process is up
    GET /health/ready - database answers ``SELECT 1``
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from traveller_service.core.dependencies.database import DbSession
from traveller_service.core.settings import get_app_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def liveness() -> dict[str, str]:
    """Report that the process is running."""
    settings = get_app_settings()
    return {"status": "ok", "service": settings.service_name, "version": settings.version}


@router.get("/ready")
async def readiness(session: DbSession) -> JSONResponse:
    """Report whether the database is reachable."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Readiness check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "unreachable"},
        )
    return JSONResponse(content={"status": "ok", "database": "ok"})

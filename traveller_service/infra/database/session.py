"""Async database engine and session management.

The engine is created on first use from PostgresSettings, so importing
this module never opens a connection.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from traveller_service.core.settings import get_app_settings, get_db_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Create (once) the async engine described by the DB_ settings."""
    db_settings = get_db_settings()
    app_settings = get_app_settings()

    kwargs = db_settings.sqlalchemy_engine_kwargs()
    kwargs["echo"] = db_settings.echo or app_settings.debug
    engine = create_async_engine(db_settings.url, **kwargs)

    logger.debug("Created database engine", extra={"dialect": engine.dialect.name})
    return engine


@lru_cache(maxsize=1)
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the shared engine."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Get async database session.

    Example:
        async with get_async_session() as session:
            result = await session.execute(select(World))
            worlds = result.scalars().all()
    """
    async with get_sessionmaker()() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_database(*, create_tables: bool = False) -> None:
    """Check connectivity and optionally create missing tables.

    Args:
        create_tables: Run ``metadata.create_all`` (development/SQLite runs;
            production schemas are managed by Alembic)

    Raises:
        ConnectionError: If the database cannot be reached
    """
    engine = get_engine()
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if create_tables:
                from traveller_service.core.models import Base

                await conn.run_sync(Base.metadata.create_all)
    except (OperationalError, OSError) as e:
        logger.exception("Database connection failed", extra={"error": str(e)})
        raise ConnectionError(f"Unable to connect to database: {e}") from e

    logger.info(
        "Database connection established",
        extra={"dialect": engine.dialect.name, "create_tables": create_tables},
    )


async def close_database() -> None:
    """Dispose of the engine (application shutdown)."""
    if get_engine.cache_info().currsize == 0:
        return
    logger.info("Closing database connection")
    await get_engine().dispose()
    get_sessionmaker.cache_clear()
    get_engine.cache_clear()

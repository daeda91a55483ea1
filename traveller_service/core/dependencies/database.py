"""Database dependencies for FastAPI route handlers.

Two ways to get a session:

1. ``get_db_session()`` (this module): FastAPI dependency, lifecycle tied
   to the request
2. ``get_async_session()`` (infra.database): async context manager for
   CLI commands and scripts

Both use the same session factory.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from traveller_service.infra.database import get_async_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency for database session.

    Example:
        @router.get("/items")
        async def list_items(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with get_async_session() as session:
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db_session)]

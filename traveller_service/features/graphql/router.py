"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint (mounted at GRAPHQL_PATH by app/router.py)
- GraphQL IDE selected by GRAPHQL_GRAPHQL_IDE
- Request context with database session and resolved tenant
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, cast

from fastapi import BackgroundTasks, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from traveller_service.core.dependencies.database import get_db_session
from traveller_service.core.dependencies.tenant import TenantContext, get_tenant_context
from traveller_service.core.settings import get_graphql_settings
from traveller_service.features.graphql.context import GraphQLContext
from traveller_service.features.graphql.schema import schema

logger = logging.getLogger(__name__)


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    tenant: Annotated[TenantContext, Depends(get_tenant_context)],
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies.

    Args:
        request: FastAPI request
        response: FastAPI response (for setting headers/cookies)
        background_tasks: FastAPI background tasks
        session: Database session from dependency
        tenant: Tenant resolved from the tenant header

    Returns:
        GraphQLContext for use in resolvers
    """
    return GraphQLContext(
        request=request,
        response=response,
        background_tasks=background_tasks,
        session=session,
        tenant=tenant,
        settings=get_graphql_settings(),
    )


def create_graphql_router() -> GraphQLRouter:
    """Create GraphQL router with settings-based configuration.

    The router serves at its mount point; app/router.py includes it with
    GRAPHQL_PATH as prefix.
    """
    settings = get_graphql_settings()
    return GraphQLRouter(
        schema,
        context_getter=cast("Any", get_graphql_context),
        graphql_ide=settings.graphql_ide or None,
    )


__all__ = ["create_graphql_router", "get_graphql_context"]

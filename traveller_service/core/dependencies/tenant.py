"""Tenant resolution for incoming requests.

The tenant is read from a request header (``X-Tenant-ID`` by default):

1. A numeric value is a tenant id, anything else a tenant name
2. Without a usable header, the tenant named by APP_DEFAULT_TENANT is used
3. If that does not exist either, the request runs in single-tenant mode
   (no filtering), or is rejected with 400 when APP_REQUIRE_TENANT is set

The resolved tenant is returned as a value and handed down explicitly;
nothing is stored in globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from traveller_service.core.exceptions import BadRequestException
from traveller_service.core.settings import get_app_settings
from traveller_service.features.tenants.repository import get_tenant_repository
from traveller_service.infra.logging import set_log_context

from .database import get_db_session

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TenantContext:
    """Tenant the current request operates on.

    ``tenant_id`` None means single-tenant mode.
    """

    tenant_id: int | None = None
    tenant_name: str | None = None

    @property
    def is_scoped(self) -> bool:
        return self.tenant_id is not None


async def resolve_tenant(session: AsyncSession, header_value: str | None) -> TenantContext:
    """Resolve the tenant for a header value.

    Raises:
        BadRequestException: If no tenant resolves and tenants are required
    """
    settings = get_app_settings()
    repo = get_tenant_repository()

    tenant = None
    if header_value:
        tenant = await repo.resolve(session, header_value)
        if tenant is None:
            logger.debug("Tenant %r from header not found, trying default", header_value)

    if tenant is None:
        tenant = await repo.get_by_name(session, settings.default_tenant)

    if tenant is None:
        if settings.require_tenant:
            raise BadRequestException(
                detail="Tenant not specified",
                type="tenant-required",
                extra={"header": settings.tenant_header},
            )
        return TenantContext()

    return TenantContext(tenant_id=tenant.id, tenant_name=tenant.name)


async def get_tenant_context(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> TenantContext:
    """FastAPI dependency resolving the request's tenant.

    Example:
        @router.get("/worlds")
        async def list_worlds(tenant: TenantDep, session: DbSession):
            return await repo.list_for_tenant(session, tenant_id=tenant.tenant_id)
    """
    header_value = request.headers.get(get_app_settings().tenant_header)
    context = await resolve_tenant(session, header_value)
    if context.is_scoped:
        set_log_context(tenant_id=context.tenant_id)
    return context


TenantDep = Annotated[TenantContext, Depends(get_tenant_context)]

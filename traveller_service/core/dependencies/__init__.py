"""FastAPI dependencies for route handlers.

Usage:
    from traveller_service.core.dependencies import DbSession, TenantDep
"""

from traveller_service.core.dependencies.database import DbSession, get_db_session
from traveller_service.core.dependencies.tenant import (
    TenantContext,
    TenantDep,
    get_tenant_context,
    resolve_tenant,
)

__all__ = [
    "DbSession",
    "TenantContext",
    "TenantDep",
    "get_db_session",
    "get_tenant_context",
    "resolve_tenant",
]

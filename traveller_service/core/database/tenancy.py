"""Multi-tenancy support for the shared-schema model.

Every catalogue row may belong to a tenant. Requests carry the resolved
tenant id explicitly (FastAPI dependency -> GraphQL context -> repository
call); there is no ambient tenant state.

A ``tenant_id`` of None means single-tenant mode: no tenant filter is
applied.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ForeignKey, Select
from sqlalchemy.orm import Mapped, declarative_mixin, declared_attr, mapped_column


@declarative_mixin
class TenantMixin:
    """Adds a nullable, indexed ``tenant_id`` foreign key to ``tenants.id``."""

    @declared_attr
    def tenant_id(cls) -> Mapped[int | None]:
        return mapped_column(
            ForeignKey("tenants.id", ondelete="CASCADE"),
            nullable=True,
            index=True,
            comment="Owning tenant; NULL rows are visible only in single-tenant mode",
        )


def apply_tenant_filter(statement: Select[Any], model: type[Any], tenant_id: int | None) -> Select[Any]:
    """Restrict a select to one tenant's rows.

    Args:
        statement: Select over ``model``
        model: Model class using TenantMixin
        tenant_id: Tenant to filter by, or None for no filter

    Returns:
        The filtered statement (unchanged when tenant_id is None)
    """
    if tenant_id is None:
        return statement
    return statement.where(model.tenant_id == tenant_id)

"""Database layer: declarative base, mixins and repositories."""

from traveller_service.core.database.base import (
    Base,
    IntegerPKMixin,
    TimestampedBase,
    TimestampMixin,
)
from traveller_service.core.database.exceptions import NotFoundError, RepositoryError
from traveller_service.core.database.repository import (
    BaseRepository,
    SearchResult,
    TenantAwareRepository,
)
from traveller_service.core.database.tenancy import TenantMixin, apply_tenant_filter

__all__ = [
    "Base",
    "BaseRepository",
    "IntegerPKMixin",
    "NotFoundError",
    "RepositoryError",
    "SearchResult",
    "TenantAwareRepository",
    "TenantMixin",
    "TimestampMixin",
    "TimestampedBase",
    "apply_tenant_filter",
]

"""Tenants: isolated copies of the dataset selected per request."""

from __future__ import annotations

from .models import Tenant
from .repository import TenantRepository, get_tenant_repository

__all__ = ["Tenant", "TenantRepository", "get_tenant_repository"]

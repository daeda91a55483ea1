"""SQLAlchemy models for the tenants feature."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traveller_service.core.database import TimestampedBase


class Tenant(TimestampedBase):
    """An isolated copy of the campaign dataset (one gaming group, one universe)."""

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        comment="Unique tenant name; also accepted in the tenant header",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name={self.name!r})>"

"""SQLAlchemy models for careers and skills."""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traveller_service.core.database import TenantMixin, TimestampedBase


class SkillCategory(StrEnum):
    COMBAT = "COMBAT"
    SPACE = "SPACE"
    VEHICLE = "VEHICLE"
    TECHNICAL = "TECHNICAL"
    PHYSICAL = "PHYSICAL"
    SOCIAL = "SOCIAL"
    SCIENCE = "SCIENCE"
    TRADE = "TRADE"


class Career(TimestampedBase, TenantMixin):
    """A career path a character can serve terms in (Navy, Scout, Merchant...)."""

    __tablename__ = "careers"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    qualification_dm: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="Dice modifier applied to the qualification roll"
    )

    def __repr__(self) -> str:
        return f"<Career(id={self.id}, name={self.name!r})>"


class Skill(TimestampedBase, TenantMixin):
    """A trained skill at a given level (e.g. Pilot-2)."""

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category: Mapped[SkillCategory] = mapped_column(
        Enum(SkillCategory, native_enum=False, length=20), nullable=False
    )
    primary_characteristic: Mapped[str | None] = mapped_column(
        String(20), nullable=True, comment="Characteristic whose DM applies (DEX, EDU, ...)"
    )

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, name={self.name!r}, level={self.level})>"

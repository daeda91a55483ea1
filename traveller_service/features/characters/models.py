"""SQLAlchemy models for the characters feature."""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traveller_service.core.database import TenantMixin, TimestampedBase


class CharacterStatus(StrEnum):
    ALIVE = "ALIVE"
    DEAD = "DEAD"
    RETIRED = "RETIRED"


class Character(TimestampedBase, TenantMixin):
    """A player or non-player character."""

    __tablename__ = "characters"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=18)
    gender: Mapped[str | None] = mapped_column(String(50), nullable=True)
    credits: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="Cash on hand in credits (Cr)"
    )
    background: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[CharacterStatus] = mapped_column(
        Enum(CharacterStatus, native_enum=False, length=20),
        nullable=False,
        default=CharacterStatus.ALIVE,
    )

    def __repr__(self) -> str:
        return f"<Character(id={self.id}, name={self.name!r})>"

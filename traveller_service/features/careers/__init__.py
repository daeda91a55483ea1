"""Careers and skills feature."""

from __future__ import annotations

from .models import Career, Skill, SkillCategory
from .repository import (
    CareerRepository,
    SkillRepository,
    get_career_repository,
    get_skill_repository,
)

__all__ = [
    "Career",
    "CareerRepository",
    "Skill",
    "SkillCategory",
    "SkillRepository",
    "get_career_repository",
    "get_skill_repository",
]

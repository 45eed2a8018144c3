"""XP award for a judged attempt."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from sqlquest.core.models import Challenge, ValidationVerdict

XP_PER_LEVEL = 1000


class ProgressAward(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    xp_gained: int = Field(alias="xpGained")
    total_xp: int = Field(alias="totalXp")
    level: int


def level_for(total_xp: int) -> int:
    return max(total_xp, 0) // XP_PER_LEVEL + 1


def compute_award(
    current_xp: int,
    challenge: Optional[Challenge],
    verdict: Optional[ValidationVerdict],
) -> ProgressAward:
    """Only a passing verdict awards the challenge's points."""
    gained = 0
    if challenge is not None and verdict is not None and verdict.passed:
        gained = challenge.points
    total = current_xp + gained
    return ProgressAward(xp_gained=gained, total_xp=total, level=level_for(total))

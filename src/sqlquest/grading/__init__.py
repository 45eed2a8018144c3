"""Outcome validation and progress awards."""

from .progress import ProgressAward, compute_award, level_for
from .validator import VERDICT_RESPONSE_SCHEMA, OutcomeValidator

__all__ = [
    "ProgressAward",
    "compute_award",
    "level_for",
    "VERDICT_RESPONSE_SCHEMA",
    "OutcomeValidator",
]

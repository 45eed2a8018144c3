"""Core value objects, safety gate and difficulty policy."""

from .models import (
    Challenge,
    Difficulty,
    QueryLog,
    QueryResult,
    QueryRunOutcome,
    RunStatus,
    SafetyVerdict,
    ValidationVerdict,
)
from .policy import DIFFICULTY_POLICIES, DifficultyPolicy, policy_for
from .safety import BLOCKED_MESSAGE, DENIED_KEYWORDS, SafetyFilter
from .sql_inspect import explicit_limit, statement_count

__all__ = [
    "Challenge",
    "Difficulty",
    "QueryLog",
    "QueryResult",
    "QueryRunOutcome",
    "RunStatus",
    "SafetyVerdict",
    "ValidationVerdict",
    "DIFFICULTY_POLICIES",
    "DifficultyPolicy",
    "policy_for",
    "BLOCKED_MESSAGE",
    "DENIED_KEYWORDS",
    "SafetyFilter",
    "explicit_limit",
    "statement_count",
]

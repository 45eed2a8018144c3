"""
sqlquest: procedural SQL challenges against public-dataset schemas.

Queries never touch a database. A generation service fabricates results
consistent with the declared schema and judges them against the active
challenge.
"""

from .capabilities.datasets import DatasetCatalog, SchemaDescriptor
from .capabilities.text_generation import TextGenerationService
from .challenges import ChallengeGenerator
from .config import QuestSettings
from .core import (
    Challenge,
    Difficulty,
    QueryLog,
    QueryResult,
    QueryRunOutcome,
    RunStatus,
    SafetyFilter,
    SafetyVerdict,
    ValidationVerdict,
)
from .engine import QuerySimulator
from .grading import OutcomeValidator, compute_award
from .services import QuestPipeline

__all__ = [
    "DatasetCatalog",
    "SchemaDescriptor",
    "TextGenerationService",
    "ChallengeGenerator",
    "QuestSettings",
    "Challenge",
    "Difficulty",
    "QueryLog",
    "QueryResult",
    "QueryRunOutcome",
    "RunStatus",
    "SafetyFilter",
    "SafetyVerdict",
    "ValidationVerdict",
    "QuerySimulator",
    "OutcomeValidator",
    "compute_award",
    "QuestPipeline",
]

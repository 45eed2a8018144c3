"""
Value objects passed between pipeline stages.

Every stage produces a new frozen record consumed by the next; nothing is
mutated after creation.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class RunStatus(str, Enum):
    """Outcome of a single query run, as recorded in the query log."""

    SUCCESS = "success"
    ERROR = "error"
    BLOCKED = "blocked"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class SafetyVerdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    blocked: bool
    reason: Optional[str] = None
    matched_keywords: List[str] = Field(default_factory=list)


class Challenge(BaseModel):
    """A procedurally generated SQL exercise."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    dataset_id: str = Field(alias="datasetId")
    difficulty: Difficulty
    title: str
    description: str
    hints: List[str] = Field(
        description="Three hints: conceptual, structural, then partial syntax"
    )
    validation_criteria: str = Field(alias="validationCriteria")
    points: int


class QueryResult(BaseModel):
    """Synthetic result set of one simulated execution.

    ``error`` and a populated ``rows`` are mutually exclusive; an error
    result carries zero for every numeric field.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    columns: List[str] = Field(default_factory=list)
    rows: List[Dict[str, Any]] = Field(default_factory=list)
    duration_ms: int = Field(default=0, alias="durationMs")
    bytes_processed: int = Field(default=0, alias="bytesProcessed")
    total_row_count: int = Field(default=0, alias="totalRowCount")
    cost_estimate: float = Field(default=0.0, alias="costEstimate")
    error: Optional[str] = None

    @model_validator(mode="after")
    def _error_excludes_data(self) -> "QueryResult":
        if self.error is not None:
            if (
                self.rows
                or self.columns
                or self.duration_ms
                or self.bytes_processed
                or self.total_row_count
                or self.cost_estimate
            ):
                raise ValueError("An error result cannot carry rows or estimates")
        elif self.total_row_count < len(self.rows):
            raise ValueError("total_row_count must be at least the number of rows")
        return self

    @classmethod
    def failure(cls, message: str) -> "QueryResult":
        return cls(error=message)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows as a DataFrame in declared column order."""
        if not self.columns:
            return pd.DataFrame(self.rows)
        return pd.DataFrame(self.rows, columns=self.columns)


class ValidationVerdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    passed: bool
    feedback: str = ""
    explanation: str = ""


class QueryLog(BaseModel):
    """History entry for one query run, handed to the profile store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=lambda: f"q_{uuid.uuid4().hex[:12]}")
    query: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: RunStatus
    bytes_processed: int = Field(default=0, alias="bytesProcessed")
    dataset_id: str = Field(alias="datasetId")
    difficulty: Optional[Difficulty] = None


class QueryRunOutcome(BaseModel):
    """Everything one pipeline run produces.

    ``verdict`` is ``None`` when no challenge was active, when the run
    failed, or when the judgment call itself failed. Callers must not read
    ``None`` as a failed attempt.
    """

    model_config = ConfigDict(frozen=True)

    result: QueryResult
    verdict: Optional[ValidationVerdict] = None
    log: QueryLog

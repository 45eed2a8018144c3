"""Runtime settings for the quest pipeline.

Every field has a default and can be overridden by an ``SQLQUEST_``
prefixed environment variable (``SQLQUEST_SAMPLE_ROW_COUNT``,
``SQLQUEST_DATASETS_PATH``, ...). Keyword arguments win over both.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuestSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SQLQUEST_", env_ignore_empty=True, extra="ignore"
    )

    llm_timeout_seconds: Optional[float] = Field(
        default=30.0, gt=0, description="Bound on each external generation call"
    )
    sample_row_count: int = Field(
        default=50, ge=1, description="Rows fabricated when the query has no LIMIT"
    )
    validation_sample_rows: int = Field(
        default=3, ge=0, description="Result prefix sent to the outcome validator"
    )
    cost_per_byte: float = Field(
        default=5e-9, ge=0, description="USD per byte processed"
    )
    default_duration_ms: int = Field(default=500, ge=0)
    default_bytes_processed: int = Field(default=1024, ge=0)
    datasets_path: Optional[str] = Field(
        default=None, description="YAML file with extra dataset descriptors"
    )

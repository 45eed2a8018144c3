"""Tests for QuestSettings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sqlquest.config import QuestSettings


@patch.dict(os.environ, {}, clear=True)
def test_defaults():
    settings = QuestSettings()
    assert settings.llm_timeout_seconds == 30.0
    assert settings.sample_row_count == 50
    assert settings.validation_sample_rows == 3
    assert settings.cost_per_byte == 5e-9
    assert settings.default_duration_ms == 500
    assert settings.default_bytes_processed == 1024
    assert settings.datasets_path is None


@patch.dict(
    os.environ,
    {
        "SQLQUEST_LLM_TIMEOUT_SECONDS": "12.5",
        "SQLQUEST_SAMPLE_ROW_COUNT": "20",
        "SQLQUEST_VALIDATION_SAMPLE_ROWS": "5",
        "SQLQUEST_COST_PER_BYTE": "1e-8",
        "SQLQUEST_DATASETS_PATH": "/etc/sqlquest/datasets.yaml",
    },
    clear=False,
)
def test_reads_prefixed_environment():
    settings = QuestSettings()
    assert settings.llm_timeout_seconds == 12.5
    assert settings.sample_row_count == 20
    assert settings.validation_sample_rows == 5
    assert settings.cost_per_byte == 1e-8
    assert settings.datasets_path == "/etc/sqlquest/datasets.yaml"


@patch.dict(os.environ, {"SQLQUEST_SAMPLE_ROW_COUNT": "20"}, clear=False)
def test_explicit_arguments_win_over_env():
    assert QuestSettings(sample_row_count=8).sample_row_count == 8


@patch.dict(os.environ, {"SQLQUEST_SAMPLE_ROW_COUNT": ""}, clear=False)
def test_empty_env_value_keeps_default():
    assert QuestSettings().sample_row_count == 50


@patch.dict(os.environ, {"SAMPLE_ROW_COUNT": "7"}, clear=False)
def test_unprefixed_env_is_ignored():
    assert QuestSettings().sample_row_count == 50


@patch.dict(os.environ, {"SQLQUEST_SAMPLE_ROW_COUNT": "0"}, clear=False)
def test_invalid_env_value_rejected():
    with pytest.raises(ValidationError):
        QuestSettings()

"""
Pytest configuration and shared fixtures for the sqlquest test suite.
"""

import os

import pytest

from sqlquest.capabilities.datasets import DatasetCatalog, SchemaDescriptor
from sqlquest.config import QuestSettings
from sqlquest.core.models import Challenge, Difficulty

# Configure pytest-asyncio
pytest_plugins = ["pytest_asyncio"]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "openai: marks tests requiring OpenAI API key")
    config.addinivalue_line(
        "markers", "openrouter: marks tests requiring OpenRouter API key"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically skip live-provider tests if API keys are missing."""
    for item in items:
        if "openai" in item.keywords and not os.getenv("OPENAI_API_KEY"):
            item.add_marker(
                pytest.mark.skip(reason="OPENAI_API_KEY environment variable not set")
            )
        if "openrouter" in item.keywords and not os.getenv("OPENROUTER_API_KEY"):
            item.add_marker(
                pytest.mark.skip(
                    reason="OPENROUTER_API_KEY environment variable not set"
                )
            )


@pytest.fixture
def taxi_dataset():
    """Single-table dataset: trips(fare_amount FLOAT)."""
    return SchemaDescriptor(
        id="taxi-mini",
        name="Taxi Mini",
        description="One table, one column.",
        tables=[{"name": "trips", "columns": [{"name": "fare_amount", "type": "FLOAT"}]}],
    )


@pytest.fixture
def nyc_dataset():
    return DatasetCatalog.builtin().get("nyc-taxi")


@pytest.fixture
def settings():
    return QuestSettings(llm_timeout_seconds=1.0)


@pytest.fixture
def fare_challenge(taxi_dataset):
    return Challenge(
        dataset_id=taxi_dataset.id,
        difficulty=Difficulty.BEGINNER,
        title="Big Fares",
        description="Finance wants every trip with a fare above 50.",
        hints=[
            "Look at fare_amount.",
            "Use a WHERE clause.",
            "Try WHERE fare_amount > ...",
        ],
        validation_criteria="rows must have fare > 50",
        points=100,
    )

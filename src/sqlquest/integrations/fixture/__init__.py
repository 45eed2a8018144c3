"""Fixture integration for tests and offline demos."""

from .llm import FixtureTextGenerationService, RecordedCall

__all__ = ["FixtureTextGenerationService", "RecordedCall"]

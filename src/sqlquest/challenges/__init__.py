"""Procedural challenge generation."""

from .generator import (
    BUSINESS_SCENARIOS,
    CHALLENGE_RESPONSE_SCHEMA,
    ChallengeGenerator,
    fallback_challenge,
)

__all__ = [
    "BUSINESS_SCENARIOS",
    "CHALLENGE_RESPONSE_SCHEMA",
    "ChallengeGenerator",
    "fallback_challenge",
]

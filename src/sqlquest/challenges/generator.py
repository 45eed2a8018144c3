"""
Challenge Generator: creates a procedural SQL challenge for a dataset.

The request embeds the dataset inventory, the difficulty policy and a random
business-role framing. Any failure of the generation service falls back to
a fixed exploration challenge so a quest is always playable.
"""

from __future__ import annotations

import logging
import random
import uuid
from typing import Any, Dict, List, Optional, Sequence

from sqlquest.capabilities.datasets import SchemaDescriptor
from sqlquest.capabilities.text_generation import (
    GenerationOk,
    TextGenerationService,
    request_structured,
)
from sqlquest.config import QuestSettings
from sqlquest.core.models import Challenge, Difficulty
from sqlquest.core.policy import DifficultyPolicy, policy_for

logger = logging.getLogger(__name__)

HINT_COUNT = 3

BUSINESS_SCENARIOS: List[str] = [
    "Fraud Detection Specialist",
    "Marketing Analytics Manager",
    "Product Growth Lead",
    "Financial Auditor",
    "Data Quality Engineer",
    "Customer Success Ops",
    "Supply Chain Logistician",
    "Compliance Officer",
]

CHALLENGE_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["title", "description", "hints", "validationCriteria", "points"],
    "properties": {
        "title": {"type": "string", "minLength": 1},
        "description": {"type": "string", "minLength": 1},
        "hints": {"type": "array", "items": {"type": "string"}},
        "validationCriteria": {"type": "string", "minLength": 1},
        "points": {"type": "integer"},
    },
}


def fallback_challenge(dataset: SchemaDescriptor, difficulty: Difficulty) -> Challenge:
    """The fixed trivial challenge used when generation is unavailable."""
    table = dataset.tables[0].name if dataset.tables else "the main table"
    return Challenge(
        id=str(uuid.uuid4()),
        dataset_id=dataset.id,
        difficulty=difficulty,
        title="Data Exploration 101",
        description=(
            "We need to verify the integrity of our main table. "
            f"Select the first 10 rows of {table} to inspect the data formats."
        ),
        hints=[
            f"Every column of {table} is worth a look.",
            "Use SELECT * to return every column.",
            "Finish the query with LIMIT 10.",
        ],
        validation_criteria=f"Returns 10 rows from {table}.",
        points=50,
    )


class ChallengeGenerator:
    """Generates challenges scoped to a dataset and a difficulty tier."""

    def __init__(
        self,
        llm_service: TextGenerationService,
        *,
        settings: Optional[QuestSettings] = None,
        scenarios: Optional[Sequence[str]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.llm_service = llm_service
        self.settings = settings or QuestSettings()
        self.scenarios = list(scenarios) if scenarios is not None else BUSINESS_SCENARIOS
        self._rng = rng or random.Random()

    async def generate(
        self, dataset: SchemaDescriptor, difficulty: Difficulty
    ) -> Challenge:
        """Generate a challenge; never raises for service failures.

        Args:
            dataset: Schema the challenge must be solvable against
            difficulty: Tier whose policy bounds the required SQL features

        Returns:
            A fresh Challenge, or the fallback challenge if generation failed
        """
        difficulty = Difficulty(difficulty)
        policy = policy_for(difficulty)
        scenario = self._rng.choice(self.scenarios) if self.scenarios else None
        prompt = self.build_prompt(dataset, policy, scenario)

        outcome = await request_structured(
            self.llm_service,
            prompt,
            response_schema=CHALLENGE_RESPONSE_SCHEMA,
            timeout=self.settings.llm_timeout_seconds,
        )
        if not isinstance(outcome, GenerationOk):
            logger.warning(
                "Challenge generation failed for %s/%s, using fallback: %s",
                dataset.id,
                difficulty.value,
                outcome.message,
            )
            return fallback_challenge(dataset, difficulty)

        try:
            return self._to_challenge(outcome.data, dataset, policy)
        except ValueError as e:
            logger.warning("Unusable generated challenge, using fallback: %s", e)
            return fallback_challenge(dataset, difficulty)

    def build_prompt(
        self,
        dataset: SchemaDescriptor,
        policy: DifficultyPolicy,
        scenario: Optional[str] = None,
    ) -> str:
        low, high = policy.point_range
        role = f" acting as a {scenario}" if scenario else ""
        return f"""You are a Senior SQL Instructor{role}.
Your goal is to create a realistic business challenge for a junior analyst using the provided dataset.

Dataset: {dataset.name}
Difficulty: {policy.difficulty.value}

{policy.render()}

Schema:
{dataset.render_inventory()}

Create a unique SQL challenge.
1. The 'title' should be catchy and related to the scenario.
2. The 'description' should be a clear business question requesting data, framed as a team need rather than "Select X".
3. Provide exactly 3 progressive 'hints':
   - Hint 1: Conceptual (what fields to look at).
   - Hint 2: Structural (keywords to use).
   - Hint 3: Partial syntax (e.g. "Try using WHERE payment_type = ...").
4. Define 'validationCriteria' describing what the result set should contain.
5. Set 'points' between {low} and {high}.

Response must be a JSON object with keys: title, description, hints, validationCriteria, points."""

    def _to_challenge(
        self,
        data: Dict[str, Any],
        dataset: SchemaDescriptor,
        policy: DifficultyPolicy,
    ) -> Challenge:
        title = str(data.get("title", "")).strip()
        description = str(data.get("description", "")).strip()
        criteria = str(data.get("validationCriteria", "")).strip()
        if not (title and description and criteria):
            raise ValueError("Generated challenge is missing text fields")

        return Challenge(
            id=str(uuid.uuid4()),
            dataset_id=dataset.id,
            difficulty=policy.difficulty,
            title=title,
            description=description,
            hints=self._normalize_hints(data.get("hints") or [], policy),
            validation_criteria=criteria,
            points=policy.clamp_points(int(data.get("points", policy.point_range[0]))),
        )

    def _normalize_hints(
        self, hints: Sequence[Any], policy: DifficultyPolicy
    ) -> List[str]:
        cleaned = [str(h).strip() for h in hints if str(h).strip()][:HINT_COUNT]
        # Pad by position so the escalation order is preserved.
        for position in range(len(cleaned), HINT_COUNT):
            cleaned.append(policy.generic_hints[position])
        return cleaned

"""Outcome Validator: judges a query result against an active challenge."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Sequence

from sqlquest.capabilities.text_generation import (
    GenerationOk,
    TextGenerationService,
    request_structured,
)
from sqlquest.config import QuestSettings
from sqlquest.core.models import Challenge, ValidationVerdict

logger = logging.getLogger(__name__)

VERDICT_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["passed"],
    "properties": {
        "passed": {"type": "boolean"},
        "feedback": {"type": "string"},
        "explanation": {"type": "string"},
    },
}


class OutcomeValidator:
    """Asks the generation service whether a result satisfies a challenge.

    Only a prefix of the result rows is sent. Verdicts are best-effort:
    the judge never sees the full result set.
    """

    def __init__(
        self,
        llm_service: TextGenerationService,
        *,
        settings: Optional[QuestSettings] = None,
    ) -> None:
        self.llm_service = llm_service
        self.settings = settings or QuestSettings()

    async def validate(
        self,
        challenge: Challenge,
        query: str,
        result_sample: Sequence[Dict[str, Any]],
    ) -> Optional[ValidationVerdict]:
        """Return a verdict, or ``None`` when no judgment could be obtained.

        ``None`` means "no verdict", which is distinct from a failed attempt.
        """
        sample = list(result_sample)[: self.settings.validation_sample_rows]
        prompt = self.build_prompt(challenge, query, sample)

        outcome = await request_structured(
            self.llm_service,
            prompt,
            response_schema=VERDICT_RESPONSE_SCHEMA,
            timeout=self.settings.llm_timeout_seconds,
        )
        if not isinstance(outcome, GenerationOk):
            logger.warning(
                "Validation check failed for challenge %s: %s",
                challenge.id,
                outcome.message,
            )
            return None

        return ValidationVerdict(
            passed=outcome.data["passed"],
            feedback=outcome.data.get("feedback", ""),
            explanation=outcome.data.get("explanation", ""),
        )

    def build_prompt(
        self, challenge: Challenge, query: str, sample: Sequence[Dict[str, Any]]
    ) -> str:
        sample_json = json.dumps(list(sample), default=str)
        return f"""Challenge Goal: {challenge.description}
Validation Criteria: {challenge.validation_criteria}

User Query: {query}
User Result Sample (first {len(sample)} rows): {sample_json}

Tasks:
1. Determine if the user solved the challenge (passed: boolean).
2. Provide a feedback message (feedback: string).
3. Provide a brief educational explanation of WHY it is correct or what concept they missed (explanation: string).
   If they missed it, explain the concept (e.g. "You need a WHERE clause to filter").

Return a JSON object with keys: passed, feedback, explanation."""

"""
Quest pipeline: safety filter, simulated execution and outcome validation.

A query run is one unit of work:

  SafetyFilter --(clean)--> QuerySimulator --(no error, challenge active)--> OutcomeValidator

A blocked query short-circuits with the security message; nothing else
runs. Challenge generation is independent and runs when a quest starts or
advances.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlquest.capabilities.datasets import SchemaDescriptor
from sqlquest.capabilities.text_generation import TextGenerationService
from sqlquest.challenges import ChallengeGenerator
from sqlquest.config import QuestSettings
from sqlquest.core.models import (
    Challenge,
    Difficulty,
    QueryLog,
    QueryResult,
    QueryRunOutcome,
    RunStatus,
)
from sqlquest.core.safety import SafetyFilter
from sqlquest.engine import QuerySimulator
from sqlquest.grading import OutcomeValidator

logger = logging.getLogger(__name__)


class QuestPipeline:
    """Wires the quest components around one generation service."""

    def __init__(
        self,
        llm_service: TextGenerationService,
        *,
        settings: Optional[QuestSettings] = None,
        safety_filter: Optional[SafetyFilter] = None,
        generator: Optional[ChallengeGenerator] = None,
        simulator: Optional[QuerySimulator] = None,
        validator: Optional[OutcomeValidator] = None,
    ) -> None:
        self.settings = settings or QuestSettings()
        self.safety_filter = safety_filter or SafetyFilter()
        self.generator = generator or ChallengeGenerator(
            llm_service, settings=self.settings
        )
        self.simulator = simulator or QuerySimulator(
            llm_service, settings=self.settings
        )
        self.validator = validator or OutcomeValidator(
            llm_service, settings=self.settings
        )

    async def start_challenge(
        self, dataset: SchemaDescriptor, difficulty: Difficulty
    ) -> Challenge:
        challenge = await self.generator.generate(dataset, difficulty)
        logger.info(
            "Started challenge %s (%s, %s, %d pts)",
            challenge.id,
            dataset.id,
            challenge.difficulty.value,
            challenge.points,
        )
        return challenge

    async def next_challenge(
        self, dataset: SchemaDescriptor, previous: Challenge
    ) -> Challenge:
        """Advance the quest at the previous challenge's difficulty."""
        return await self.start_challenge(dataset, previous.difficulty)

    async def run_query(
        self,
        query: str,
        dataset: SchemaDescriptor,
        challenge: Optional[Challenge] = None,
    ) -> QueryRunOutcome:
        difficulty = challenge.difficulty if challenge else None

        safety = self.safety_filter.check(query)
        if safety.blocked:
            logger.warning(
                "Blocked query on %s (matched %s)",
                dataset.id,
                ", ".join(safety.matched_keywords),
            )
            return QueryRunOutcome(
                result=QueryResult.failure(safety.reason or "Query blocked"),
                log=self._log(query, dataset, RunStatus.BLOCKED, difficulty),
            )

        result = await self.simulator.run(query, dataset)
        if result.error is not None:
            return QueryRunOutcome(
                result=result,
                log=self._log(query, dataset, RunStatus.ERROR, difficulty),
            )

        verdict = None
        if challenge is not None:
            verdict = await self.validator.validate(challenge, query, result.rows)

        return QueryRunOutcome(
            result=result,
            verdict=verdict,
            log=self._log(
                query, dataset, RunStatus.SUCCESS, difficulty, result.bytes_processed
            ),
        )

    def _log(
        self,
        query: str,
        dataset: SchemaDescriptor,
        status: RunStatus,
        difficulty: Optional[Difficulty],
        bytes_processed: int = 0,
    ) -> QueryLog:
        return QueryLog(
            query=query,
            status=status,
            bytes_processed=bytes_processed,
            dataset_id=dataset.id,
            difficulty=difficulty,
        )

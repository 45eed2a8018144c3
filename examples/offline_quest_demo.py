"""Golden path: one quest round against the fixture generation service.

Runs without network access. Swap FixtureTextGenerationService for
OpenRouterLlmService to play against a real model.

Run:
  python examples/offline_quest_demo.py
"""

import asyncio
import logging

from sqlquest import DatasetCatalog, Difficulty, QuestPipeline, compute_award
from sqlquest.integrations.fixture import FixtureTextGenerationService


def build_service() -> FixtureTextGenerationService:
    return FixtureTextGenerationService(
        routes={
            "Senior SQL Instructor": {
                "title": "Suspicious Fares",
                "description": "The fraud team needs the 10 most expensive trips above $50.",
                "hints": [
                    "fare_amount holds the price of a trip.",
                    "Filter with WHERE, sort with ORDER BY, cap with LIMIT.",
                    "Try WHERE fare_amount > 50 ORDER BY fare_amount DESC.",
                ],
                "validationCriteria": "At most 10 rows, all with fare_amount > 50, sorted descending.",
                "points": 120,
            },
            "Act as a Google BigQuery SQL Engine": {
                "columns": ["pickup_datetime", "fare_amount"],
                "rows": [
                    {"pickup_datetime": "2023-03-01T08:14:00", "fare_amount": 212.5},
                    {"pickup_datetime": "2023-03-04T22:41:00", "fare_amount": 180.0},
                ],
                "totalRowCount": 2,
                "bytesProcessed": 52_428_800,
                "durationMs": 930,
            },
            "Challenge Goal:": {
                "passed": True,
                "feedback": "Spot on.",
                "explanation": "WHERE filters, ORDER BY ... DESC ranks, LIMIT caps the list.",
            },
        }
    )


async def main() -> None:
    logging.basicConfig(level=logging.INFO)
    dataset = DatasetCatalog.builtin().get("nyc-taxi")
    pipeline = QuestPipeline(build_service())

    challenge = await pipeline.start_challenge(dataset, Difficulty.BEGINNER)
    print(f"[{challenge.points} pts] {challenge.title}: {challenge.description}")

    for query in (
        "DROP TABLE trips",
        "SELECT pickup_datetime, fare_amount FROM trips "
        "WHERE fare_amount > 50 ORDER BY fare_amount DESC LIMIT 10",
    ):
        outcome = await pipeline.run_query(query, dataset, challenge)
        print(f"> {query}")
        if outcome.result.error:
            print(f"  error: {outcome.result.error}")
            continue
        print(outcome.result.to_dataframe().to_string(index=False))
        print(f"  ~{outcome.result.total_row_count} rows, ${outcome.result.cost_estimate:.6f}")
        if outcome.verdict:
            award = compute_award(0, challenge, outcome.verdict)
            print(f"  passed={outcome.verdict.passed} +{award.xp_gained} XP: {outcome.verdict.feedback}")


if __name__ == "__main__":
    asyncio.run(main())

"""
FastAPI routes exposing datasets, challenge generation and query runs.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

try:
    from fastapi import APIRouter, HTTPException
except ImportError:
    raise ImportError(
        "FastAPI is required for quest routes. "
        "Install with: pip install 'sqlquest[fastapi]'"
    )

from sqlquest.capabilities.datasets import (
    DatasetCatalog,
    DatasetNotFoundError,
    SchemaDescriptor,
)
from sqlquest.core.models import Challenge, Difficulty
from sqlquest.core.policy import policy_summary
from sqlquest.services import QuestPipeline


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class StartChallengeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dataset_id: str = Field(alias="datasetId")
    difficulty: Difficulty = Difficulty.BEGINNER


class RunQueryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dataset_id: str = Field(alias="datasetId")
    query: str = Field(description="Raw SQL typed by the user")
    challenge: Optional[Challenge] = Field(
        default=None, description="Active challenge, if any"
    )


# ---------------------------------------------------------------------------
# Route registration
# ---------------------------------------------------------------------------


def register_quest_routes(
    app: Any,
    pipeline: QuestPipeline,
    catalog: DatasetCatalog,
    *,
    prefix: str = "/api/sqlquest/v1",
) -> None:
    """Register quest API routes on a FastAPI app."""
    router = APIRouter(prefix=prefix, tags=["sqlquest"])

    def _dataset(dataset_id: str) -> SchemaDescriptor:
        try:
            return catalog.get(dataset_id)
        except DatasetNotFoundError:
            raise HTTPException(
                status_code=404, detail=f"Dataset '{dataset_id}' not found"
            )

    @router.get("/datasets")
    async def list_datasets() -> Dict[str, Any]:
        return {
            "datasets": [
                {
                    "id": d.id,
                    "name": d.name,
                    "description": d.description,
                    "tables": d.table_names,
                }
                for d in catalog.list()
            ]
        }

    @router.get("/datasets/{dataset_id}")
    async def get_dataset(dataset_id: str) -> Dict[str, Any]:
        return {"dataset": _dataset(dataset_id).model_dump(mode="json")}

    @router.get("/difficulties")
    async def list_difficulties() -> Dict[str, Any]:
        return {"difficulties": policy_summary()}

    @router.post("/challenges")
    async def start_challenge(body: StartChallengeRequest) -> Dict[str, Any]:
        dataset = _dataset(body.dataset_id)
        challenge = await pipeline.start_challenge(dataset, body.difficulty)
        return {"challenge": challenge.model_dump(mode="json", by_alias=True)}

    @router.post("/queries")
    async def run_query(body: RunQueryRequest) -> Dict[str, Any]:
        dataset = _dataset(body.dataset_id)
        if body.challenge is not None and body.challenge.dataset_id != dataset.id:
            raise HTTPException(
                status_code=400,
                detail="Challenge belongs to a different dataset",
            )
        outcome = await pipeline.run_query(body.query, dataset, body.challenge)
        return {
            "result": outcome.result.model_dump(mode="json", by_alias=True),
            "verdict": outcome.verdict.model_dump(mode="json")
            if outcome.verdict
            else None,
            "log": outcome.log.model_dump(mode="json", by_alias=True),
        }

    app.include_router(router)

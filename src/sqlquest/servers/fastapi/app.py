"""Application factory for the quest API."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from sqlquest.capabilities.datasets import DatasetCatalog
from sqlquest.capabilities.text_generation import TextGenerationService
from sqlquest.config import QuestSettings
from sqlquest.services import QuestPipeline

from .routes import register_quest_routes

logger = logging.getLogger(__name__)


def create_app(
    llm_service: Optional[TextGenerationService] = None,
    *,
    settings: Optional[QuestSettings] = None,
    catalog: Optional[DatasetCatalog] = None,
) -> FastAPI:
    """Build a FastAPI app serving the quest routes.

    Without an explicit service, an OpenRouter service is configured from
    the environment.
    """
    settings = settings or QuestSettings()
    if catalog is None:
        if settings.datasets_path:
            catalog = DatasetCatalog.from_yaml(settings.datasets_path)
        else:
            catalog = DatasetCatalog.builtin()

    if llm_service is None:
        from sqlquest.integrations.openrouter import OpenRouterLlmService

        llm_service = OpenRouterLlmService()
        logger.info("Using OpenRouter model %s", llm_service.model)

    app = FastAPI(title="sqlquest")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "datasets": len(catalog)}

    register_quest_routes(app, QuestPipeline(llm_service, settings=settings), catalog)
    return app

"""OpenRouter text generation service.

OpenRouter speaks the OpenAI chat-completions protocol, so the service
reuses :class:`OpenAILlmService` for transport. What differs is how the
quest stages' response shapes travel: when a stage passes a JSON Schema,
it is sent as a native ``json_schema`` response format, and OpenRouter is
told to route only to providers that honour it. Schemaless calls keep
plain JSON mode.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from sqlquest.integrations.openai import OpenAILlmService


def _identification_headers(
    http_referer: Optional[str], app_title: Optional[str]
) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    if http_referer:
        headers["HTTP-Referer"] = http_referer
    if app_title:
        headers["X-Title"] = app_title
    return headers


class OpenRouterLlmService(OpenAILlmService):
    """Generation service routed through OpenRouter.

    Args:
        model: OpenRouter model id; falls back to env `OPENROUTER_MODEL`.
        api_key: Falls back to env `OPENROUTER_API_KEY`.
        base_url: Falls back to env `OPENROUTER_BASE_URL`.
        http_referer: Attribution header; env `OPENROUTER_HTTP_REFERER`.
        app_title: Attribution header; env `OPENROUTER_APP_TITLE`.
        schema_name: Name reported for structured-output schemas.
        require_structured_providers: Restrict routing to providers that
            support every request parameter, including ``response_format``.
    """

    DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
    DEFAULT_MODEL = "google/gemini-2.5-flash"
    DEFAULT_APP_TITLE = "sqlquest"

    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        http_referer: Optional[str] = None,
        app_title: Optional[str] = None,
        *,
        schema_name: str = "quest_response",
        require_structured_providers: bool = True,
        **extra_client_kwargs: Any,
    ) -> None:
        self.schema_name = schema_name
        self.require_structured_providers = require_structured_providers

        headers = _identification_headers(
            http_referer or os.getenv("OPENROUTER_HTTP_REFERER"),
            app_title or os.getenv("OPENROUTER_APP_TITLE") or self.DEFAULT_APP_TITLE,
        )
        extra_client_kwargs["default_headers"] = {
            **(extra_client_kwargs.get("default_headers") or {}),
            **headers,
        }

        super().__init__(
            model=model or os.getenv("OPENROUTER_MODEL") or self.DEFAULT_MODEL,
            api_key=api_key or os.getenv("OPENROUTER_API_KEY"),
            base_url=base_url
            or os.getenv("OPENROUTER_BASE_URL")
            or self.DEFAULT_BASE_URL,
            **extra_client_kwargs,
        )

    def _request_options(
        self, response_schema: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        if response_schema is None:
            return super()._request_options(response_schema)

        options: Dict[str, Any] = {
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": self.schema_name, "schema": response_schema},
            }
        }
        if self.require_structured_providers:
            options["extra_body"] = {"provider": {"require_parameters": True}}
        return options

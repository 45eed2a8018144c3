"""OpenAI-backed text generation service."""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

try:
    import openai
except ImportError:
    raise ImportError(
        "The OpenAI SDK is required for OpenAILlmService. "
        "Install with: pip install 'sqlquest[openai]'"
    )

from sqlquest.capabilities.text_generation import TextGenerationService

JSON_SYSTEM_PROMPT = "You are a precise assistant. Reply with a single JSON object and nothing else."


class OpenAILlmService(TextGenerationService):
    """Chat-completions service returning JSON-mode text.

    Args:
        model: Model id; falls back to env `OPENAI_MODEL`.
        api_key: API key; falls back to env `OPENAI_API_KEY`.
        base_url: Custom base URL; falls back to env `OPENAI_BASE_URL`.
        temperature: Sampling temperature.
        extra_client_kwargs: Extra kwargs forwarded to `openai.AsyncOpenAI()`.
    """

    DEFAULT_MODEL = "gpt-4o-mini"

    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        temperature: float = 0.7,
        **extra_client_kwargs: Any,
    ) -> None:
        self.model = model or os.getenv("OPENAI_MODEL") or self.DEFAULT_MODEL
        self.temperature = temperature

        client_kwargs: Dict[str, Any] = dict(extra_client_kwargs)
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        base_url = base_url or os.getenv("OPENAI_BASE_URL")
        if api_key:
            client_kwargs["api_key"] = api_key
        if base_url:
            client_kwargs["base_url"] = base_url

        self.client = openai.AsyncOpenAI(**client_kwargs)

    def _system_prompt(self, response_schema: Optional[Dict[str, Any]]) -> str:
        if response_schema is None:
            return JSON_SYSTEM_PROMPT
        return (
            JSON_SYSTEM_PROMPT
            + "\nThe object must follow this JSON Schema:\n"
            + json.dumps(response_schema)
        )

    def _request_options(
        self, response_schema: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Provider-specific keyword arguments for the completion call."""
        return {"response_format": {"type": "json_object"}}

    async def generate(
        self, prompt: str, response_schema: Optional[Dict[str, Any]] = None
    ) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": self._system_prompt(response_schema)},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
            **self._request_options(response_schema),
        )
        return response.choices[0].message.content or ""

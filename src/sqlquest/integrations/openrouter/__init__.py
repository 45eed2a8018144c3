"""OpenRouter integration.

Structured requests are sent with OpenRouter's native ``json_schema``
response format.

Environment variables:
  - OPENROUTER_API_KEY
  - OPENROUTER_MODEL (e.g. "google/gemini-2.5-flash", "openai/gpt-4o-mini")
  - OPENROUTER_BASE_URL (defaults to https://openrouter.ai/api/v1)
  - OPENROUTER_HTTP_REFERER (optional)
  - OPENROUTER_APP_TITLE (optional; defaults to "sqlquest")
"""

from .llm import OpenRouterLlmService

__all__ = ["OpenRouterLlmService"]

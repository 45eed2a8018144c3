"""OpenAI integration.

Environment variables:
  - OPENAI_API_KEY
  - OPENAI_MODEL (defaults to "gpt-4o-mini")
  - OPENAI_BASE_URL (optional)
"""

from .llm import OpenAILlmService

__all__ = ["OpenAILlmService"]

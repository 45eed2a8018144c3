"""Base interface for the external structured-generation service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TextGenerationService(ABC):
    """Generates text (expected to hold JSON) for a natural-language prompt."""

    @abstractmethod
    async def generate(
        self, prompt: str, response_schema: Optional[Dict[str, Any]] = None
    ) -> str:
        """Return the raw response text.

        Args:
            prompt: Natural-language instructions
            response_schema: Optional JSON Schema the output should follow.
                Providers that support constrained decoding forward it;
                others may ignore it.
        """
        pass

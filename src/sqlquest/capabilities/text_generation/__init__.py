"""Text generation capability exports."""

from .base import TextGenerationService
from .models import (
    GenerationOk,
    GenerationOutcome,
    GenerationParseError,
    GenerationTransportError,
)
from .structured import extract_json_object, request_structured

__all__ = [
    "TextGenerationService",
    "GenerationOk",
    "GenerationOutcome",
    "GenerationParseError",
    "GenerationTransportError",
    "extract_json_object",
    "request_structured",
]

"""Structured-output requests against a TextGenerationService.

Every call site in the pipeline goes through :func:`request_structured`,
which turns the three ways a call can end into a tagged value instead of an
exception:

  - ``GenerationOk`` with the decoded JSON object
  - ``GenerationParseError`` when the text is not a JSON object, or does not
    satisfy the requested shape
  - ``GenerationTransportError`` when the call raised or timed out
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional

from jsonschema import validate
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .base import TextGenerationService
from .models import (
    GenerationOk,
    GenerationOutcome,
    GenerationParseError,
    GenerationTransportError,
)

logger = logging.getLogger(__name__)


def extract_json_object(text: str) -> Dict[str, Any]:
    """Decode the JSON object held in ``text``.

    Tolerates markdown code fences and prose around the object.

    Raises:
        ValueError: If no JSON object can be decoded.
    """
    stripped = (text or "").strip()
    if not stripped:
        raise ValueError("Empty response")

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError:
        start = stripped.find("{")
        end = stripped.rfind("}") + 1
        if start < 0 or end <= start:
            raise ValueError("No JSON object found in response")
        try:
            data = json.loads(stripped[start:end])
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed JSON in response: {e.msg}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


async def request_structured(
    service: TextGenerationService,
    prompt: str,
    *,
    response_schema: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
) -> GenerationOutcome:
    """Call ``service`` and decode its answer into a tagged outcome."""
    try:
        call = service.generate(prompt, response_schema)
        if timeout is not None:
            text = await asyncio.wait_for(call, timeout=timeout)
        else:
            text = await call
    except asyncio.TimeoutError:
        logger.warning("Generation call timed out after %ss", timeout)
        return GenerationTransportError(
            message=f"Generation service timed out after {timeout}s",
            timed_out=True,
        )
    except Exception as e:
        logger.warning("Generation call failed: %s", e, exc_info=True)
        return GenerationTransportError(message=str(e) or type(e).__name__)

    if not isinstance(text, str):
        return GenerationParseError(
            message=f"Expected text response, got {type(text).__name__}"
        )

    try:
        data = extract_json_object(text)
    except ValueError as e:
        return GenerationParseError(message=str(e), raw_text=text)

    if response_schema is not None:
        try:
            validate(instance=data, schema=response_schema)
        except JsonSchemaValidationError as e:
            return GenerationParseError(
                message=f"Response does not match expected shape: {e.message}",
                raw_text=text,
            )

    return GenerationOk(data=data)

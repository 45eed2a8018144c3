"""Tagged outcome of a structured-generation call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class GenerationOk:
    """The service answered with a JSON object matching the requested shape."""

    data: Dict[str, Any] = field(default_factory=dict)

    ok = True


@dataclass(frozen=True)
class GenerationParseError:
    """The service answered, but the text was not usable structured output."""

    message: str
    raw_text: Optional[str] = None

    ok = False


@dataclass(frozen=True)
class GenerationTransportError:
    """The call itself failed: network error, provider error, or timeout."""

    message: str
    timed_out: bool = False

    ok = False


GenerationOutcome = Union[GenerationOk, GenerationParseError, GenerationTransportError]

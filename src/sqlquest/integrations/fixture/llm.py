"""Scripted generation service used as a network-free stand-in."""

from __future__ import annotations

import asyncio
import json
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional, Union

from sqlquest.capabilities.text_generation import TextGenerationService

FixtureResponse = Union[str, Dict[str, Any], BaseException, Callable[[str], Any]]


@dataclass
class RecordedCall:
    prompt: str
    response_schema: Optional[Dict[str, Any]]


class FixtureTextGenerationService(TextGenerationService):
    """Answers from scripted fixtures instead of a model.

    ``routes`` maps a prompt substring to a response and is checked first,
    in insertion order; otherwise responses are consumed from ``responses``
    in order. A response may be text, a dict (sent as JSON), an exception
    (raised), or a callable taking the prompt.
    """

    def __init__(
        self,
        responses: Optional[Iterable[FixtureResponse]] = None,
        *,
        routes: Optional[Dict[str, FixtureResponse]] = None,
        delay_seconds: float = 0.0,
    ) -> None:
        self._queue: Deque[FixtureResponse] = deque(responses or [])
        self.routes: Dict[str, FixtureResponse] = dict(routes or {})
        self.delay_seconds = delay_seconds
        self.calls: List[RecordedCall] = []

    def queue(self, *responses: FixtureResponse) -> None:
        self._queue.extend(responses)

    @property
    def prompts(self) -> List[str]:
        return [c.prompt for c in self.calls]

    async def generate(
        self, prompt: str, response_schema: Optional[Dict[str, Any]] = None
    ) -> str:
        self.calls.append(RecordedCall(prompt=prompt, response_schema=response_schema))
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        response = self._select(prompt)
        if callable(response) and not isinstance(response, BaseException):
            response = response(prompt)
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, str):
            return response
        return json.dumps(response)

    def _select(self, prompt: str) -> FixtureResponse:
        for marker, response in self.routes.items():
            if marker in prompt:
                return response
        if not self._queue:
            raise RuntimeError("No scripted response left for prompt")
        return self._queue.popleft()

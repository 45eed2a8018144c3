"""Tests for tagged structured-output parsing."""

import asyncio

import pytest

from sqlquest.capabilities.text_generation import (
    GenerationOk,
    GenerationParseError,
    GenerationTransportError,
    extract_json_object,
    request_structured,
)
from sqlquest.integrations.fixture import FixtureTextGenerationService

SHAPE = {
    "type": "object",
    "required": ["passed"],
    "properties": {"passed": {"type": "boolean"}},
}


class TestExtractJsonObject:
    def test_plain_object(self):
        assert extract_json_object('{"a": 1}') == {"a": 1}

    def test_fenced_object(self):
        text = 'Here you go:\n```json\n{"a": [1, 2]}\n```'
        assert extract_json_object(text) == {"a": [1, 2]}

    def test_empty_text_rejected(self):
        with pytest.raises(ValueError):
            extract_json_object("   ")

    def test_non_json_rejected(self):
        with pytest.raises(ValueError):
            extract_json_object("I cannot help with that.")

    def test_array_rejected(self):
        with pytest.raises(ValueError):
            extract_json_object("[1, 2, 3]")

    def test_broken_json_rejected(self):
        with pytest.raises(ValueError):
            extract_json_object('{"a": 1,,}')


@pytest.mark.asyncio
async def test_ok_outcome():
    service = FixtureTextGenerationService([{"passed": True}])
    outcome = await request_structured(service, "judge", response_schema=SHAPE)
    assert isinstance(outcome, GenerationOk)
    assert outcome.ok is True
    assert outcome.data == {"passed": True}


@pytest.mark.asyncio
async def test_schema_is_forwarded_to_service():
    service = FixtureTextGenerationService([{"passed": False}])
    await request_structured(service, "judge", response_schema=SHAPE)
    assert service.calls[0].response_schema == SHAPE


@pytest.mark.asyncio
async def test_malformed_text_is_parse_error():
    service = FixtureTextGenerationService(["not json at all"])
    outcome = await request_structured(service, "judge")
    assert isinstance(outcome, GenerationParseError)
    assert outcome.ok is False
    assert outcome.raw_text == "not json at all"


@pytest.mark.asyncio
async def test_shape_mismatch_is_parse_error():
    service = FixtureTextGenerationService([{"passed": "yes"}])
    outcome = await request_structured(service, "judge", response_schema=SHAPE)
    assert isinstance(outcome, GenerationParseError)
    assert "expected shape" in outcome.message


@pytest.mark.asyncio
async def test_exception_is_transport_error():
    service = FixtureTextGenerationService([ConnectionError("connection reset")])
    outcome = await request_structured(service, "judge")
    assert isinstance(outcome, GenerationTransportError)
    assert outcome.message == "connection reset"
    assert outcome.timed_out is False


@pytest.mark.asyncio
async def test_timeout_is_transport_error():
    service = FixtureTextGenerationService([{"passed": True}], delay_seconds=0.5)
    outcome = await request_structured(service, "judge", timeout=0.01)
    assert isinstance(outcome, GenerationTransportError)
    assert outcome.timed_out is True


def test_sync_caller_can_drive_request():
    async def run():
        service = FixtureTextGenerationService(['{"x": 1}'])
        return await request_structured(service, "p")

    outcome = asyncio.run(run())
    assert isinstance(outcome, GenerationOk)

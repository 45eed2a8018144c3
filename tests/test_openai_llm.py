"""Unit tests for the OpenAI and OpenRouter generation services.

These tests validate the integrations without making network calls.
"""

import json
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest


def completion(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


class TestOpenAIInitialization:
    @patch.dict(
        os.environ,
        {"OPENAI_API_KEY": "env-key", "OPENAI_MODEL": "gpt-4.1-mini"},
        clear=False,
    )
    @patch("openai.AsyncOpenAI")
    def test_init_from_environment(self, mock_openai):
        from sqlquest.integrations.openai import OpenAILlmService

        service = OpenAILlmService()

        assert service.model == "gpt-4.1-mini"
        mock_openai.assert_called_once()
        assert mock_openai.call_args[1]["api_key"] == "env-key"

    @patch("openai.AsyncOpenAI")
    def test_explicit_params_override_env(self, mock_openai):
        from sqlquest.integrations.openai import OpenAILlmService

        service = OpenAILlmService(
            model="gpt-4o", api_key="k", base_url="https://proxy.test/v1"
        )

        assert service.model == "gpt-4o"
        call_kwargs = mock_openai.call_args[1]
        assert call_kwargs["api_key"] == "k"
        assert call_kwargs["base_url"] == "https://proxy.test/v1"


class TestOpenAIGenerate:
    @pytest.mark.asyncio
    @patch("openai.AsyncOpenAI")
    async def test_generate_requests_json_mode(self, mock_openai):
        from sqlquest.integrations.openai import OpenAILlmService

        create = AsyncMock(return_value=completion('{"passed": true}'))
        mock_openai.return_value.chat.completions.create = create

        service = OpenAILlmService(model="gpt-4o-mini", api_key="k")
        schema = {"type": "object", "properties": {"passed": {"type": "boolean"}}}
        text = await service.generate("judge this", schema)

        assert text == '{"passed": true}'
        kwargs = create.call_args[1]
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][1] == {"role": "user", "content": "judge this"}
        assert json.dumps(schema) in kwargs["messages"][0]["content"]

    @pytest.mark.asyncio
    @patch("openai.AsyncOpenAI")
    async def test_generate_empty_content_returns_empty_text(self, mock_openai):
        from sqlquest.integrations.openai import OpenAILlmService

        mock_openai.return_value.chat.completions.create = AsyncMock(
            return_value=completion(None)
        )
        service = OpenAILlmService(api_key="k")
        assert await service.generate("p") == ""


class TestOpenRouterInitialization:
    @patch.dict(
        os.environ,
        {
            "OPENROUTER_API_KEY": "test-key",
            "OPENROUTER_MODEL": "openai/gpt-4o-mini",
            "OPENROUTER_HTTP_REFERER": "https://example.test",
            "OPENROUTER_APP_TITLE": "sqlquest-test",
        },
        clear=False,
    )
    @patch("openai.AsyncOpenAI")
    def test_init_from_environment_sets_base_url_and_headers(self, mock_openai):
        from sqlquest.integrations.openrouter import OpenRouterLlmService

        service = OpenRouterLlmService()

        assert service.model == "openai/gpt-4o-mini"

        mock_openai.assert_called_once()
        call_kwargs = mock_openai.call_args[1]
        assert call_kwargs["api_key"] == "test-key"
        assert call_kwargs["base_url"] == "https://openrouter.ai/api/v1"

        headers = call_kwargs.get("default_headers")
        assert isinstance(headers, dict)
        assert headers.get("HTTP-Referer") == "https://example.test"
        assert headers.get("X-Title") == "sqlquest-test"

    @patch("openai.AsyncOpenAI")
    def test_init_explicit_params_override_env(self, mock_openai):
        from sqlquest.integrations.openrouter import OpenRouterLlmService

        service = OpenRouterLlmService(
            api_key="k",
            model="google/gemini-2.5-flash",
            base_url="https://openrouter.ai/api/v1",
            http_referer="https://r.test",
            app_title="title",
            default_headers={"X-Extra": "1"},
        )

        assert service.model == "google/gemini-2.5-flash"
        call_kwargs = mock_openai.call_args[1]
        assert call_kwargs["api_key"] == "k"
        assert call_kwargs["default_headers"] == {
            "X-Extra": "1",
            "HTTP-Referer": "https://r.test",
            "X-Title": "title",
        }


class TestOpenRouterGenerate:
    SCHEMA = {
        "type": "object",
        "properties": {"passed": {"type": "boolean"}},
        "required": ["passed"],
    }

    @pytest.mark.asyncio
    @patch("openai.AsyncOpenAI")
    async def test_schema_sent_as_native_json_schema(self, mock_openai):
        from sqlquest.integrations.openrouter import OpenRouterLlmService

        create = AsyncMock(return_value=completion('{"passed": false}'))
        mock_openai.return_value.chat.completions.create = create

        service = OpenRouterLlmService(api_key="k", schema_name="verdict")
        text = await service.generate("judge this", self.SCHEMA)

        assert text == '{"passed": false}'
        kwargs = create.call_args[1]
        assert kwargs["response_format"] == {
            "type": "json_schema",
            "json_schema": {"name": "verdict", "schema": self.SCHEMA},
        }
        assert kwargs["extra_body"] == {"provider": {"require_parameters": True}}

    @pytest.mark.asyncio
    @patch("openai.AsyncOpenAI")
    async def test_schemaless_call_uses_json_mode(self, mock_openai):
        from sqlquest.integrations.openrouter import OpenRouterLlmService

        create = AsyncMock(return_value=completion("{}"))
        mock_openai.return_value.chat.completions.create = create

        await OpenRouterLlmService(api_key="k").generate("p")

        kwargs = create.call_args[1]
        assert kwargs["response_format"] == {"type": "json_object"}
        assert "extra_body" not in kwargs

    @pytest.mark.asyncio
    @patch("openai.AsyncOpenAI")
    async def test_provider_restriction_can_be_disabled(self, mock_openai):
        from sqlquest.integrations.openrouter import OpenRouterLlmService

        create = AsyncMock(return_value=completion("{}"))
        mock_openai.return_value.chat.completions.create = create

        service = OpenRouterLlmService(api_key="k", require_structured_providers=False)
        await service.generate("p", self.SCHEMA)

        kwargs = create.call_args[1]
        assert kwargs["response_format"]["type"] == "json_schema"
        assert "extra_body" not in kwargs

    @patch.dict(os.environ, {}, clear=False)
    @patch("openai.AsyncOpenAI")
    def test_default_app_title_header(self, mock_openai):
        from sqlquest.integrations.openrouter import OpenRouterLlmService

        os.environ.pop("OPENROUTER_APP_TITLE", None)
        os.environ.pop("OPENROUTER_HTTP_REFERER", None)
        OpenRouterLlmService(api_key="k")

        assert mock_openai.call_args[1]["default_headers"] == {"X-Title": "sqlquest"}

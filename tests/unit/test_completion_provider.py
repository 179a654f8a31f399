"""Unit tests for the chat completion provider."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from nova_stories.core.providers import (
    ChatCompletionProvider,
    CompletionError,
    UnavailableCompletionProvider,
    create_completion_provider,
)


def make_completion(content):
    """Build an object shaped like a chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def make_client(return_value=None, side_effect=None):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=return_value, side_effect=side_effect)
    return client


class TestChatCompletionProvider:
    """Tests for ChatCompletionProvider.complete."""

    @pytest.mark.asyncio
    async def test_returns_message_content(self):
        client = make_client(return_value=make_completion('{"story_title": "X"}'))
        provider = ChatCompletionProvider(client, model="test-model")

        text = await provider.complete("system", "user")

        assert text == '{"story_title": "X"}'

    @pytest.mark.asyncio
    async def test_requests_json_mode_with_system_and_user_turns(self):
        client = make_client(return_value=make_completion("{}"))
        provider = ChatCompletionProvider(client, model="test-model")

        await provider.complete("Output JSON only.", "Tell a story")

        client.chat.completions.create.assert_awaited_once_with(
            model="test-model",
            messages=[
                {"role": "system", "content": "Output JSON only."},
                {"role": "user", "content": "Tell a story"},
            ],
            response_format={"type": "json_object"},
        )

    @pytest.mark.asyncio
    async def test_defaults_to_configured_model(self):
        client = make_client(return_value=make_completion("{}"))
        provider = ChatCompletionProvider(client)

        await provider.complete("system", "user")

        assert client.chat.completions.create.call_args.kwargs["model"] == "llama-3.1-8b-instant"

    @pytest.mark.asyncio
    async def test_sdk_error_becomes_completion_error(self):
        request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
        client = make_client(side_effect=openai.APIConnectionError(request=request))
        provider = ChatCompletionProvider(client, model="test-model")

        with pytest.raises(CompletionError):
            await provider.complete("system", "user")

    @pytest.mark.asyncio
    async def test_no_choices_is_an_error(self):
        client = make_client(return_value=SimpleNamespace(choices=[]))
        provider = ChatCompletionProvider(client, model="test-model")

        with pytest.raises(CompletionError):
            await provider.complete("system", "user")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_empty_content_is_an_error(self, content):
        client = make_client(return_value=make_completion(content))
        provider = ChatCompletionProvider(client, model="test-model")

        with pytest.raises(CompletionError):
            await provider.complete("system", "user")


class TestCreateCompletionProvider:
    """Tests for building the provider from the environment."""

    def test_requires_api_key(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)

        with pytest.raises(ValueError, match="GROQ_API_KEY"):
            create_completion_provider()

    def test_builds_groq_client_without_retries(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "test-groq-key")

        provider = create_completion_provider()

        assert isinstance(provider.client, openai.AsyncOpenAI)
        assert "api.groq.com" in str(provider.client.base_url)
        assert provider.client.max_retries == 0


class TestUnavailableCompletionProvider:
    @pytest.mark.asyncio
    async def test_always_fails_with_reason(self):
        provider = UnavailableCompletionProvider("No API key found")

        with pytest.raises(CompletionError, match="No API key found"):
            await provider.complete("system", "user")

    def test_reports_configured_model(self):
        assert UnavailableCompletionProvider("No API key found").model == "llama-3.1-8b-instant"

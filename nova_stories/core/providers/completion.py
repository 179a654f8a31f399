"""Chat completion provider used for story generation."""

import logging
from typing import Optional, Protocol

import openai
from openai import AsyncOpenAI

from ...config.llm import COMPLETION_MODEL, get_completion_client

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """The completion provider failed or returned nothing usable."""


class CompletionProvider(Protocol):
    """Anything that turns a system + user message into completion text."""

    model: str

    async def complete(self, system_message: str, user_message: str) -> str:
        ...


class ChatCompletionProvider:
    """Completion provider backed by an OpenAI-compatible chat completions API.

    The model runs in JSON mode, so a successful reply should be a single
    JSON object. The reply text is returned untouched.
    """

    def __init__(self, client: AsyncOpenAI, model: Optional[str] = None):
        self.client = client
        self.model = model or COMPLETION_MODEL

    async def complete(self, system_message: str, user_message: str) -> str:
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_message},
                    {"role": "user", "content": user_message},
                ],
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            raise CompletionError(f"{type(e).__name__}: {e}") from e

        if not completion.choices:
            raise CompletionError(f"Model {self.model} returned no choices")

        content = completion.choices[0].message.content
        if not content or not content.strip():
            raise CompletionError(f"Model {self.model} returned an empty message")

        logger.debug(f"Completion received from {self.model} ({len(content)} chars)")
        return content


def create_completion_provider() -> ChatCompletionProvider:
    """
    Build the configured completion provider.

    Raises:
        ValueError: If GROQ_API_KEY is not set.
    """
    return ChatCompletionProvider(client=get_completion_client())


class UnavailableCompletionProvider:
    """Stands in for a provider that could not be configured.

    Every call fails with the configuration error, so requests still get
    validated first and then fail like any other provider error.
    """

    def __init__(self, reason: str):
        self.reason = reason
        self.model = COMPLETION_MODEL

    async def complete(self, system_message: str, user_message: str) -> str:
        raise CompletionError(f"Completion provider unavailable: {self.reason}")

"""Text-to-speech providers used for story narration."""

import logging
from typing import AsyncGenerator, Protocol

import httpx
from cartesia import AsyncCartesia
from elevenlabs.client import AsyncElevenLabs
from elevenlabs.core import ApiError

from ...config.narration import (
    CARTESIA_MODEL_ID,
    CARTESIA_VOICE_ID,
    ELEVENLABS_MODEL_ID,
    ELEVENLABS_OUTPUT_FORMAT,
    ELEVENLABS_VOICE_ID,
    NARRATION_PROVIDER,
    NARRATION_TIMEOUT,
    get_narration_api_key,
)

logger = logging.getLogger(__name__)


class NarrationError(Exception):
    """The narration provider failed before or during streaming."""


class NarrationProvider(Protocol):
    """Anything that turns text into a stream of encoded audio bytes.

    ``synthesize`` is an async generator so callers can close it early.
    """

    def synthesize(self, text: str) -> AsyncGenerator[bytes, None]:
        ...


class ElevenLabsNarrationProvider:
    """Narration via the ElevenLabs SDK.

    The full text goes out in one ``text_to_speech.convert`` call; the MP3
    body is streamed back chunk by chunk. The SDK runs on an httpx client
    owned by this call, so the connection is released however the stream ends.
    """

    def __init__(
        self,
        api_key: str,
        voice_id: str = ELEVENLABS_VOICE_ID,
        model_id: str = ELEVENLABS_MODEL_ID,
        timeout: float = NARRATION_TIMEOUT,
    ):
        self.api_key = api_key
        self.voice_id = voice_id
        self.model_id = model_id
        self.timeout = timeout

    async def synthesize(self, text: str) -> AsyncGenerator[bytes, None]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as http_client:
                client = AsyncElevenLabs(
                    api_key=self.api_key,
                    timeout=self.timeout,
                    httpx_client=http_client,
                )
                async for chunk in client.text_to_speech.convert(
                    voice_id=self.voice_id,
                    model_id=self.model_id,
                    text=text,
                    output_format=ELEVENLABS_OUTPUT_FORMAT,
                ):
                    if chunk:
                        yield chunk
        except ApiError as e:
            raise NarrationError(f"ElevenLabs returned HTTP {e.status_code}: {str(e.body)[:200]}") from e
        except httpx.HTTPError as e:
            raise NarrationError(f"ElevenLabs request failed: {type(e).__name__}: {e}") from e


class CartesiaNarrationProvider:
    """Narration via the Cartesia SDK, returned as MP3 bytes."""

    def __init__(
        self,
        api_key: str,
        voice_id: str = CARTESIA_VOICE_ID,
        model_id: str = CARTESIA_MODEL_ID,
    ):
        self.api_key = api_key
        self.voice_id = voice_id
        self.model_id = model_id

    async def synthesize(self, text: str) -> AsyncGenerator[bytes, None]:
        client = AsyncCartesia(api_key=self.api_key)
        try:
            async for chunk in client.tts.bytes(
                model_id=self.model_id,
                transcript=text,
                voice={"mode": "id", "id": self.voice_id},
                output_format={
                    "container": "mp3",
                    "sample_rate": 44100,
                    "bit_rate": 128000,
                },
            ):
                if chunk:
                    yield chunk
        except Exception as e:
            raise NarrationError(f"Cartesia synthesis failed: {type(e).__name__}: {e}") from e
        finally:
            try:
                await client.close()
            except Exception as e:
                logger.debug(f"Error closing Cartesia client: {e}")


def create_narration_provider(provider: str = NARRATION_PROVIDER) -> NarrationProvider:
    """
    Build the configured narration provider.

    Raises:
        ValueError: If the provider is unknown or its API key is missing.
    """
    api_key = get_narration_api_key(provider)
    if provider == "cartesia":
        return CartesiaNarrationProvider(api_key=api_key)
    return ElevenLabsNarrationProvider(api_key=api_key)


class UnavailableNarrationProvider:
    """Stands in for a narration provider that could not be configured."""

    def __init__(self, reason: str):
        self.reason = reason

    async def synthesize(self, text: str) -> AsyncGenerator[bytes, None]:
        raise NarrationError(f"Narration provider unavailable: {self.reason}")
        yield b""  # unreachable; keeps this an async generator

"""FastAPI dependency injection for providers and services.

Provider clients are built explicitly here and handed to the services, so
tests can swap them out through ``app.dependency_overrides``.
"""

import logging
from typing import Annotated

from fastapi import Depends

from ..core.providers import (
    CompletionProvider,
    NarrationProvider,
    UnavailableCompletionProvider,
    UnavailableNarrationProvider,
    create_completion_provider,
    create_narration_provider,
)
from . import config
from .services import AudioService, StoryService

logger = logging.getLogger(__name__)


# Provider dependencies
def get_completion_provider() -> CompletionProvider:
    """Get the configured completion provider.

    A missing API key does not fail here; the request is validated first
    and then fails at the provider call.
    """
    try:
        return create_completion_provider()
    except ValueError as e:
        logger.error(f"Completion provider not configured: {e}")
        return UnavailableCompletionProvider(str(e))


def get_narration_provider() -> NarrationProvider:
    """Get the configured narration provider."""
    try:
        return create_narration_provider()
    except ValueError as e:
        logger.error(f"Narration provider not configured: {e}")
        return UnavailableNarrationProvider(str(e))


# Services - depend on providers
def get_story_service(
    provider: Annotated[CompletionProvider, Depends(get_completion_provider)]
) -> StoryService:
    """Get a StoryService instance with injected completion provider."""
    return StoryService(provider, strip_fences=config.STRIP_CODE_FENCES)


def get_audio_service(
    provider: Annotated[NarrationProvider, Depends(get_narration_provider)]
) -> AudioService:
    """Get an AudioService instance with injected narration provider."""
    return AudioService(provider, audio_dir=config.AUDIO_DIR, base_url=config.PUBLIC_BASE_URL)


# Type aliases for cleaner route signatures
StoryServiceDep = Annotated[StoryService, Depends(get_story_service)]
AudioServiceDep = Annotated[AudioService, Depends(get_audio_service)]

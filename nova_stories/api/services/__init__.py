"""Services for story and narration generation."""

from .audio_service import AudioService
from .story_service import StoryService

__all__ = ["AudioService", "StoryService"]

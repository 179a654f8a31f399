# NOVA Story Backend - Core Domain

# Re-export types for convenient access
from .types import (
    AudioArtifact,
    StoryDocument,
    StoryType,
    UserInputs,
)

__all__ = [
    "AudioArtifact",
    "StoryDocument",
    "StoryType",
    "UserInputs",
]

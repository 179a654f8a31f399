"""
Centralized domain types for the NOVA story backend.

Types shared by the prompt builder, the providers and the API services are
defined here to keep data flow explicit and avoid circular imports.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional


DEFAULT_LANGUAGE = "English"


# =============================================================================
# Story Types
# =============================================================================


class StoryType(str, Enum):
    """Which prompt template and narrative structure to generate."""

    ADVENTURE = "adventure"
    ASTRONAUT_ROLE = "astronaut_role"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "StoryType":
        """Map a raw request value to a story type.

        Anything other than ``astronaut_role`` falls back to the adventure story.
        """
        if value == cls.ASTRONAUT_ROLE.value:
            return cls.ASTRONAUT_ROLE
        return cls.ADVENTURE


# =============================================================================
# Request Types
# =============================================================================


@dataclass(frozen=True)
class UserInputs:
    """Validated personalization parameters for one story request."""

    name: str
    age: int
    interests: tuple[str, ...]
    story_type: StoryType = StoryType.ADVENTURE
    language: str = DEFAULT_LANGUAGE

    @property
    def interests_text(self) -> str:
        """Interests joined the way they appear in prompts."""
        return ", ".join(self.interests)


# =============================================================================
# Result Types
# =============================================================================

# Parsed model output, returned verbatim. Shape is the model's responsibility:
# {"story_title": str, "story_cards": [...]} for both story types.
StoryDocument = dict[str, Any]


@dataclass
class AudioArtifact:
    """A narration file written to the audio directory."""

    filename: str
    path: Path
    url: str
    bytes_written: int = 0

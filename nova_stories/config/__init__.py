"""
Configuration module for the NOVA story backend.

Re-exports provider and story configuration.
"""

from .llm import COMPLETION_MODEL, get_completion_client
from .narration import NARRATION_PROVIDER, get_narration_api_key
from .story import ASTRONAUT_ROLE_SECTIONS, STORY_CONSTANTS

__all__ = [
    # LLM
    "COMPLETION_MODEL",
    "get_completion_client",
    # Narration
    "NARRATION_PROVIDER",
    "get_narration_api_key",
    # Story
    "ASTRONAUT_ROLE_SECTIONS",
    "STORY_CONSTANTS",
]

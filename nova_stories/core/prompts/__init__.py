"""Prompt builder: turns validated user inputs into one fully resolved prompt."""

from ..types import StoryType, UserInputs
from .adventure import age_band_guidance, build_adventure_prompt
from .astronaut_role import build_astronaut_role_prompt

# System turn sent alongside every story prompt
SYSTEM_MESSAGE = "You are a helpful assistant designed to output JSON."


def build_prompt(inputs: UserInputs) -> str:
    """Select the template for the story type and render it."""
    if inputs.story_type == StoryType.ASTRONAUT_ROLE:
        return build_astronaut_role_prompt(inputs)
    return build_adventure_prompt(inputs)


__all__ = [
    "SYSTEM_MESSAGE",
    "age_band_guidance",
    "build_adventure_prompt",
    "build_astronaut_role_prompt",
    "build_prompt",
]

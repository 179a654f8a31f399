"""Pydantic models for API requests.

Fields are optional at the schema level so that presence checks happen in the
services, where a missing field becomes a 400 ``{"error": ...}`` response.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class GenerateStoryRequest(BaseModel):
    """Request body for generating a personalized story."""

    name: Optional[str] = Field(
        default=None,
        description="Name of the reader, used as the story's main character",
        examples=["Maya"],
    )
    age: Optional[int] = Field(
        default=None,
        description="Reader's age in years; 12 and under get the playful tone",
        examples=[9],
    )
    language: Optional[str] = Field(
        default=None,
        description="Language to write the story in (defaults to English)",
        examples=["English", "Arabic"],
    )
    interests: Optional[list[str]] = Field(
        default=None,
        description="Reader's interests, woven into the story in order",
        examples=[["robots", "football"]],
    )
    story_type: Optional[str] = Field(
        default=None,
        description="'adventure' or 'astronaut_role'; anything else is treated as 'adventure'",
        examples=["adventure", "astronaut_role"],
    )

    @field_validator("interests", mode="before")
    @classmethod
    def wrap_single_interest(cls, value):
        """Accept a bare string as a one-item interest list."""
        if isinstance(value, str):
            return [value]
        return value


class GenerateAudioRequest(BaseModel):
    """Request body for narrating text."""

    text: Optional[str] = Field(
        default=None,
        description="Narration text, sent to the text-to-speech provider in one call",
        examples=["Hey Maya, have you ever wondered what life is like on the ISS?"],
    )

"""Pydantic models for API responses.

Story responses are the model's JSON document returned verbatim, so they
have no response model here.
"""

from pydantic import BaseModel, ConfigDict, Field


class GenerateAudioResponse(BaseModel):
    """URL of a freshly written narration file."""

    model_config = ConfigDict(populate_by_name=True)

    audio_url: str = Field(..., alias="audioUrl")


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str

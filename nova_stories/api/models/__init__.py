"""Pydantic models for API requests and responses."""

from .requests import GenerateAudioRequest, GenerateStoryRequest
from .responses import ErrorResponse, GenerateAudioResponse

__all__ = [
    "GenerateStoryRequest",
    "GenerateAudioRequest",
    "GenerateAudioResponse",
    "ErrorResponse",
]

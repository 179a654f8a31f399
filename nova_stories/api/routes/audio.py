"""Narration endpoint."""

from fastapi import APIRouter

from ..dependencies import AudioServiceDep
from ..models.requests import GenerateAudioRequest
from ..models.responses import ErrorResponse, GenerateAudioResponse
from ..services.audio_service import validate_text

router = APIRouter()


@router.post(
    "/generate-audio",
    response_model=GenerateAudioResponse,
    summary="Narrate text",
    description=(
        "Send the text to the text-to-speech provider, save the audio under the "
        "static audio directory and return its URL."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Text missing"},
        500: {"model": ErrorResponse, "description": "Narration or storage failed"},
    },
)
async def generate_audio(request: GenerateAudioRequest, service: AudioServiceDep) -> GenerateAudioResponse:
    """Narrate text into a new audio file."""
    text = validate_text(request.text)
    artifact = await service.generate_audio(text)
    return GenerateAudioResponse(audio_url=artifact.url)

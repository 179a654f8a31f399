"""Story generation endpoint."""

from fastapi import APIRouter

from ..dependencies import StoryServiceDep
from ..logging import generation_logger
from ..models.requests import GenerateStoryRequest
from ..models.responses import ErrorResponse
from ..services.story_service import parse_user_inputs

router = APIRouter()


@router.post(
    "/generate-story",
    summary="Generate a personalized story",
    description=(
        "Build an adventure or astronaut-role prompt from the reader's details, "
        "send it to the language model and return the story JSON it produces."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Required fields missing"},
        500: {"model": ErrorResponse, "description": "Model failed or returned invalid JSON"},
    },
)
async def generate_story(request: GenerateStoryRequest, service: StoryServiceDep):
    """Generate a story document for one reader."""
    generation_logger.story_requested(request.story_type or "unspecified")

    inputs = parse_user_inputs(request)
    return await service.generate_story(inputs)

"""Story service: validate inputs, build the prompt, call the model, parse JSON."""

import json
import re
import time

from ...core.prompts import SYSTEM_MESSAGE, build_prompt
from ...core.providers import CompletionError, CompletionProvider
from ...core.types import DEFAULT_LANGUAGE, StoryDocument, StoryType, UserInputs
from ..errors import GenerationFailed, MissingField
from ..logging import generation_logger
from ..models.requests import GenerateStoryRequest

MISSING_FIELDS_MESSAGE = "Name, age, interests, and story_type are required."
GENERATION_FAILED_MESSAGE = "Failed to generate story. The AI may be busy. Please try again."

# Matches an opening ```json / ``` fence or a closing ``` fence
CODE_FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)


def _reject_constant(name: str):
    """NaN and Infinity are not JSON; json.loads accepts them unless told otherwise."""
    raise ValueError(f"{name} is not a valid JSON value")


def parse_user_inputs(request: GenerateStoryRequest) -> UserInputs:
    """
    Check required fields and build UserInputs.

    Raises:
        MissingField: If name, age, interests or story_type is absent or empty.
    """
    name = (request.name or "").strip()
    story_type = (request.story_type or "").strip()
    interests = tuple(i.strip() for i in (request.interests or []) if i and i.strip())

    if not name or not request.age or request.age < 0 or not interests or not story_type:
        raise MissingField(MISSING_FIELDS_MESSAGE)

    language = (request.language or "").strip() or DEFAULT_LANGUAGE
    return UserInputs(
        name=name,
        age=request.age,
        interests=interests,
        story_type=StoryType.resolve(story_type),
        language=language,
    )


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences some models wrap around JSON."""
    return CODE_FENCE_PATTERN.sub("", text).strip()


class StoryService:
    """Generates one story document per request. Holds no state between requests."""

    def __init__(
        self,
        completion_provider: CompletionProvider,
        strip_fences: bool = False,
    ):
        self.completion_provider = completion_provider
        self.strip_fences = strip_fences

    async def generate_story(self, inputs: UserInputs) -> StoryDocument:
        """
        Generate and parse a story for validated inputs.

        Args:
            inputs: Validated user inputs

        Returns:
            The model's JSON document, unchanged.

        Raises:
            GenerationFailed: If the provider fails or its reply is not strict JSON.
        """
        story_type = inputs.story_type.value
        start_time = time.time()

        prompt = build_prompt(inputs)
        generation_logger.story_dispatched(story_type, self.completion_provider.model)

        try:
            text = await self.completion_provider.complete(SYSTEM_MESSAGE, prompt)
        except CompletionError as e:
            generation_logger.story_failed(story_type, e, "completion")
            raise GenerationFailed(GENERATION_FAILED_MESSAGE) from e

        if self.strip_fences:
            text = strip_code_fences(text)

        try:
            story = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            generation_logger.story_failed(story_type, e, "parse")
            generation_logger.logger.debug(f"Unparseable model output: {text[:500]}")
            raise GenerationFailed(GENERATION_FAILED_MESSAGE) from e

        generation_logger.story_completed(story_type, time.time() - start_time)
        return story

"""Error taxonomy for the API layer and the handlers that render it.

Every failure leaves the API as ``{"error": "<human readable message>"}``.
Exception detail stays in the server log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StoryAPIError(Exception):
    """Base class for errors returned to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(StoryAPIError):
    """Client input is incomplete. Never retried."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Required fields are missing."


class GenerationFailed(StoryAPIError):
    """A provider call errored or its reply could not be parsed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Generation failed. Please try again."


class StorageFailed(StoryAPIError):
    """Generated audio could not be written to local storage."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to save audio file."


async def story_api_error_handler(request: Request, exc: StoryAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors, reported like missing fields."""
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Request body is missing required fields or has invalid values."},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error for {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": StoryAPIError.default_message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the app."""
    app.add_exception_handler(StoryAPIError, story_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

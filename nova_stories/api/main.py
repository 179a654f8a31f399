"""FastAPI application for the NOVA story backend."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..config import NARRATION_PROVIDER, get_narration_api_key
from . import config
from .errors import register_exception_handlers
from .logging import configure_logging
from .routes import audio, stories

logger = logging.getLogger(__name__)


def check_provider_configuration() -> None:
    """Warn about missing provider keys. Affected requests fail with a 500."""
    if not os.getenv("GROQ_API_KEY"):
        logger.warning("GROQ_API_KEY not set - story generation will fail")
    try:
        get_narration_api_key(NARRATION_PROVIDER)
    except ValueError as e:
        logger.warning(f"Narration provider not configured - audio generation will fail: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    configure_logging(json_format=config.LOG_FORMAT == "json", level=config.LOG_LEVEL)

    config.AUDIO_DIR.mkdir(parents=True, exist_ok=True)
    logger.info(f"Serving audio from {config.AUDIO_DIR}")
    check_provider_configuration()

    yield


app = FastAPI(
    title="NOVA Story API",
    description="""
Generate personalized, NASA-inspired space stories and their narration.

## Endpoints
- POST `/api/generate-story` with the reader's name, age, language, interests
  and story type (`adventure` or `astronaut_role`) to get a story JSON document
- POST `/api/generate-audio` with narration text to get a URL to an MP3 file
- GET `/audio/{filename}` to download generated narration
    """,
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(stories.router, prefix="/api", tags=["Stories"])
app.include_router(audio.router, prefix="/api", tags=["Audio"])

# Generated narration, read-only
app.mount(
    config.AUDIO_URL_PREFIX,
    StaticFiles(directory=config.AUDIO_DIR, check_dir=False),
    name="audio",
)


@app.get("/", tags=["Health"])
async def root():
    """Service information."""
    return {
        "message": "NOVA Story API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "generate_story": "/api/generate-story",
            "generate_audio": "/api/generate-audio",
            "audio_files": f"{config.AUDIO_URL_PREFIX}/{{filename}}",
        },
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}

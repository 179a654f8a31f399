"""API configuration constants.

Single source of truth for paths and settings used across the API layer.
"""

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

# Base directories
API_DIR = Path(__file__).parent
PACKAGE_DIR = API_DIR.parent
PROJECT_DIR = PACKAGE_DIR.parent
PUBLIC_DIR = PROJECT_DIR / "public"

# Server address used to build public audio URLs
SERVER_HOST = os.getenv("SERVER_HOST", "localhost")
SERVER_PORT = int(os.getenv("SERVER_PORT", "3001"))
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", f"http://{SERVER_HOST}:{SERVER_PORT}").rstrip("/")

# Generated narration storage, served read-only under AUDIO_URL_PREFIX
AUDIO_DIR = Path(os.getenv("AUDIO_DIR", str(PUBLIC_DIR / "audio")))
AUDIO_URL_PREFIX = "/audio"
AUDIO_FILE_PREFIX = "story_audio_"
AUDIO_EXTENSION = ".mp3"

# Strip ```json fences from model output before parsing
STRIP_CODE_FENCES = os.getenv("STRIP_CODE_FENCES", "").lower() in ("1", "true", "yes")

# Logging
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").lower()
LOG_LEVEL = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO

"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a GenerationLogger helper for story and
narration request events.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

# Extra record attributes copied into JSON output when present
STRUCTURED_FIELDS = (
    "story_type",
    "stage",
    "duration",
    "error_type",
    "audio_file",
    "bytes_written",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        for field_name in STRUCTURED_FIELDS:
            if hasattr(record, field_name):
                log_data[field_name] = getattr(record, field_name)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create console handler
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class GenerationLogger:
    """Logger for story and narration request events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("nova_stories.generation")

    def story_requested(self, story_type: str) -> None:
        self.logger.info(
            f"Received request for story type: {story_type}",
            extra={"story_type": story_type, "stage": "received"},
        )

    def story_dispatched(self, story_type: str, model: str) -> None:
        self.logger.info(
            f"Sending prompt to {model}",
            extra={"story_type": story_type, "stage": "dispatched"},
        )

    def story_completed(self, story_type: str, duration: float) -> None:
        self.logger.info(
            "Story generated and parsed",
            extra={"story_type": story_type, "stage": "completed", "duration": round(duration, 2)},
        )

    def story_failed(self, story_type: str, error: Exception, stage: str) -> None:
        self.logger.error(
            f"Story generation failed at {stage}: {error}",
            extra={"story_type": story_type, "stage": stage, "error_type": type(error).__name__},
            exc_info=error,
        )

    def audio_requested(self, audio_file: str, text_length: int) -> None:
        self.logger.info(
            f"Received request to generate audio ({text_length} chars)",
            extra={"audio_file": audio_file, "stage": "received"},
        )

    def audio_saved(self, audio_file: str, bytes_written: int, duration: float) -> None:
        self.logger.info(
            f"Audio file saved: {audio_file}",
            extra={
                "audio_file": audio_file,
                "stage": "completed",
                "bytes_written": bytes_written,
                "duration": round(duration, 2),
            },
        )

    def audio_failed(self, audio_file: str, error: Exception, stage: str, bytes_written: Optional[int] = None) -> None:
        extra = {"audio_file": audio_file, "stage": stage, "error_type": type(error).__name__}
        if bytes_written is not None:
            extra["bytes_written"] = bytes_written
        self.logger.error(f"Audio generation failed at {stage}: {error}", extra=extra, exc_info=error)


# Global generation logger instance
generation_logger = GenerationLogger()

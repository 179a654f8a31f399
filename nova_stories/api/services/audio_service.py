"""Audio service: narrate text and persist the audio stream to the audio directory."""

import asyncio
import time
import uuid
from contextlib import aclosing
from pathlib import Path
from typing import Optional

from ...core.providers import NarrationError, NarrationProvider
from ...core.types import AudioArtifact
from ..config import AUDIO_EXTENSION, AUDIO_FILE_PREFIX, AUDIO_URL_PREFIX
from ..errors import GenerationFailed, MissingField, StorageFailed
from ..logging import generation_logger

MISSING_TEXT_MESSAGE = "Text is required."
GENERATION_FAILED_MESSAGE = "Failed to generate audio."
STORAGE_FAILED_MESSAGE = "Failed to save audio file."

PARTIAL_SUFFIX = ".part"


def validate_text(text: Optional[str]) -> str:
    """
    Raises:
        MissingField: If text is absent or blank.
    """
    if not text or not text.strip():
        raise MissingField(MISSING_TEXT_MESSAGE)
    return text


def new_audio_filename() -> str:
    """Unique audio filename: millisecond timestamp plus a random token."""
    return f"{AUDIO_FILE_PREFIX}{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}{AUDIO_EXTENSION}"


class AudioService:
    """Narrates text into a new file under audio_dir and returns its public URL."""

    def __init__(self, narration_provider: NarrationProvider, audio_dir: Path, base_url: str):
        self.narration_provider = narration_provider
        self.audio_dir = Path(audio_dir)
        self.base_url = base_url.rstrip("/")

    def audio_url(self, filename: str) -> str:
        return f"{self.base_url}{AUDIO_URL_PREFIX}/{filename}"

    async def generate_audio(self, text: str, filename: Optional[str] = None) -> AudioArtifact:
        """
        Narrate text and write the audio to a new file.

        Bytes go to a ``.part`` file that is renamed into place only once the
        stream has been fully written and closed, so a failed request never
        leaves a file at the returned name.

        Args:
            text: Narration text, sent to the provider in one call
            filename: Bare target filename; generated when not given

        Raises:
            GenerationFailed: If the provider fails or produces no audio.
            StorageFailed: If the audio cannot be written.
            ValueError: If filename contains a directory component.
        """
        filename = filename or new_audio_filename()
        if Path(filename).name != filename or filename == "..":
            raise ValueError(f"Audio filename must not contain a directory: {filename!r}")
        final_path = self.audio_dir / filename
        partial_path = final_path.with_name(filename + PARTIAL_SUFFIX)
        start_time = time.time()
        bytes_written = 0

        generation_logger.audio_requested(filename, len(text))

        try:
            await asyncio.to_thread(self.audio_dir.mkdir, parents=True, exist_ok=True)
            with await asyncio.to_thread(open, partial_path, "wb") as audio_file:
                async with aclosing(self.narration_provider.synthesize(text)) as stream:
                    async for chunk in stream:
                        await asyncio.to_thread(audio_file.write, chunk)
                        bytes_written += len(chunk)
        except NarrationError as e:
            self._discard(partial_path)
            generation_logger.audio_failed(filename, e, "narration", bytes_written)
            raise GenerationFailed(GENERATION_FAILED_MESSAGE) from e
        except OSError as e:
            self._discard(partial_path)
            generation_logger.audio_failed(filename, e, "storage", bytes_written)
            raise StorageFailed(STORAGE_FAILED_MESSAGE) from e
        except Exception:
            self._discard(partial_path)
            raise

        if bytes_written == 0:
            self._discard(partial_path)
            error = NarrationError("Provider returned an empty audio stream")
            generation_logger.audio_failed(filename, error, "narration", bytes_written)
            raise GenerationFailed(GENERATION_FAILED_MESSAGE)

        try:
            await asyncio.to_thread(partial_path.replace, final_path)
        except OSError as e:
            self._discard(partial_path)
            generation_logger.audio_failed(filename, e, "storage", bytes_written)
            raise StorageFailed(STORAGE_FAILED_MESSAGE) from e

        generation_logger.audio_saved(filename, bytes_written, time.time() - start_time)
        return AudioArtifact(
            filename=filename,
            path=final_path,
            url=self.audio_url(filename),
            bytes_written=bytes_written,
        )

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            generation_logger.logger.warning(f"Could not remove partial audio file {path}: {e}")

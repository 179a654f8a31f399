"""Unit tests for the audio service."""

import asyncio
import errno
import io
import re

import pytest

from nova_stories.api.errors import GenerationFailed, MissingField, StorageFailed
from nova_stories.api.services import audio_service
from nova_stories.api.services.audio_service import (
    AudioService,
    new_audio_filename,
    validate_text,
)
from nova_stories.core.providers import NarrationError
from tests.unit.conftest import StubNarrationProvider

BASE_URL = "http://localhost:3001"


class TestNewAudioFilename:
    """Tests for audio filename generation."""

    def test_format(self):
        assert re.fullmatch(r"story_audio_\d{13}_[0-9a-f]{8}\.mp3", new_audio_filename())

    def test_unique_within_same_millisecond(self, monkeypatch):
        monkeypatch.setattr("nova_stories.api.services.audio_service.time.time", lambda: 1700000000.0)

        names = {new_audio_filename() for _ in range(100)}

        assert len(names) == 100


class TestValidateText:
    """Tests for narration text validation."""

    def test_returns_text(self):
        assert validate_text("Hello") == "Hello"

    @pytest.mark.parametrize("text", [None, "", " \n\t"])
    def test_rejects_missing_text(self, text):
        with pytest.raises(MissingField):
            validate_text(text)


class TestAudioService:
    """Tests for AudioService.generate_audio."""

    @pytest.mark.asyncio
    async def test_writes_file_and_builds_url(self, tmp_path):
        provider = StubNarrationProvider(chunks=[b"abc", b"def"])
        service = AudioService(provider, audio_dir=tmp_path / "audio", base_url=BASE_URL + "/")

        artifact = await service.generate_audio("Hello")

        assert artifact.path == tmp_path / "audio" / artifact.filename
        assert artifact.path.read_bytes() == b"abcdef"
        assert artifact.bytes_written == 6
        assert artifact.url == f"{BASE_URL}/audio/{artifact.filename}"

    @pytest.mark.asyncio
    async def test_uses_given_filename(self, tmp_path):
        service = AudioService(StubNarrationProvider(), audio_dir=tmp_path, base_url=BASE_URL)

        artifact = await service.generate_audio("Hello", filename="mission_1.mp3")

        assert artifact.filename == "mission_1.mp3"
        assert (tmp_path / "mission_1.mp3").exists()

    @pytest.mark.asyncio
    async def test_no_partial_file_left_on_success(self, tmp_path):
        service = AudioService(StubNarrationProvider(), audio_dir=tmp_path, base_url=BASE_URL)

        artifact = await service.generate_audio("Hello")

        assert [p.name for p in tmp_path.iterdir()] == [artifact.filename]

    @pytest.mark.asyncio
    async def test_provider_failure_removes_partial_file(self, tmp_path):
        provider = StubNarrationProvider(chunks=[b"abc"], error=NarrationError("stream broke"))
        service = AudioService(provider, audio_dir=tmp_path, base_url=BASE_URL)

        with pytest.raises(GenerationFailed) as exc_info:
            await service.generate_audio("Hello")

        assert exc_info.value.message == "Failed to generate audio."
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_unexpected_error_removes_partial_file(self, tmp_path):
        provider = StubNarrationProvider(chunks=[b"abc"], error=RuntimeError("bug"))
        service = AudioService(provider, audio_dir=tmp_path, base_url=BASE_URL)

        with pytest.raises(RuntimeError):
            await service.generate_audio("Hello")

        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_audio_dir_occupied_by_file_is_storage_failure(self, tmp_path):
        occupied = tmp_path / "audio"
        occupied.write_text("not a directory")
        provider = StubNarrationProvider()
        service = AudioService(provider, audio_dir=occupied, base_url=BASE_URL)

        with pytest.raises(StorageFailed):
            await service.generate_audio("Hello")

        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_disk_full_closes_provider_stream(self, tmp_path, monkeypatch):
        class FullDisk(io.BytesIO):
            def write(self, data):
                raise OSError(errno.ENOSPC, "No space left on device")

        monkeypatch.setattr(audio_service, "open", lambda path, mode: FullDisk(), raising=False)
        provider = StubNarrationProvider(chunks=[b"abc", b"def", b"ghi"])
        service = AudioService(provider, audio_dir=tmp_path, base_url=BASE_URL)

        with pytest.raises(StorageFailed):
            await service.generate_audio("Hello")

        assert provider.closed
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_provider_stream_closed_on_success(self, tmp_path):
        provider = StubNarrationProvider()
        service = AudioService(provider, audio_dir=tmp_path, base_url=BASE_URL)

        await service.generate_audio("Hello")

        assert provider.closed

    @pytest.mark.asyncio
    async def test_disk_work_runs_off_the_event_loop(self, tmp_path, monkeypatch):
        offloaded = []
        to_thread = asyncio.to_thread

        async def recording_to_thread(func, *args, **kwargs):
            offloaded.append(getattr(func, "__name__", repr(func)))
            return await to_thread(func, *args, **kwargs)

        monkeypatch.setattr(audio_service.asyncio, "to_thread", recording_to_thread)
        service = AudioService(StubNarrationProvider(chunks=[b"a", b"b"]), audio_dir=tmp_path, base_url=BASE_URL)

        await service.generate_audio("Hello")

        assert offloaded == ["mkdir", "open", "write", "write", "replace"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filename", ["../escape.mp3", "nested/story.mp3", "/tmp/story.mp3", ".."])
    async def test_rejects_filename_outside_audio_dir(self, tmp_path, filename):
        provider = StubNarrationProvider()
        service = AudioService(provider, audio_dir=tmp_path / "audio", base_url=BASE_URL)

        with pytest.raises(ValueError):
            await service.generate_audio("Hello", filename=filename)

        assert provider.calls == []
        assert list(tmp_path.iterdir()) == []

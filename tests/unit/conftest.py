"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from nova_stories.api import config
from nova_stories.api.dependencies import get_completion_provider, get_narration_provider
from nova_stories.api.main import app

TEST_BASE_URL = "http://localhost:3001"

SAMPLE_STORY = {
    "story_title": "Maya and the Robot on the Moon",
    "story_cards": [
        {
            "card_title": "Liftoff",
            "content": "Maya buckled in as the rocket rumbled beneath her...",
            "quiz": [
                {
                    "question": "What does a rocket need to leave Earth?",
                    "options": ["Thrust", "Wheels", "Sails"],
                    "correct_answer": "Thrust",
                },
                {
                    "question": "Where does the ISS orbit?",
                    "options": ["Low Earth orbit", "Mars", "The Sun"],
                    "correct_answer": "Low Earth orbit",
                },
            ],
            "media": {
                "video": "https://www.nasa.gov/video-example",
                "image": "https://images.nasa.gov/details-PIA23701",
            },
        }
    ],
}


class StubCompletionProvider:
    """Completion provider test double that records every call."""

    def __init__(self, reply: str = "{}", error: Exception = None):
        self.reply = reply
        self.model = "stub-model"
        self.error = error
        self.calls = []

    async def complete(self, system_message: str, user_message: str) -> str:
        self.calls.append((system_message, user_message))
        if self.error:
            raise self.error
        return self.reply


class StubNarrationProvider:
    """Narration provider test double.

    Yields ``chunks`` in order, then raises ``error`` if one is set, so an
    error with no chunks fails before streaming and an error with chunks
    fails mid-stream. ``closed`` turns true once the stream is finalized.
    """

    def __init__(self, chunks=(b"ID3", b"\x00\x01fake-mp3-frames"), error: Exception = None):
        self.chunks = list(chunks)
        self.error = error
        self.calls = []
        self.closed = False

    async def synthesize(self, text: str):
        self.calls.append(text)
        try:
            for chunk in self.chunks:
                yield chunk
            if self.error:
                raise self.error
        finally:
            self.closed = True


@pytest.fixture
def audio_dir(tmp_path, monkeypatch):
    """Point audio storage and public URLs at a temporary directory."""
    directory = tmp_path / "audio"
    monkeypatch.setattr(config, "AUDIO_DIR", directory)
    monkeypatch.setattr(config, "PUBLIC_BASE_URL", TEST_BASE_URL)
    return directory


@pytest.fixture
def completion_stub():
    return StubCompletionProvider(reply='{"story_title": "Test", "story_cards": []}')


@pytest.fixture
def narration_stub():
    return StubNarrationProvider()


@pytest.fixture
def client(audio_dir, completion_stub, narration_stub):
    """TestClient with stubbed providers and temporary audio storage."""
    app.dependency_overrides[get_completion_provider] = lambda: completion_stub
    app.dependency_overrides[get_narration_provider] = lambda: narration_stub

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()

"""External providers: chat completion for stories, text-to-speech for narration."""

from .completion import (
    ChatCompletionProvider,
    CompletionError,
    CompletionProvider,
    UnavailableCompletionProvider,
    create_completion_provider,
)
from .narration import (
    CartesiaNarrationProvider,
    ElevenLabsNarrationProvider,
    NarrationError,
    NarrationProvider,
    UnavailableNarrationProvider,
    create_narration_provider,
)

__all__ = [
    "ChatCompletionProvider",
    "CompletionError",
    "CompletionProvider",
    "UnavailableCompletionProvider",
    "create_completion_provider",
    "CartesiaNarrationProvider",
    "ElevenLabsNarrationProvider",
    "NarrationError",
    "NarrationProvider",
    "UnavailableNarrationProvider",
    "create_narration_provider",
]

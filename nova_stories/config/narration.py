"""
Narration (text-to-speech) configuration for the NOVA story backend.

Two providers are supported, selected with NARRATION_PROVIDER:
- elevenlabs (default): ElevenLabs SDK, "Rachel" voice, multilingual v2 model
- cartesia: Cartesia SDK, sonic-3 multilingual model
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

NARRATION_PROVIDER = os.getenv("NARRATION_PROVIDER", "elevenlabs").lower()

# ElevenLabs
ELEVENLABS_VOICE_ID = os.getenv("ELEVENLABS_VOICE_ID", "21m00Tcm4TlvDq8ikWAM")  # Rachel
ELEVENLABS_MODEL_ID = os.getenv("ELEVENLABS_MODEL_ID", "eleven_multilingual_v2")
ELEVENLABS_OUTPUT_FORMAT = "mp3_44100_128"

# Cartesia
CARTESIA_VOICE_ID = os.getenv("CARTESIA_VOICE_ID", "a0e99841-438c-4a64-b679-ae501e7d6091")
CARTESIA_MODEL_ID = "sonic-3"

# Timeout for narration calls (seconds)
NARRATION_TIMEOUT = float(os.getenv("NARRATION_TIMEOUT", "120"))

SUPPORTED_PROVIDERS = ("elevenlabs", "cartesia")


def get_narration_api_key(provider: str = NARRATION_PROVIDER) -> str:
    """
    Get the API key for the configured narration provider.

    Raises:
        ValueError: If the provider is unknown or its key is not set.
    """
    if provider == "elevenlabs":
        env_var = "ELEVENLABS_API_KEY"
    elif provider == "cartesia":
        env_var = "CARTESIA_API_KEY"
    else:
        raise ValueError(
            f"Unknown NARRATION_PROVIDER '{provider}'. Use one of: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    api_key = os.getenv(env_var)
    if not api_key:
        raise ValueError(f"No API key found. Set {env_var} in .env")
    return api_key

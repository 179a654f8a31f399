"""
LLM configuration for the NOVA story backend.

Stories are generated through Groq's OpenAI-compatible chat completions API
using the official ``openai`` SDK pointed at the Groq base URL.

Includes:
- 120s timeout per LLM call to fail fast on hanging connections
- SDK retries disabled: a failed call is surfaced to the caller immediately
"""

import os

from dotenv import load_dotenv
from openai import AsyncOpenAI

# Load environment variables from .env file
load_dotenv()

GROQ_BASE_URL = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
COMPLETION_MODEL = os.getenv("COMPLETION_MODEL", "llama-3.1-8b-instant")

# Timeout for LLM calls (seconds)
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "120"))


def get_completion_client() -> AsyncOpenAI:
    """
    Get the async chat completions client for story generation.

    Raises:
        ValueError: If GROQ_API_KEY is not set.
    """
    api_key = os.getenv("GROQ_API_KEY")
    if not api_key:
        raise ValueError("No API key found. Set GROQ_API_KEY in .env")

    return AsyncOpenAI(
        api_key=api_key,
        base_url=GROQ_BASE_URL,
        timeout=LLM_TIMEOUT,
        max_retries=0,
    )

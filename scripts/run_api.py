#!/usr/bin/env python3
"""Run the FastAPI server for the NOVA story backend."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from nova_stories.api.config import SERVER_PORT


def main():
    """Run the API server."""
    uvicorn.run(
        "nova_stories.api.main:app",
        host="0.0.0.0",
        port=SERVER_PORT,
        reload=True,  # Enable auto-reload for development
    )


if __name__ == "__main__":
    main()

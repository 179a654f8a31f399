#!/usr/bin/env python3
"""
CLI for narrating text into MP3 files.

Usage:
    python cli/generate_audio.py --text "Hey Maya, welcome aboard the ISS!"
    python cli/generate_audio.py --catalog data/stories_young_explorer.json
    python cli/generate_audio.py --catalog data/stories.json --output-dir public/audio

A catalog is a JSON list of {"title": ..., "text": ..., "audio_filename": ...}
objects; each entry is narrated into its audio_filename, which must be a
bare filename inside the output directory.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nova_stories.api import config  # noqa: E402
from nova_stories.api.errors import StoryAPIError  # noqa: E402
from nova_stories.api.logging import configure_logging  # noqa: E402
from nova_stories.api.services.audio_service import AudioService, validate_text  # noqa: E402
from nova_stories.core.providers import create_narration_provider  # noqa: E402

logger = logging.getLogger("generate_audio")


async def narrate_catalog(service: AudioService, stories: list[dict]) -> list[str]:
    """Narrate every catalog entry, returning the titles that failed."""
    failed = []
    for story in stories:
        title = story.get("title", story.get("audio_filename", "(untitled)"))
        logger.info(f"Generating audio for \"{title}\"...")
        try:
            text = validate_text(story.get("text"))
            artifact = await service.generate_audio(text, filename=story.get("audio_filename"))
        except StoryAPIError as e:
            logger.error(f"Error generating audio for \"{title}\": {e.message}")
            failed.append(title)
            continue
        except ValueError as e:
            logger.error(f"Skipping \"{title}\": {e}")
            failed.append(title)
            continue
        print(f"Saved: {artifact.path}")
    return failed


def main():
    parser = argparse.ArgumentParser(
        description="Narrate text or a story catalog into MP3 files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", type=str, help="Text to narrate")
    source.add_argument("--catalog", type=Path, help="JSON file listing stories to narrate")

    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.AUDIO_DIR,
        help=f"Directory for audio files (default: {config.AUDIO_DIR})",
    )

    args = parser.parse_args()
    configure_logging(json_format=False)

    try:
        provider = create_narration_provider()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    service = AudioService(provider, audio_dir=args.output_dir, base_url=config.PUBLIC_BASE_URL)

    if args.text is not None:
        try:
            artifact = asyncio.run(service.generate_audio(validate_text(args.text)))
        except StoryAPIError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            sys.exit(1)
        print(f"Saved: {artifact.path}")
        print(f"URL: {artifact.url}")
        return

    stories = json.loads(args.catalog.read_text(encoding="utf-8"))
    failed = asyncio.run(narrate_catalog(service, stories))

    print(f"Audio generation complete: {len(stories) - len(failed)}/{len(stories)} succeeded")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()

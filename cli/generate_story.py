#!/usr/bin/env python3
"""
CLI for generating personalized space stories.

Usage:
    python cli/generate_story.py --name Maya --age 9 --interests robots football
    python cli/generate_story.py --name Omar --age 14 --interests music --story-type astronaut_role
    python cli/generate_story.py --name Maya --age 9 --interests robots --stdout
    python cli/generate_story.py --name Maya --age 9 --interests robots --print-prompt
"""

import argparse
import asyncio
import json
import logging
import re
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nova_stories.api.errors import StoryAPIError  # noqa: E402
from nova_stories.api.logging import configure_logging  # noqa: E402
from nova_stories.api.models.requests import GenerateStoryRequest  # noqa: E402
from nova_stories.api.services.story_service import StoryService, parse_user_inputs  # noqa: E402
from nova_stories.core.prompts import build_prompt  # noqa: E402
from nova_stories.core.providers import create_completion_provider  # noqa: E402


def main():
    parser = argparse.ArgumentParser(
        description="Generate a personalized NASA-inspired space story as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python cli/generate_story.py --name Maya --age 9 --interests robots football
    python cli/generate_story.py --name Omar --age 14 --interests music --story-type astronaut_role
    python cli/generate_story.py --name Lea --age 7 --interests cats --language French --stdout
        """,
    )

    parser.add_argument("--name", required=True, help="Reader's name")
    parser.add_argument("--age", type=int, required=True, help="Reader's age in years")
    parser.add_argument(
        "--interests",
        nargs="+",
        required=True,
        help="One or more interests, in order",
    )
    parser.add_argument(
        "--language",
        type=str,
        default=None,
        help="Story language (default: English)",
    )
    parser.add_argument(
        "--story-type",
        choices=["adventure", "astronaut_role"],
        default="adventure",
        help="Which story to generate (default: adventure)",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file name (saved to output/ directory). Auto-generated if not specified.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print to terminal instead of saving to file",
    )
    parser.add_argument(
        "--print-prompt",
        action="store_true",
        help="Print the built prompt and exit without calling the model",
    )
    parser.add_argument(
        "--strip-fences",
        action="store_true",
        help="Strip ```json fences from the model reply before parsing",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress information",
    )

    args = parser.parse_args()
    configure_logging(json_format=False, level=logging.INFO if args.verbose else logging.WARNING)

    try:
        inputs = parse_user_inputs(
            GenerateStoryRequest(
                name=args.name,
                age=args.age,
                interests=args.interests,
                language=args.language,
                story_type=args.story_type,
            )
        )
    except StoryAPIError as e:
        parser.error(e.message)

    if args.print_prompt:
        print(build_prompt(inputs))
        return

    try:
        provider = create_completion_provider()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    service = StoryService(provider, strip_fences=args.strip_fences)

    if args.verbose:
        print(f"Generating {inputs.story_type.value} story for {inputs.name} ({inputs.age})")

    try:
        story = asyncio.run(service.generate_story(inputs))
    except StoryAPIError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    formatted = json.dumps(story, indent=2, ensure_ascii=False)

    if args.stdout:
        print(formatted)
        return

    # Determine output path
    output_dir = Path(__file__).parent.parent / "output"
    output_dir.mkdir(exist_ok=True)

    if args.output:
        filename = args.output if args.output.endswith(".json") else f"{args.output}.json"
    else:
        # Auto-generate filename from name, story type and timestamp
        slug = re.sub(r"[^a-z0-9]+", "_", f"{inputs.name} {inputs.story_type.value}".lower()).strip("_")
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{slug}_{timestamp}.json"

    output_path = output_dir / filename
    output_path.write_text(formatted, encoding="utf-8")
    print(f"Story saved to: {output_path}")

    if args.verbose and isinstance(story, dict):
        print("\n--- Generation Summary ---")
        print(f"Title: {story.get('story_title', '(untitled)')}")
        print(f"Cards: {len(story.get('story_cards') or [])}")


if __name__ == "__main__":
    main()

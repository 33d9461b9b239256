"""CLI entry point for SEO content generation.

Usage:
    python -m upload_agent.content_generator.main --category gaming --language en
    python -m upload_agent.content_generator.main --category tech --output seo.json --seed 7
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

from upload_agent.common.logging import redirect_logging, setup_logging

from .generator import SEOContentGenerator
from .profiles import CATEGORY_NAMES, DEFAULT_CATEGORY, is_known_category

logger = setup_logging(module_name="content_generator.main")

CLI_LOGGERS = ("content_generator", "content_generator.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate YouTube SEO metadata for a video")
    parser.add_argument(
        "--category",
        default=DEFAULT_CATEGORY,
        help=f"Video category: {', '.join(CATEGORY_NAMES)} (default: {DEFAULT_CATEGORY})",
    )
    parser.add_argument(
        "--language",
        default="en",
        help="Language code appended to the tags (default: en)",
    )
    parser.add_argument(
        "--video-file",
        default=None,
        help="Source video file name (recorded only)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the title pick, for reproducible output",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON bundle here instead of stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # stdout carries the JSON bundle, so log lines go to stderr
    with redirect_logging(sys.stderr, *CLI_LOGGERS):
        return _run(args)


def _run(args: argparse.Namespace) -> int:
    if not is_known_category(args.category):
        logger.warning("Unknown category '%s', using %s profile", args.category, DEFAULT_CATEGORY)

    rng = random.Random(args.seed) if args.seed is not None else None
    generator = SEOContentGenerator(rng=rng)
    result = generator.generate_for(args.category, args.language, args.video_file)

    payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload)
        logger.info("SEO content written to: %s", args.output)
    else:
        sys.stdout.write(payload + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())

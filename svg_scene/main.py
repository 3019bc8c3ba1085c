"""
Main Entry Point for SVG Scene
==============================
Command-line interface that builds an SVG document from a JSON scene
description and optionally rasterizes it to PNG.
"""

import argparse
import os
import sys
from typing import List, Optional

from svg_scene.core import configure
from svg_scene.generation.document import Document
from svg_scene.models.shape import ShapeError
from svg_scene.utils.io import load_json
from svg_scene.utils.logger import get_logger, log_exception, setup_logger

# Configure logger
logger = get_logger(__name__)


def _precision(value: str) -> int:
    """Argparse type for a significant-digit count of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a JSON scene description to an SVG document.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "scene",
        help="Path to a JSON file with 'layout' and 'shapes' keys",
    )

    parser.add_argument(
        "--output", "-o",
        help="SVG output path (default: scene path with a .svg suffix)",
    )

    parser.add_argument(
        "--png",
        nargs="?",
        const="",
        default=None,
        help="Also write a PNG; optionally give its path",
    )

    parser.add_argument(
        "--size",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        help="PNG size in pixels (default: canvas size)",
    )

    parser.add_argument(
        "--precision",
        type=_precision,
        help="Significant digits for numbers in the markup",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the SVG instead of writing it to a file",
    )

    parser.add_argument(
        "--log-file",
        help="Also write logs to this file",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logger("DEBUG" if args.verbose else "INFO", log_file=args.log_file)

    if args.precision is not None:
        configure({"number_precision": args.precision})

    output = args.output or os.path.splitext(args.scene)[0] + ".svg"

    try:
        scene = load_json(args.scene)
        document = Document.from_dict(scene, output)
    except (OSError, ValueError, ShapeError) as e:
        log_exception(logger, e, context={"scene": args.scene})
        return 1

    if args.stdout:
        sys.stdout.write(document.render())
    elif not document.save():
        logger.error(f"Failed to write {output}")
        return 1

    if args.png is not None:
        png_path = args.png or None
        if not document.save_png(png_path, tuple(args.size) if args.size else None):
            logger.error("Failed to write PNG output")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

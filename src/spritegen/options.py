"""Command-line options for spritegen."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from .client import DEFAULT_ASPECT_RATIO, DEFAULT_IMAGE_SIZE, DEFAULT_MODEL
from .postprocess import DEFAULT_CONVERTER
from .prompts import FINAL_IMAGE_SIZE


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritegen",
        description="Generate the sprite icon set with Gemini and normalize it to PNG.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path(os.getenv("SPRITEGEN_OUTPUT_DIR") or "outputs"),
        help="Directory the <id>.png files are written to (default: %(default)s).",
    )
    parser.add_argument(
        "-m",
        "--model",
        default=os.getenv("SPRITEGEN_MODEL") or DEFAULT_MODEL,
        help="Image model (default: %(default)s).",
    )
    parser.add_argument(
        "--size",
        type=_positive_int,
        default=FINAL_IMAGE_SIZE,
        help="Final square size in pixels (default: %(default)s).",
    )
    parser.add_argument(
        "--image-size",
        default=DEFAULT_IMAGE_SIZE,
        help="Image size token sent to the model (default: %(default)s).",
    )
    parser.add_argument(
        "--aspect-ratio",
        default=DEFAULT_ASPECT_RATIO,
        help="Aspect ratio sent to the model (default: %(default)s).",
    )
    parser.add_argument(
        "--converter",
        default=os.getenv("SPRITEGEN_CONVERTER") or DEFAULT_CONVERTER,
        help="Conversion executable (default: %(default)s).",
    )
    parser.add_argument(
        "-c",
        "--catalog",
        type=Path,
        default=None,
        help="JSON catalog file; the built-in clothing set is used when omitted.",
    )
    parser.add_argument(
        "--only",
        action="append",
        default=[],
        metavar="ID",
        help="Only generate this catalog id. May be repeated.",
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Record failed items and keep going instead of aborting the run.",
    )
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return build_parser().parse_args(argv)

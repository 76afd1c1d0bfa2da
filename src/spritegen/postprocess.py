"""Normalize generated images to a square PNG with an external converter."""

from __future__ import annotations

import contextlib
import enum
import logging
import shutil
import subprocess
from pathlib import Path

from .extract import ExtractedImage
from .prompts import FINAL_IMAGE_SIZE

logger = logging.getLogger(__name__)

DEFAULT_CONVERTER = "sips"


class ConversionOutcome(enum.Enum):
    NORMALIZED = "normalized"
    RAW_COPY = "raw_copy"


def converter_command(
    input_path: Path, output_path: Path, *, size: int, command: str
) -> list[str]:
    return [
        command,
        "-s",
        "format",
        "png",
        "-z",
        str(size),
        str(size),
        str(input_path),
        "--out",
        str(output_path),
    ]


def convert_to_png_and_resize(
    input_path: Path,
    output_path: Path,
    *,
    size: int = FINAL_IMAGE_SIZE,
    command: str = DEFAULT_CONVERTER,
) -> ConversionOutcome:
    cmd = converter_command(input_path, output_path, size=size, command=command)
    try:
        subprocess.run(cmd, check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.warning(
            "%s failed; keeping original output without resize/convert: %s",
            command,
            exc,
        )
        if input_path.resolve() != output_path.resolve():
            shutil.copyfile(input_path, output_path)
        return ConversionOutcome.RAW_COPY
    return ConversionOutcome.NORMALIZED


def save_image(
    output_dir: Path,
    item_id: str,
    image: ExtractedImage,
    *,
    size: int = FINAL_IMAGE_SIZE,
    command: str = DEFAULT_CONVERTER,
) -> tuple[Path, ConversionOutcome]:
    """Write the raw payload, convert it to ``<item_id>.png`` and drop the raw file."""
    raw_path = output_dir / f"{item_id}.{image.extension}"
    final_path = output_dir / f"{item_id}.png"
    raw_path.write_bytes(image.data)

    outcome = convert_to_png_and_resize(raw_path, final_path, size=size, command=command)

    if raw_path != final_path:
        with contextlib.suppress(OSError):
            raw_path.unlink(missing_ok=True)
    return final_path, outcome

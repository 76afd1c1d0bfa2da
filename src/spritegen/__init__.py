"""spritegen package entrypoint.

main() loads the .env settings, parses command-line options using
spritegen.options and runs the catalog through spritegen.runner.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from image_common.env import load_env_file, resolve_api_key
from image_common.logging import configure_logging

from .options import parse_args


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: generate every catalog item and exit non-zero on failure."""

    load_dotenv(load_env_file(Path(".env")))
    parsed = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging()
    logger = logging.getLogger(__name__)

    try:
        from . import client as client_module
        from . import runner
        from .catalog import load_catalog, select_items

        catalog = select_items(load_catalog(parsed.catalog), parsed.only)
        output_dir = parsed.output_dir.resolve()
        output_dir.mkdir(parents=True, exist_ok=True)
        genai_client = client_module.make_client(resolve_api_key())

        print(f"Model: {parsed.model}")
        print(f"Output dir: {output_dir}")

        results = runner.generate_sprites(
            genai_client,
            catalog,
            output_dir=output_dir,
            model=parsed.model,
            size=parsed.size,
            image_size=parsed.image_size,
            aspect_ratio=parsed.aspect_ratio,
            command=parsed.converter,
            continue_on_error=parsed.continue_on_error,
        )
    except Exception as exc:
        logger.exception("Sprite generation failed.")
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    failed = [result.item_id for result in results if not result.ok]
    if failed:
        print(f"Failed: {', '.join(failed)}", file=sys.stderr)
        raise SystemExit(1)

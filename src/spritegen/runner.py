"""Generation orchestration for spritegen."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import client as client_module
from .catalog import Item
from .extract import extract_first_image
from .postprocess import DEFAULT_CONVERTER, ConversionOutcome, save_image
from .prompts import FINAL_IMAGE_SIZE, build_prompt

logger = logging.getLogger(__name__)

STATUS_SAVED = "saved"
STATUS_DEGRADED = "degraded"
STATUS_FAILED = "failed"


@dataclass(frozen=True)
class ItemResult:
    item_id: str
    status: str
    path: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != STATUS_FAILED


def generate_item(
    genai_client: Any,
    item: Item,
    *,
    output_dir: Path,
    model: str,
    config: Any,
    size: int = FINAL_IMAGE_SIZE,
    command: str = DEFAULT_CONVERTER,
) -> ItemResult:
    prompt = build_prompt(item.label, size=size)
    response = client_module.generate(genai_client, model, prompt, config)
    image = extract_first_image(item.id, client_module.response_parts(response))
    path, outcome = save_image(output_dir, item.id, image, size=size, command=command)
    status = STATUS_SAVED if outcome is ConversionOutcome.NORMALIZED else STATUS_DEGRADED
    return ItemResult(item_id=item.id, status=status, path=path)


def generate_sprites(
    genai_client: Any,
    catalog: Iterable[Item],
    *,
    output_dir: Path,
    model: str = client_module.DEFAULT_MODEL,
    size: int = FINAL_IMAGE_SIZE,
    image_size: str = client_module.DEFAULT_IMAGE_SIZE,
    aspect_ratio: str = client_module.DEFAULT_ASPECT_RATIO,
    command: str = DEFAULT_CONVERTER,
    continue_on_error: bool = False,
    report: Callable[[str], None] = print,
) -> list[ItemResult]:
    """Generate every catalog item in order.

    By default the first generation or extraction error propagates and the
    remaining items are skipped. With ``continue_on_error`` the failure is
    recorded as a ``failed`` result and the loop moves on.
    """
    config = client_module.build_config(image_size=image_size, aspect_ratio=aspect_ratio)
    results: list[ItemResult] = []

    for item in catalog:
        report(f"\nGenerating {item.id}...")
        try:
            result = generate_item(
                genai_client,
                item,
                output_dir=output_dir,
                model=model,
                config=config,
                size=size,
                command=command,
            )
        except Exception as exc:
            if not continue_on_error:
                raise
            logger.error("Generation failed for %s: %s", item.id, exc)
            results.append(ItemResult(item_id=item.id, status=STATUS_FAILED, error=str(exc)))
            continue

        results.append(result)
        report(f"Saved: {result.path}")

    generated = sum(1 for result in results if result.ok)
    report(f"\nDone. Generated {generated} images.")
    return results

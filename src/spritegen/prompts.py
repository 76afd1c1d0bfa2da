"""Prompt template for the clothing sprite set."""

from __future__ import annotations

FINAL_IMAGE_SIZE = 1000

BASE_PROMPT = """SPRITE SHEET (GRID) for a dress-up game.

Generate ONE PNG 1000x1000.
Background: perfectly solid chroma key green #00FF00 (every pixel exactly #00FF00), no gradient, no texture.

Layout:
- Single item centered with 12px internal padding.
- Item must be front-facing inventory icon, consistent camera and lighting.
- NO GRID. Generate only one item in the image.

Style:
Semi-realistic 3D game clothing icons, slightly gritty / worn realism (light scuffs, mild stains, frayed seams), sharp clean cutout edges.
Soft studio key light from top-left, subtle shading contained inside the image (no long shadows).
NO UI, NO text, NO logos, NO prices, NO frames, NO watermarks, NO characters, NO mannequins, NO hangers, NO scenery.

Chroma-key safety:
Avoid green hues on the item (no green accents, no green shadows).

Consistency:
Keep the same camera, lighting, and material style across the whole 12-image set."""


def build_prompt(label: str, *, size: int = FINAL_IMAGE_SIZE) -> str:
    if not isinstance(label, str):
        raise TypeError(f"label must be a string, got {type(label).__name__}")
    return (
        f"{BASE_PROMPT}\n\nItem:\n{label}.\n\n"
        f"Return exactly one PNG image sized {size}x{size}."
    )

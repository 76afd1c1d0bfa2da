"""Sprite catalog: the ordered, immutable list of items to generate."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Item:
    id: str
    label: str


DEFAULT_CATALOG: tuple[Item, ...] = (
    Item(
        "01_top_flame_bowling_shirt",
        "black bowling shirt with red-to-yellow flame graphic rising from the hem, black buttons",
    ),
    Item("02_top_dirty_white_tshirt", "worn dirty-white t-shirt, slightly stretched collar"),
    Item("03_top_plaid_flannel", "blue/red plaid flannel overshirt, open front, wrinkled"),
    Item("04_top_worn_denim_jacket", "faded blue denim jacket, heavily worn seams"),
    Item(
        "05_bottom_track_pants",
        "dark gray track pants with white side stripes, drawstring waist",
    ),
    Item("06_bottom_worn_jeans", "very worn blue jeans, small knee tear, frayed hem"),
    Item("07_bottom_khaki_cargo_shorts", "khaki cargo shorts, heavy use, large pockets"),
    Item("08_bottom_carpenter_pants", "brown carpenter/work pants, light stains, tool pocket"),
    Item("09_accessory_trucker_cap", "worn trucker cap black/gray, no logo"),
    Item("10_accessory_gold_chain", "simple medium-thick gold chain necklace"),
    Item("11_accessory_worn_sneakers", "worn white/gray sneakers, slightly dirty sole"),
    Item("12_accessory_work_boots", "brown work boots, scuffed leather, thick sole"),
)


def validate_catalog(items: Iterable[Item]) -> tuple[Item, ...]:
    """Return ``items`` as a tuple, rejecting blank or duplicate ids."""
    catalog = tuple(items)
    seen: set[str] = set()
    for item in catalog:
        if not item.id.strip():
            raise ValueError("Catalog item ids must not be empty.")
        if "/" in item.id or "\\" in item.id:
            raise ValueError(f"Catalog item id {item.id!r} must not contain path separators.")
        if item.id in seen:
            raise ValueError(f"Duplicate catalog item id: {item.id!r}")
        seen.add(item.id)
    return catalog


def load_catalog(path: Path | None = None) -> tuple[Item, ...]:
    """Load the catalog from a JSON file, or the built-in one when ``path`` is None.

    The file holds a list of ``{"id": ..., "label": ...}`` objects, optionally
    wrapped in ``{"items": [...]}``.
    """
    if path is None:
        return validate_catalog(DEFAULT_CATALOG)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Unable to read catalog {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise ValueError(f"Catalog {path} must contain a list of items.")

    items: list[Item] = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ValueError(f"Catalog entries must be objects, got {entry!r}")
        item_id = entry.get("id")
        label = entry.get("label")
        if not isinstance(item_id, str) or not isinstance(label, str) or not label.strip():
            raise ValueError(f"Catalog entry needs string id and label: {entry!r}")
        items.append(Item(item_id, label))
    return validate_catalog(items)


def select_items(catalog: tuple[Item, ...], only: list[str] | None) -> tuple[Item, ...]:
    """Keep the catalog entries named in ``only``, in catalog order."""
    if not only:
        return catalog
    wanted = set(only)
    known = {item.id for item in catalog}
    unknown = sorted(wanted - known)
    if unknown:
        raise ValueError(f"Unknown catalog item id(s): {', '.join(unknown)}")
    return tuple(item for item in catalog if item.id in wanted)

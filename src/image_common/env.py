"""Environment helpers shared across components."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

API_KEY_VARIABLES: tuple[str, ...] = ("GEMINI_API_KEY", "GOOGLE_API_KEY")

CONFIG_REGISTRY: list[dict[str, Any]] = [
    {
        "key": "GEMINI_API_KEY",
        "default_value": "",
        "help_text": "Gemini API key used for image generation.",
    },
    {
        "key": "GOOGLE_API_KEY",
        "default_value": "",
        "help_text": "Fallback Google API key, used when GEMINI_API_KEY is empty.",
    },
    {
        "key": "SPRITEGEN_MODEL",
        "default_value": "gemini-3-pro-image-preview",
        "help_text": "Image model used by spritegen.",
    },
    {
        "key": "SPRITEGEN_OUTPUT_DIR",
        "default_value": "outputs",
        "help_text": "Directory the generated sprites are written to.",
    },
    {
        "key": "SPRITEGEN_CONVERTER",
        "default_value": "sips",
        "help_text": (
            "Executable used to convert and resize images. It is called as\n"
            "<converter> -s format png -z <w> <h> <src> --out <dst>."
        ),
    },
    {
        "key": "LOG_LEVEL",
        "default_value": "INFO",
        "help_text": "Logging level for stdout logging.",
    },
    {
        "key": "LOG_FORMAT",
        "default_value": '"%(asctime)s %(levelname)s %(name)s:%(filename)s:%(lineno)d: %(message)s"',
        "help_text": "Logging format for stdout logging.",
    },
]


def ensure_env_file(env_path: Path | None = None) -> None:
    target = env_path or Path(".env")
    existing_keys: set[str] = set()
    content = ""
    if target.exists():
        content = target.read_text(encoding="utf-8")
        for line in content.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or "=" not in stripped:
                continue
            key = stripped.split("=", 1)[0].strip()
            if key:
                existing_keys.add(key)

    missing = [entry for entry in CONFIG_REGISTRY if entry["key"] not in existing_keys]
    if not missing:
        return

    lines: list[str] = []
    if not content:
        lines.append("# Edit this file to match and install as .env in this directory")
        lines.append("")
    else:
        if not content.endswith("\n"):
            lines.append("")
        lines.append("")
        lines.append("# Added by spritegen to ensure required settings exist.")

    for entry in missing:
        help_text = str(entry["help_text"])
        for help_line in help_text.splitlines():
            lines.append(f"# {help_line}")
        lines.append(f"{entry['key']}={entry['default_value']}")
        lines.append("")

    if target.exists():
        target.write_text(content + "\n".join(lines), encoding="utf-8")
    else:
        target.write_text("\n".join(lines), encoding="utf-8")


def load_env_file(env_path: Path | None = None) -> Path:
    target = env_path or Path(".env")
    ensure_env_file(target)
    return target


def resolve_api_key(variables: tuple[str, ...] = API_KEY_VARIABLES) -> str:
    """Return the first non-empty API key among ``variables``."""
    for name in variables:
        value = os.getenv(name, "")
        if value:
            return value
    raise ValueError(f"Missing {' or '.join(variables)} in environment.")


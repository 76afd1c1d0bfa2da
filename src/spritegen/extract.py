"""Pull the first inline image out of a generation response."""

from __future__ import annotations

import base64
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


_SUBTYPE_RE = re.compile(r"[A-Za-z0-9.+-]+")


class NoImageReturnedError(RuntimeError):
    def __init__(self, item_id: str) -> None:
        super().__init__(f"No image returned for {item_id}")
        self.item_id = item_id


@dataclass(frozen=True)
class ExtractedImage:
    mime_type: str | None
    data: bytes

    @property
    def extension(self) -> str:
        return extension_from_mime_type(self.mime_type)


def extension_from_mime_type(mime_type: str | None) -> str:
    if not mime_type:
        return "png"
    _, _, subtype = mime_type.partition("/")
    subtype = subtype.strip().lower()
    if not _SUBTYPE_RE.fullmatch(subtype) or set(subtype) == {"."}:
        return "png"
    return "jpg" if subtype == "jpeg" else subtype


def _decode(data: bytes | str) -> bytes:
    # The SDK hands back bytes; the raw wire form is base64 text.
    if isinstance(data, str):
        return base64.b64decode(data)
    return bytes(data)


def extract_first_image(item_id: str, parts: Iterable[Any]) -> ExtractedImage:
    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is None or not getattr(inline, "data", None):
            continue
        return ExtractedImage(
            mime_type=getattr(inline, "mime_type", None),
            data=_decode(inline.data),
        )
    raise NoImageReturnedError(item_id)

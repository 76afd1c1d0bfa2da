"""Logging helpers shared across components."""

from __future__ import annotations

import logging
import os
import sys

TRANSPORT_LOGGERS = ("httpx", "google_genai")


def configure_logging() -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_format = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s %(name)s:%(filename)s:%(lineno)d: %(message)s",
    )
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=[handler],
        force=True,
    )
    transport_level = (
        logging.WARNING if os.getenv("PYTEST_CURRENT_TEST") else logging.DEBUG
    )
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

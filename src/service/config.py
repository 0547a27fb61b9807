"""Runtime configuration for the Palette Bucket service."""
from __future__ import annotations

import logging
import os

from src.palettes.data import DEFAULT_PALETTE

ACTIVE_PALETTE = os.environ.get("PALETTE_ACTIVE", DEFAULT_PALETTE).strip() or DEFAULT_PALETTE
LOG_LEVEL = os.environ.get("PALETTE_LOG_LEVEL", "INFO").upper()
DEFAULT_STEP = float(os.environ.get("PALETTE_DEFAULT_STEP", "10"))


def configure_logging() -> None:
    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


__all__ = [
    "ACTIVE_PALETTE",
    "LOG_LEVEL",
    "DEFAULT_STEP",
    "configure_logging",
]

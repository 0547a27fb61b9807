"""Process-wide palette registry and cursor.

Both objects are created on first use from :mod:`.config` and live for the
lifetime of the process. ``reset_defaults`` drops them so the next call
rebuilds from the current configuration.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from src.palettes import BUILTIN_PALETTES, Palette, PaletteCursor, PaletteRegistry

from . import config

logger = logging.getLogger("palettebucket.state")

_lock = threading.Lock()
_registry: Optional[PaletteRegistry] = None
_cursor: Optional[PaletteCursor] = None


def get_registry() -> PaletteRegistry:
    global _registry
    with _lock:
        if _registry is None:
            _registry = PaletteRegistry(BUILTIN_PALETTES, active=config.ACTIVE_PALETTE)
            logger.info("Palette registry ready with active palette %s", _registry.active_name)
        return _registry


def get_cursor() -> PaletteCursor:
    global _cursor
    registry = get_registry()
    with _lock:
        if _cursor is None:
            _cursor = PaletteCursor(registry)
        return _cursor


def reset_defaults() -> None:
    global _registry, _cursor
    with _lock:
        _registry = None
        _cursor = None


def get_active_palette() -> Palette:
    return get_registry().get_active_palette()


def color_names() -> Tuple[str, ...]:
    return get_registry().color_names()


def current() -> str:
    return get_cursor().current()


def advance() -> str:
    return get_cursor().advance()


def next_color() -> str:
    return get_cursor().next_color()


def reset_cursor() -> None:
    get_cursor().reset()


__all__ = [
    "get_registry",
    "get_cursor",
    "reset_defaults",
    "get_active_palette",
    "color_names",
    "current",
    "advance",
    "next_color",
    "reset_cursor",
]

"""Palette registry, round-robin cursor and hex color transforms."""

from .cursor import PaletteCursor
from .data import BUILTIN_PALETTES, DEFAULT_PALETTE, SOLARIZED, ZENBURN
from .errors import EmptyPalette, InvalidColorFormat, PaletteError, UnknownPalette
from .registry import PaletteRegistry
from .transform import brighten, darken, format_hex, normalize_hex, parse_hex
from .types import Palette

__all__ = [
    "PaletteCursor",
    "PaletteRegistry",
    "Palette",
    "BUILTIN_PALETTES",
    "DEFAULT_PALETTE",
    "SOLARIZED",
    "ZENBURN",
    "PaletteError",
    "InvalidColorFormat",
    "EmptyPalette",
    "UnknownPalette",
    "brighten",
    "darken",
    "format_hex",
    "normalize_hex",
    "parse_hex",
]

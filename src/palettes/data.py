"""Built-in palette definitions."""
from __future__ import annotations

from typing import Dict

from .types import Palette

SOLARIZED = Palette(
    "solarized",
    {
        "background": "#002b36",
        "background2": "#073642",
        "base01": "#586e75",
        "base00": "#657b83",
        "base0": "#839496",
        "base1": "#93a1a1",
        "base2": "#eee8d5",
        "base3": "#fdf6e3",
        "yellow": "#b58900",
        "orange": "#cb4b16",
        "red": "#dc322f",
        "magenta": "#d33682",
        "violet": "#6c71c4",
        "blue": "#268bd2",
        "cyan": "#2aa198",
        "green": "#859900",
    },
)

ZENBURN = Palette(
    "zenburn",
    {
        "background": "#000010",
        "foreground": "#ffffff",
        "color0": "#000000",
        "color1": "#9e1828",
        "color2": "#aece92",
        "color3": "#968a38",
        "color4": "#414171",
        "color5": "#963c59",
        "color6": "#418179",
        "color7": "#bebebe",
        "color8": "#666666",
        "color9": "#cf6171",
        "color10": "#c5f779",
        "color11": "#fff796",
        "color12": "#4186be",
        "color13": "#cf9ebe",
        "color14": "#71bebe",
        "color15": "#ffffff",
    },
)

BUILTIN_PALETTES: Dict[str, Palette] = {
    SOLARIZED.name: SOLARIZED,
    ZENBURN.name: ZENBURN,
}

DEFAULT_PALETTE = SOLARIZED.name

__all__ = ["SOLARIZED", "ZENBURN", "BUILTIN_PALETTES", "DEFAULT_PALETTE"]

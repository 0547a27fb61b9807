"""Named palette registry with a selectable active palette."""
from __future__ import annotations

import logging
import threading
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from .errors import UnknownPalette
from .types import Palette

PaletteSource = Union[Palette, Mapping[str, str]]


class PaletteRegistry:
    """Holds named palettes and tracks which one is active.

    Palettes are fixed once registered. The ordered list of color names for
    the active palette is derived on first use and cached until another
    palette is selected.
    """

    def __init__(
        self,
        palettes: Mapping[str, PaletteSource],
        active: Optional[str] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._palettes: Dict[str, Palette] = {}
        for name, source in palettes.items():
            self._palettes[name] = source if isinstance(source, Palette) else Palette(name, source)
        if active is None:
            active = next(iter(self._palettes), None)
            if active is None:
                raise ValueError("PaletteRegistry needs at least one palette")
        if active not in self._palettes:
            raise UnknownPalette(active)
        self._active = active
        self._color_names: Optional[Tuple[str, ...]] = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    @property
    def active_name(self) -> str:
        return self._active

    def names(self) -> Tuple[str, ...]:
        return tuple(self._palettes)

    def get(self, name: str) -> Palette:
        try:
            return self._palettes[name]
        except KeyError:
            raise UnknownPalette(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._palettes

    def __iter__(self) -> Iterator[str]:
        return iter(self._palettes)

    def __len__(self) -> int:
        return len(self._palettes)

    # ------------------------------------------------------------------
    def get_active_palette(self) -> Palette:
        return self._palettes[self._active]

    def color_names(self) -> Tuple[str, ...]:
        """Color names of the active palette in definition order."""
        return self.snapshot()[1]

    def snapshot(self) -> Tuple[Palette, Tuple[str, ...]]:
        """Return the active palette together with its color names."""
        with self._lock:
            palette = self._palettes[self._active]
            if self._color_names is None:
                self._color_names = tuple(palette)
            return palette, self._color_names

    def lookup(self, color_name: str) -> str:
        return self.get_active_palette()[color_name]

    def select(self, name: str) -> Palette:
        palette = self.get(name)
        with self._lock:
            previous = self._active
            self._active = name
            self._color_names = None
        if name != previous:
            self._logger.info("Active palette changed from %s to %s", previous, name)
        return palette


__all__ = ["PaletteRegistry", "PaletteSource"]

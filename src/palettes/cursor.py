"""Round-robin cursor over the active palette's color names."""
from __future__ import annotations

import logging
import threading
from typing import Sequence, Tuple

from .errors import EmptyPalette
from .registry import PaletteRegistry
from .types import Palette


class PaletteCursor:
    """Walks the active palette one color name at a time, wrapping at the end.

    The offset starts at 0 and is only moved by :meth:`advance` and
    :meth:`reset`. Both run under a lock so that concurrent callers see each
    name exactly once per cycle.
    """

    def __init__(self, registry: PaletteRegistry, logger: logging.Logger | None = None) -> None:
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)
        self._offset = 0
        self._lock = threading.Lock()

    @classmethod
    def from_names(cls, name: str, colors: Sequence[Tuple[str, str]]) -> "PaletteCursor":
        """Build a cursor over a single ad-hoc palette."""
        palette = Palette(name, dict(colors))
        return cls(PaletteRegistry({name: palette}))

    @property
    def registry(self) -> PaletteRegistry:
        return self._registry

    @property
    def offset(self) -> int:
        with self._lock:
            return self._position(self._snapshot()[1])

    def _snapshot(self) -> Tuple[Palette, Tuple[str, ...]]:
        palette, names = self._registry.snapshot()
        if not names:
            raise EmptyPalette(f"Palette {palette.name!r} has no colors")
        return palette, names

    def _position(self, names: Tuple[str, ...]) -> int:
        # The active palette may have been swapped for a shorter one.
        if self._offset >= len(names):
            self._offset %= len(names)
        return self._offset

    def current(self) -> str:
        return self.current_entry()[0]

    def current_entry(self) -> Tuple[str, str]:
        """Name and hex value at the cursor, taken from the same palette."""
        with self._lock:
            palette, names = self._snapshot()
            name = names[self._position(names)]
        return name, palette[name]

    def _step(self) -> Tuple[Palette, str]:
        with self._lock:
            palette, names = self._snapshot()
            position = self._position(names)
            self._offset = next_offset = (position + 1) % len(names)
        self._logger.debug("Cursor advanced past %s (next offset %d)", names[position], next_offset)
        return palette, names[position]

    def advance(self) -> str:
        return self._step()[1]

    def next_color(self) -> str:
        return self.next_entry()[1]

    def next_entry(self) -> Tuple[str, str]:
        # Resolve against the palette the name was taken from.
        palette, name = self._step()
        return name, palette[name]

    def reset(self) -> None:
        with self._lock:
            self._offset = 0


__all__ = ["PaletteCursor"]

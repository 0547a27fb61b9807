"""Typed primitives for palette handling."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple


@dataclass(frozen=True)
class Palette(Mapping[str, str]):
    """Immutable, ordered mapping of color names to hex values."""

    name: str
    colors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze a private copy so later edits to the source dict do not leak in.
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))

    def __getitem__(self, color_name: str) -> str:
        return self.colors[color_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def __hash__(self) -> int:
        return hash((self.name, tuple(self.colors.items())))

    def items_ordered(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self.colors.items())


__all__ = ["Palette"]

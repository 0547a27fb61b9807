"""Error types raised by the palette utilities."""
from __future__ import annotations


class PaletteError(Exception):
    """Base class for palette failures."""


class InvalidColorFormat(PaletteError, ValueError):
    """Raised when a hex color string cannot be parsed."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid hex color: {value!r}")
        self.value = value


class EmptyPalette(PaletteError, LookupError):
    """Raised when a cursor operation runs over a palette with no colors."""


class UnknownPalette(PaletteError, KeyError):
    """Raised when a palette name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown palette: {self.name!r}"


__all__ = ["PaletteError", "InvalidColorFormat", "EmptyPalette", "UnknownPalette"]

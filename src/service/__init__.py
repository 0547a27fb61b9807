"""HTTP service exposing the palette utilities."""

__version__ = "0.1.0"

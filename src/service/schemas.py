"""Pydantic models for the palette service."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class TransformOperation(str, Enum):
    """Supported hex color transforms."""

    BRIGHTEN = "brighten"
    DARKEN = "darken"


class ColorEntry(BaseModel):
    name: str = Field(..., description="Semantic color name within the palette")
    hex: str = Field(..., description="Hex color value as defined in the palette")


class PaletteResponse(BaseModel):
    name: str
    active: bool = Field(False, description="True when this palette is the active one")
    colors: List[ColorEntry] = Field(default_factory=list)


class PaletteListResponse(BaseModel):
    palettes: List[str] = Field(default_factory=list)
    active: str


class TransformRequest(BaseModel):
    """Payload for brighten/darken requests."""

    hex: str = Field(..., description="Hex color, #RGB or #RRGGBB, leading # optional")
    percent: Optional[float] = Field(
        None,
        allow_inf_nan=False,
        description="Blend amount in percent; the configured default step applies when omitted",
    )


class TransformResponse(BaseModel):
    operation: TransformOperation
    input: str
    percent: float
    hex: str


class CursorResponse(BaseModel):
    palette: str
    name: str
    hex: str
    offset: int = Field(..., ge=0, description="Cursor offset after the operation")


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    active_palette: str

"""FastAPI service exposing palettes, color transforms and the palette cursor."""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from src.palettes import EmptyPalette, Palette, UnknownPalette, brighten, darken

from . import __version__, state
from .config import DEFAULT_STEP, configure_logging
from .schemas import (
    ColorEntry,
    CursorResponse,
    HealthResponse,
    PaletteListResponse,
    PaletteResponse,
    TransformOperation,
    TransformRequest,
    TransformResponse,
)

configure_logging()

logger = logging.getLogger("palettebucket.service")

app = FastAPI(title="Palette Bucket Service", version=__version__)

_TRANSFORMS = {
    TransformOperation.BRIGHTEN: brighten,
    TransformOperation.DARKEN: darken,
}


def _palette_response(palette: Palette) -> PaletteResponse:
    registry = state.get_registry()
    return PaletteResponse(
        name=palette.name,
        active=palette.name == registry.active_name,
        colors=[ColorEntry(name=name, hex=value) for name, value in palette.items_ordered()],
    )


def _cursor_response(name: str, value: str) -> CursorResponse:
    cursor = state.get_cursor()
    return CursorResponse(
        palette=cursor.registry.active_name,
        name=name,
        hex=value,
        offset=cursor.offset,
    )


def _transform(operation: TransformOperation, payload: TransformRequest) -> TransformResponse:
    percent = DEFAULT_STEP if payload.percent is None else payload.percent
    try:
        result = _TRANSFORMS[operation](payload.hex, percent)
    except ValueError as error:
        logger.warning("Rejected %s request: %s", operation.value, error)
        raise HTTPException(status_code=422, detail=str(error)) from error
    return TransformResponse(operation=operation, input=payload.hex, percent=percent, hex=result)


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(version=__version__, active_palette=state.get_registry().active_name)


@app.get("/palettes", response_model=PaletteListResponse)
def palettes() -> PaletteListResponse:
    registry = state.get_registry()
    return PaletteListResponse(palettes=list(registry.names()), active=registry.active_name)


@app.get("/palettes/active", response_model=PaletteResponse)
def active_palette() -> PaletteResponse:
    return _palette_response(state.get_active_palette())


@app.get("/palettes/{name}", response_model=PaletteResponse)
def palette_detail(name: str) -> PaletteResponse:
    try:
        palette = state.get_registry().get(name)
    except UnknownPalette as error:
        raise HTTPException(status_code=404, detail=str(error)) from error
    return _palette_response(palette)


@app.post("/palettes/{name}/select", response_model=PaletteResponse)
def select_palette(name: str) -> PaletteResponse:
    """Make ``name`` the active palette; the cursor keeps its offset."""

    try:
        palette = state.get_registry().select(name)
    except UnknownPalette as error:
        raise HTTPException(status_code=404, detail=str(error)) from error
    return _palette_response(palette)


@app.post("/colors/brighten", response_model=TransformResponse)
def brighten_color(payload: TransformRequest) -> TransformResponse:
    return _transform(TransformOperation.BRIGHTEN, payload)


@app.post("/colors/darken", response_model=TransformResponse)
def darken_color(payload: TransformRequest) -> TransformResponse:
    return _transform(TransformOperation.DARKEN, payload)


@app.get("/cursor", response_model=CursorResponse)
def cursor_current() -> CursorResponse:
    try:
        name, value = state.get_cursor().current_entry()
    except EmptyPalette as error:
        raise HTTPException(status_code=409, detail=str(error)) from error
    return _cursor_response(name, value)


@app.post("/cursor/advance", response_model=CursorResponse)
def cursor_advance() -> CursorResponse:
    """Return the color at the cursor and move the cursor one step forward."""

    try:
        name, value = state.get_cursor().next_entry()
    except EmptyPalette as error:
        raise HTTPException(status_code=409, detail=str(error)) from error
    logger.debug("Cursor served %s", name)
    return _cursor_response(name, value)


@app.post("/cursor/reset", response_model=CursorResponse)
def cursor_reset() -> CursorResponse:
    state.reset_cursor()
    try:
        name, value = state.get_cursor().current_entry()
    except EmptyPalette as error:
        raise HTTPException(status_code=409, detail=str(error)) from error
    return _cursor_response(name, value)

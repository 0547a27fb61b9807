from __future__ import annotations

import importlib

import pytest

from src.palettes import UnknownPalette


@pytest.fixture()
def state(monkeypatch):
    monkeypatch.setenv("PALETTE_ACTIVE", "solarized")
    config_module = importlib.import_module("src.service.config")
    importlib.reload(config_module)
    state_module = importlib.import_module("src.service.state")
    state_module.reset_defaults()
    yield state_module
    state_module.reset_defaults()


def test_process_wide_objects_are_built_once(state) -> None:
    assert state.get_registry() is state.get_registry()
    assert state.get_cursor() is state.get_cursor()
    assert state.get_cursor().registry is state.get_registry()


def test_module_level_functions_share_one_cursor(state) -> None:
    names = state.color_names()

    assert state.get_active_palette().name == "solarized"
    assert state.current() == names[0]
    assert state.advance() == names[0]
    assert state.next_color() == state.get_active_palette()[names[1]]
    assert state.current() == names[2]

    state.reset_cursor()
    assert state.current() == names[0]


def test_unknown_configured_palette(state, monkeypatch) -> None:
    monkeypatch.setenv("PALETTE_ACTIVE", "monokai")
    importlib.reload(importlib.import_module("src.service.config"))
    state.reset_defaults()

    with pytest.raises(UnknownPalette):
        state.get_registry()

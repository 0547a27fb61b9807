from __future__ import annotations

import threading

import pytest

from src.palettes import BUILTIN_PALETTES, EmptyPalette, PaletteCursor, PaletteRegistry


def _cursor() -> PaletteCursor:
    return PaletteCursor(PaletteRegistry(BUILTIN_PALETTES, active="solarized"))


def test_advance_visits_every_name_once_per_cycle() -> None:
    cursor = _cursor()
    names = cursor.registry.color_names()

    first_cycle = [cursor.advance() for _ in names]
    second_cycle = [cursor.advance() for _ in names]

    assert first_cycle == list(names)
    assert second_cycle == list(names)
    assert cursor.offset == 0


def test_current_does_not_advance() -> None:
    cursor = _cursor()

    assert cursor.current() == "background"
    assert cursor.current() == "background"
    assert cursor.advance() == "background"
    assert cursor.current() == "background2"
    assert cursor.offset == 1


def test_next_color_returns_hex_values_in_order() -> None:
    cursor = _cursor()

    assert cursor.next_color() == "#002b36"
    assert cursor.next_color() == "#073642"


def test_reset_replays_the_same_sequence() -> None:
    cursor = _cursor()
    before = [cursor.advance() for _ in range(5)]

    cursor.reset()

    assert cursor.offset == 0
    assert [cursor.advance() for _ in range(5)] == before


def test_empty_palette_fails() -> None:
    cursor = PaletteCursor.from_names("empty", [])

    with pytest.raises(EmptyPalette):
        cursor.advance()
    with pytest.raises(EmptyPalette):
        cursor.current()
    with pytest.raises(EmptyPalette):
        cursor.next_color()


def test_offset_wraps_when_active_palette_shrinks() -> None:
    registry = PaletteRegistry({"long": {f"c{i}": "#000000" for i in range(5)}, "short": {"a": "#fff", "b": "#000"}})
    cursor = PaletteCursor(registry)
    for _ in range(3):
        cursor.advance()

    registry.select("short")

    assert cursor.offset == 1
    assert cursor.advance() == "b"
    assert cursor.advance() == "a"


def test_concurrent_advance_hands_out_each_name_once() -> None:
    cursor = PaletteCursor.from_names("pairs", [(f"c{i}", "#000000") for i in range(64)])
    seen: list[str] = []
    seen_lock = threading.Lock()

    def worker() -> None:
        for _ in range(8):
            name = cursor.advance()
            with seen_lock:
                seen.append(name)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(seen) == sorted(f"c{i}" for i in range(64))
    assert cursor.offset == 0


class _SwitchingRegistry(PaletteRegistry):
    """Selects another palette right after handing out a snapshot."""

    def __init__(self, *args, switch_to: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._switch_to = switch_to

    def snapshot(self):
        result = super().snapshot()
        if self.active_name != self._switch_to:
            self.select(self._switch_to)
        return result


def test_next_color_resolves_against_the_palette_it_advanced_over() -> None:
    registry = _SwitchingRegistry(
        {"warm": {"sun": "#ffaa00"}, "cold": {"ice": "#aaddff"}},
        active="warm",
        switch_to="cold",
    )
    cursor = PaletteCursor(registry)

    assert cursor.next_entry() == ("sun", "#ffaa00")
    assert registry.active_name == "cold"
    assert cursor.next_color() == "#aaddff"

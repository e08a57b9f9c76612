from __future__ import annotations

from typing import Any


class DummyWindow:
    def __init__(self, width=600, height=600):
        self.width = width
        self.height = height


class RecordingSurface:
    """Stands in for the arcade module and records every draw call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def _record(self, name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self.calls.append((name, args, kwargs))

    def draw_lrbt_rectangle_filled(self, *args, **kwargs):
        self._record("draw_lrbt_rectangle_filled", args, kwargs)

    def draw_lbwh_rectangle_filled(self, *args, **kwargs):
        self._record("draw_lbwh_rectangle_filled", args, kwargs)

    def draw_lbwh_rectangle_outline(self, *args, **kwargs):
        self._record("draw_lbwh_rectangle_outline", args, kwargs)

    def draw_line(self, *args, **kwargs):
        self._record("draw_line", args, kwargs)

    def draw_text(self, *args, **kwargs):
        self._record("draw_text", args, kwargs)

    def named(self, name: str) -> list[tuple[tuple[Any, ...], dict[str, Any]]]:
        return [(args, kwargs) for call, args, kwargs in self.calls if call == name]


def window_y(window: DummyWindow, canvas_y: int) -> int:
    """Window (bottom-left origin) row for a canvas (top-left origin) row."""
    return window.height - 1 - canvas_y

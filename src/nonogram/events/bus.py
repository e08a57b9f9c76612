from blinker import Signal
from typing import Dict


class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"      # payload: x, y, button (window coordinates)
EVENT_CELL_CLICK = "cell_click"        # payload: x, y (cell indices)


# ============================================================================
# BOARD
# ============================================================================
EVENT_CELL_CHANGED = "cell_changed"    # payload: x, y, previous=CellState, state=CellState

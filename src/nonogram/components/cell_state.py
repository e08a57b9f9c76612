"""Per-cell marking state chosen by the player."""
from enum import Enum, auto


class CellState(Enum):
    """Closed set of states a board cell can be in."""
    EMPTY = auto()
    CROSSED_OUT = auto()
    FILLED = auto()

    def next(self) -> "CellState":
        """Return the state one click advances to: empty, crossed out, filled, empty."""
        if self is CellState.EMPTY:
            return CellState.CROSSED_OUT
        if self is CellState.CROSSED_OUT:
            return CellState.FILLED
        if self is CellState.FILLED:
            return CellState.EMPTY
        raise ValueError(f"Unhandled cell state: {self!r}")

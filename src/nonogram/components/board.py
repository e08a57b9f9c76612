from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from nonogram.components.cell_state import CellState


@dataclass(slots=True)
class Board:
    """Player markings for a square grid.

    Cells are stored linearly at ``x * width + y``. Only ``BoardSystem`` calls
    ``advance``; everything else reads.
    """
    width: int
    cells: List[CellState] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"Board width must be at least 1, got {self.width}")
        if not self.cells:
            self.cells = [CellState.EMPTY] * (self.width * self.width)
        elif len(self.cells) != self.width * self.width:
            raise ValueError(
                f"Board of width {self.width} needs {self.width * self.width} cells, got {len(self.cells)}"
            )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.width

    def state_at(self, x: int, y: int) -> CellState:
        return self.cells[x * self.width + y]

    def advance(self, x: int, y: int) -> Optional[CellState]:
        if not self.in_bounds(x, y):
            return None
        index = x * self.width + y
        new_state = self.cells[index].next()
        self.cells[index] = new_state
        return new_state

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, slots=True)
class Solution:
    """Hidden answer grid; ``True`` marks a cell that belongs in the picture.

    Uses the same ``x * width + y`` linearization as ``Board``. Only read to
    derive hint numbers.
    """
    width: int
    cells: Tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"Solution width must be at least 1, got {self.width}")
        if len(self.cells) != self.width * self.width:
            raise ValueError(
                f"Solution of width {self.width} needs {self.width * self.width} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_blank_indices(cls, width: int, blank_indices: Iterable[int]) -> "Solution":
        """Build a solution that is filled everywhere except ``blank_indices``."""
        blanks = set(blank_indices)
        return cls(width=width, cells=tuple(i not in blanks for i in range(width * width)))

    def line(self, index: int, is_column: bool) -> Tuple[bool, ...]:
        """Cells ``index * width + k`` for columns, ``k * width + index`` for rows."""
        w = self.width
        if is_column:
            return tuple(self.cells[index * w + k] for k in range(w))
        return tuple(self.cells[k * w + index] for k in range(w))

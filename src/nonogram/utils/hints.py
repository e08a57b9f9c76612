from __future__ import annotations

from typing import Iterable, List

from nonogram.components.solution import Solution


def compute_run_lengths(line: Iterable[bool]) -> List[int]:
    """Return the lengths of consecutive ``True`` runs along ``line``, in order."""
    numbers: List[int] = []
    current = False
    size = 0
    for value in line:
        previous = current
        current = bool(value)
        if previous and not current:
            numbers.append(size)
            size = 0
        if current:
            size += 1
    if current:
        numbers.append(size)
    return numbers


def line_hints(solution: Solution, index: int, is_column: bool) -> List[int]:
    """Hint numbers for one column (``is_column``) or row of ``solution``."""
    return compute_run_lengths(solution.line(index, is_column))

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from nonogram.constants import CANVAS_PAD, NUMBER_PAD


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Pixel layout of the board inside the canvas (top-left origin, y down).

    The inner area is square: it starts at ``inner_start`` on both axes and
    spans ``inner_size`` pixels, which is always ``cell_size * grid_width``.
    """
    grid_width: int
    inner_start: int
    inner_size: int
    cell_size: int
    max_label_slots: int
    label_pad: int = NUMBER_PAD

    @property
    def inner_end(self) -> int:
        return self.inner_start + self.inner_size


def compute_board_geometry(
    canvas_width: float,
    canvas_height: float,
    grid_width: int,
    *,
    label_pad: int = NUMBER_PAD,
    canvas_pad: int = CANVAS_PAD,
) -> BoardGeometry:
    """Return the board geometry for a canvas of the given size.

    Reserves ``label_pad`` pixels per hint number for the worst case of
    ``ceil(grid_width / 2)`` runs in one line, then floors the cell size so grid
    lines land on whole pixels. The board is square and sized from the canvas
    width; ``canvas_height`` is accepted so callers pass the full canvas size.
    """
    if grid_width < 1:
        raise ValueError(f"grid_width must be at least 1, got {grid_width}")
    max_label_slots = math.ceil(grid_width / 2.0)
    max_label_size = label_pad * max_label_slots
    inner_size = math.floor(canvas_width - max_label_size - 2 * canvas_pad)
    inner_start = math.floor(max_label_size + canvas_pad)
    cell_size = max(0, math.floor(inner_size / grid_width))
    return BoardGeometry(
        grid_width=grid_width,
        inner_start=inner_start,
        inner_size=cell_size * grid_width,
        cell_size=cell_size,
        max_label_slots=max_label_slots,
        label_pad=label_pad,
    )


def pixel_to_cell(geometry: BoardGeometry, px: float, py: float) -> Optional[Tuple[int, int]]:
    """Map a canvas pixel to ``(cell_x, cell_y)``, or ``None`` when off the board."""
    if geometry.cell_size <= 0:
        return None
    cell_x = math.floor((px - geometry.inner_start) / geometry.cell_size)
    cell_y = math.floor((py - geometry.inner_start) / geometry.cell_size)
    if 0 <= cell_x < geometry.grid_width and 0 <= cell_y < geometry.grid_width:
        return cell_x, cell_y
    return None


def cell_to_pixel(geometry: BoardGeometry, cell_x: int, cell_y: int) -> Tuple[int, int]:
    """Top-left canvas pixel of a cell."""
    return (
        geometry.inner_start + cell_x * geometry.cell_size,
        geometry.inner_start + cell_y * geometry.cell_size,
    )


def label_offset(index: int, count: int, max_label_slots: int, label_pad: float = NUMBER_PAD) -> float:
    """Distance from the canvas edge to the centre of hint ``index`` of ``count``.

    Lines with fewer hints than ``max_label_slots`` are centred in their band.
    """
    return (index + 0.5 + (max_label_slots - count) / 2.0) * label_pad

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from esper import World

from nonogram.components.board import Board
from nonogram.components.board_style import BoardStyle
from nonogram.components.solution import Solution
from nonogram.ui.layout import BoardGeometry
from nonogram.utils.puzzle import get_board, get_solution, get_style


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents.

    Layout values are canvas coordinates (top-left origin). Arcade draws with a
    bottom-left origin, so renderers convert through ``screen_y`` and
    ``screen_rect`` right before each draw call.
    """

    canvas_width: int
    canvas_height: int
    geometry: BoardGeometry
    board: Board
    solution: Solution
    style: BoardStyle

    def screen_y(self, canvas_y: float) -> float:
        return self.canvas_height - canvas_y

    def screen_rect(self, left: float, top: float, width: float, height: float) -> Tuple[float, float, float, float]:
        """Convert a canvas rectangle to arcade's (left, bottom, width, height)."""
        return left, self.canvas_height - top - height, width, height


def build_render_context(
    world: World,
    canvas_width: int,
    canvas_height: int,
    geometry: BoardGeometry,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    return RenderContext(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        geometry=geometry,
        board=get_board(world),
        solution=get_solution(world),
        style=get_style(world),
    )

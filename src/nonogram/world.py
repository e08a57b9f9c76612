from __future__ import annotations

import logging

from esper import World

from nonogram.components.board import Board
from nonogram.components.board_style import BoardStyle
from nonogram.components.solution import Solution
from nonogram.constants import DEFAULT_GRID_WIDTH, DEMO_BLANK_INDICES

logger = logging.getLogger(__name__)


def create_demo_solution() -> Solution:
    return Solution.from_blank_indices(DEFAULT_GRID_WIDTH, DEMO_BLANK_INDICES)


def create_world(
    solution: Solution | None = None,
    *,
    style: BoardStyle | None = None,
) -> World:
    """Create a world holding a single puzzle entity with a blank board."""
    world = World()
    solution = solution or create_demo_solution()
    world.create_entity(
        Board(width=solution.width),
        solution,
        style or BoardStyle(),
    )
    logger.debug("Created %dx%d puzzle", solution.width, solution.width)
    return world

from __future__ import annotations

from esper import World

from nonogram.components.board import Board
from nonogram.components.board_style import BoardStyle
from nonogram.components.solution import Solution


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError('Board component not found')


def get_solution(world: World) -> Solution:
    for _, solution in world.get_component(Solution):
        return solution
    raise RuntimeError('Solution component not found')


def get_style(world: World) -> BoardStyle:
    """Return the board style, falling back to defaults when none is attached."""
    for _, style in world.get_component(BoardStyle):
        return style
    return BoardStyle()

import pytest

from nonogram.components.board import Board
from nonogram.components.cell_state import CellState


def test_new_board_is_empty():
    board = Board(width=4)
    assert len(board.cells) == 16
    assert all(state is CellState.EMPTY for state in board.cells)


def test_advance_cycles_single_cell():
    board = Board(width=3)
    seen = [board.advance(1, 2) for _ in range(3)]
    assert seen == [CellState.CROSSED_OUT, CellState.FILLED, CellState.EMPTY]
    assert all(state is CellState.EMPTY for state in board.cells)


def test_advance_uses_x_major_index():
    board = Board(width=3)
    board.advance(1, 2)
    assert board.cells[1 * 3 + 2] is CellState.CROSSED_OUT
    assert board.state_at(1, 2) is CellState.CROSSED_OUT
    assert board.state_at(2, 1) is CellState.EMPTY


def test_advance_out_of_bounds_changes_nothing():
    board = Board(width=2)
    assert board.advance(2, 0) is None
    assert board.advance(0, -1) is None
    assert all(state is CellState.EMPTY for state in board.cells)


def test_invalid_sizes_rejected():
    with pytest.raises(ValueError):
        Board(width=0)
    with pytest.raises(ValueError):
        Board(width=2, cells=[CellState.EMPTY] * 3)

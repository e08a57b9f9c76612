import itertools

from nonogram.components.solution import Solution
from nonogram.utils.hints import compute_run_lengths, line_hints
from nonogram.world import create_demo_solution

T, F = True, False


def test_mixed_line():
    assert compute_run_lengths([T, F, T, T, F, T]) == [1, 2, 1]


def test_all_true_line_is_single_run():
    assert compute_run_lengths([T, T, T, T, T]) == [5]


def test_all_false_and_empty_lines_have_no_hints():
    assert compute_run_lengths([]) == []
    for width in range(1, 8):
        assert compute_run_lengths([F] * width) == []


def test_leading_and_trailing_runs():
    assert compute_run_lengths([T, T, F, F]) == [2]
    assert compute_run_lengths([F, F, T]) == [1]


def _count_runs(line):
    return sum(1 for value, _ in itertools.groupby(line) if value)


def test_hint_sum_and_count_match_line_for_all_short_lines():
    for width in range(0, 9):
        for line in itertools.product([F, T], repeat=width):
            hints = compute_run_lengths(line)
            assert sum(hints) == sum(line)
            assert len(hints) == _count_runs(line)
            assert all(h > 0 for h in hints)


def test_demo_first_line_hints():
    solution = create_demo_solution()
    # Indices 0-4: F T F T T
    assert solution.line(0, is_column=True) == (F, T, F, T, T)
    assert line_hints(solution, 0, is_column=True) == [1, 2]


def test_demo_hints_for_every_line():
    solution = create_demo_solution()
    columns = [line_hints(solution, i, True) for i in range(5)]
    rows = [line_hints(solution, i, False) for i in range(5)]
    assert columns == [[1, 2], [2, 1], [2, 2], [2, 2], [1, 1, 1]]
    assert rows == [[4], [4], [1], [4], [1, 3]]


def test_row_lines_use_strided_indices():
    solution = Solution.from_blank_indices(3, [0, 1, 2])
    assert solution.line(0, is_column=True) == (F, F, F)
    assert solution.line(0, is_column=False) == (F, T, T)
    assert line_hints(solution, 1, is_column=False) == [2]

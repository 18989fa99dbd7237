"""Tests for the backtracking search."""

import pytest

from skyscrapers.errors import NoSolutionError, SearchBudgetExceeded
from skyscrapers.models import Clues, visible_count
from skyscrapers.ordering import CLUES_FIRST
from skyscrapers.solver import Outcome, Solver, solve

CLUES_4 = [
    2, 2, 1, 3,
    2, 2, 3, 1,
    1, 2, 2, 3,
    3, 2, 1, 3,
]
SOLUTION_4 = [
    [1, 3, 4, 2],
    [4, 2, 1, 3],
    [3, 4, 2, 1],
    [2, 1, 3, 4],
]

# (0, 3) can hold neither 1 (column) nor 2, 3, 4 (row): every branch dies on the last row
DEAD_END_4 = [
    [1, 0, 0, 0],
    [0, 0, 0, 0],
    [0, 0, 0, 0],
    [0, 2, 3, 4],
]


def assert_latin_square(board, n):
    symbols = list(range(1, n + 1))
    assert len(board) == n
    for row in board:
        assert sorted(row) == symbols
    for x in range(n):
        assert sorted(board[y][x] for y in range(n)) == symbols


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_solution_is_a_latin_square(n):
    assert_latin_square(solve(n), n)


def test_single_cell_grid():
    solver = Solver(1)
    result = solver.run()
    assert result.board == [[1]]
    assert result.stats.nodes == 1
    assert result.stats.backtracks == 0


def test_empty_grid():
    assert solve(0) == []


def test_first_solution_of_size_4():
    board = solve(4)
    assert board == [
        [1, 2, 3, 4],
        [2, 1, 4, 3],
        [3, 4, 1, 2],
        [4, 3, 2, 1],
    ]


def test_search_is_deterministic():
    assert solve(5) == solve(5)
    assert solve(4, target=3) == solve(4, target=3)


def test_second_solution_differs_from_first():
    result = Solver(4, target=2).run()
    first, second = result.solutions
    assert result.board == second
    assert first != second
    assert second == [
        [1, 2, 3, 4],
        [2, 1, 4, 3],
        [3, 4, 2, 1],
        [4, 3, 1, 2],
    ]
    assert_latin_square(first, 4)
    assert_latin_square(second, 4)


def test_accepted_solutions_are_distinct_snapshots():
    result = Solver(3, target=12).run()
    assert len(result.solutions) == 12
    assert len({str(b) for b in result.solutions}) == 12
    for board in result.solutions:
        assert_latin_square(board, 3)


def test_size_2_has_exactly_two_solutions():
    assert solve(2, target=2) == [[2, 1], [1, 2]]
    with pytest.raises(NoSolutionError):
        solve(2, target=3)


def test_contradictory_givens_fail():
    givens = [
        [1, 1, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    with pytest.raises(NoSolutionError):
        solve(4, givens=givens)


def test_exhausted_search_fails_and_restores_grid():
    solver = Solver(4, givens=DEAD_END_4)
    with pytest.raises(NoSolutionError):
        solver.run()
    assert solver.grid.board == DEAD_END_4
    assert solver.stats.backtracks > 0


def test_failed_branch_leaves_grid_untouched():
    solver = Solver(4, givens=DEAD_END_4)
    grid = solver.grid
    first = grid.next_position()
    board_before = grid.snapshot()
    rows_before = [line.values for line in grid.rows]
    columns_before = [line.values for line in grid.columns]

    assert solver._iter(first) is Outcome.EXHAUSTED

    assert grid.snapshot() == board_before
    assert [line.values for line in grid.rows] == rows_before
    assert [line.values for line in grid.columns] == columns_before


def test_givens_are_kept_in_solution():
    givens = [
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 4, 0],
        [0, 0, 0, 0],
    ]
    board = solve(4, givens=givens)
    assert board[2][2] == 4
    assert_latin_square(board, 4)


def test_fully_given_grid_is_returned_as_is():
    givens = [[1, 2], [2, 1]]
    assert solve(2, givens=givens) == givens


def test_clued_puzzle():
    board = solve(4, clues=CLUES_4)
    assert board == SOLUTION_4


def test_clued_puzzle_with_clues_first_order():
    result = Solver(4, clues=CLUES_4, policy=CLUES_FIRST).run()
    assert result.board == SOLUTION_4


def test_clued_solution_matches_every_clue():
    board = solve(4, clues=CLUES_4)
    clues = Clues.from_list(CLUES_4)
    for y in range(4):
        left, right = clues.row_clues(y)
        assert visible_count(board[y]) == left
        assert visible_count(board[y][::-1]) == right
    for x in range(4):
        column = [board[y][x] for y in range(4)]
        top, bottom = clues.column_clues(x)
        assert visible_count(column) == top
        assert visible_count(column[::-1]) == bottom


def test_node_budget():
    solver = Solver(4, max_nodes=5)
    with pytest.raises(SearchBudgetExceeded) as exc:
        solver.run()
    assert exc.value.max_nodes == 5
    assert solver.stats.nodes == 5
    assert solver.grid.board == [[0] * 4 for _ in range(4)]


def test_invalid_arguments():
    with pytest.raises(ValueError):
        Solver(-1)
    with pytest.raises(ValueError):
        Solver(17)
    with pytest.raises(ValueError):
        Solver(4, target=0)
    with pytest.raises(ValueError):
        Solver(4, max_nodes=0)
    with pytest.raises(ValueError):
        Solver(3, clues=CLUES_4)

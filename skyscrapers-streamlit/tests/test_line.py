"""Tests for line candidates and visibility clues."""

import pytest

from skyscrapers.errors import InvariantViolation
from skyscrapers.line import Line
from skyscrapers.models import visible_count

SYMBOLS = frozenset(range(1, 5))


def make_line(values, clues=(0, 0)):
    board = [list(values)]
    return board, Line(board, [(0, x) for x in range(len(values))], SYMBOLS, clues)


def test_visible_count():
    assert visible_count([1, 2, 3, 4]) == 4
    assert visible_count([4, 3, 2, 1]) == 1
    assert visible_count([2, 1, 3, 4]) == 3
    assert visible_count([3, 4, 2, 1]) == 2
    assert visible_count([]) == 0


def test_candidates_exclude_values_placed_elsewhere():
    _, line = make_line([0, 2, 0, 4])
    assert line.candidates(0) == [1, 3]
    assert line.candidates(2) == [1, 3]


def test_candidates_on_empty_line_are_all_symbols():
    _, line = make_line([0, 0, 0, 0])
    assert line.candidates(1) == [1, 2, 3, 4]


def test_candidates_for_filled_slot_is_an_invariant_violation():
    _, line = make_line([1, 0, 0, 0])
    with pytest.raises(InvariantViolation) as exc:
        line.candidates(0)
    assert "slot=0" in str(exc.value)
    assert "[1, 0, 0, 0]" in str(exc.value)


def test_line_reads_and_writes_through_the_board():
    board, line = make_line([0, 0, 0, 0])
    line[2] = 3
    assert board[0][2] == 3
    board[0][0] = 1
    assert line.values == [1, 0, 3, 0]


def test_clues_only_filter_the_last_empty_slot():
    _, line = make_line([0, 0, 0, 0], clues=(4, 0))
    assert line.candidates(0) == [1, 2, 3, 4]


def test_clues_filter_completion_of_the_line():
    _, line = make_line([2, 1, 0, 4], clues=(3, 0))
    assert line.candidates(2) == [3]

    _, line = make_line([2, 1, 0, 4], clues=(2, 0))
    assert line.candidates(2) == []

    # seen from the end, 4,3,1,2 shows 2, 3 and 4
    _, line = make_line([4, 3, 0, 2], clues=(1, 3))
    assert line.candidates(2) == [1]

    _, line = make_line([4, 3, 0, 2], clues=(1, 2))
    assert line.candidates(2) == []


def test_has_duplicates_and_is_complete():
    _, line = make_line([1, 1, 0, 0])
    assert line.has_duplicates()
    assert not line.is_complete()

    _, line = make_line([1, 2, 3, 4])
    assert not line.has_duplicates()
    assert line.is_complete()

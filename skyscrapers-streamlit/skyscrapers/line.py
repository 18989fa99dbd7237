from __future__ import annotations

from typing import FrozenSet, List, Optional, Sequence, Set, Tuple

from .errors import InvariantViolation
from .models import Board, visible_count


class Line:
    """
    A row or a column of the grid.

    The line keeps no values of its own: each slot maps to a (row, col) cell of
    the grid's board, so a write through the grid is seen by both the row and
    the column that share the cell. Whether it's a row or a column is only a
    matter of which cells it maps.
    """

    def __init__(
        self,
        board: Board,
        cells: Sequence[Tuple[int, int]],
        symbols: FrozenSet[int],
        clues: Tuple[int, int] = (0, 0),
    ) -> None:
        self._board = board
        self._cells = list(cells)
        self.symbols = symbols
        self.start_clue, self.end_clue = clues

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, slot: int) -> int:
        r, c = self._cells[slot]
        return self._board[r][c]

    def __setitem__(self, slot: int, value: int) -> None:
        r, c = self._cells[slot]
        self._board[r][c] = value

    @property
    def values(self) -> List[int]:
        return [self._board[r][c] for r, c in self._cells]

    def __repr__(self) -> str:
        return f"Line({self.values}, clues=({self.start_clue}, {self.end_clue}))"

    def has_clues(self) -> bool:
        return bool(self.start_clue or self.end_clue)

    def empty_slots(self) -> List[int]:
        return [i for i, v in enumerate(self.values) if v == 0]

    def is_complete(self) -> bool:
        return all(v != 0 for v in self.values)

    def has_duplicates(self) -> bool:
        placed = [v for v in self.values if v != 0]
        return len(placed) != len(set(placed))

    def satisfies_clues(self, values: Optional[Sequence[int]] = None) -> bool:
        vals = list(self.values if values is None else values)
        if self.start_clue and visible_count(vals) != self.start_clue:
            return False
        if self.end_clue and visible_count(vals[::-1]) != self.end_clue:
            return False
        return True

    def _placed_elsewhere(self, slot: int) -> Set[int]:
        placed: Set[int] = set()
        for i, v in enumerate(self.values):
            if i == slot:
                continue
            if v != 0:
                placed.add(v)
        return placed

    def candidates(self, slot: int) -> List[int]:
        """
        Symbols that can still go into `slot`, ascending.

        All symbols minus the ones already placed elsewhere on the line. When
        the line carries clues and `slot` is its last empty slot, candidates
        that would complete the line with the wrong visibility are dropped too.
        """
        if self[slot] != 0:
            raise InvariantViolation(
                f"Trying to discover an already discovered value: slot={slot}, line={self.values}"
            )
        possible = sorted(self.symbols - self._placed_elsewhere(slot))

        if self.has_clues() and self.empty_slots() == [slot]:
            vals = self.values
            kept = []
            for v in possible:
                vals[slot] = v
                if self.satisfies_clues(vals):
                    kept.append(v)
            possible = kept
        return possible

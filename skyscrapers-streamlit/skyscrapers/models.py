from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

Board = List[List[int]]  # board[row][col], 0 = empty, values 1..N


@dataclass(frozen=True)
class Position:
    x: int  # column
    y: int  # row

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Clues:
    """
    Visibility clues for an N x N puzzle, 4N values read clockwise:
      - top:    columns 0..N-1, looking down
      - right:  rows 0..N-1, looking left
      - bottom: columns N-1..0, looking up
      - left:   rows N-1..0, looking right
    0 means "no clue".
    """
    size: int
    values: Tuple[int, ...]

    @staticmethod
    def from_list(raw: Sequence[int]) -> "Clues":
        if len(raw) % 4 != 0:
            raise ValueError(f"Clue table must hold 4*N values, got {len(raw)}.")
        n = len(raw) // 4
        for v in raw:
            if v < 0 or v > n:
                raise ValueError(f"Invalid clue {v} (allowed: 0..{n}).")
        return Clues(size=n, values=tuple(int(v) for v in raw))

    def column_clues(self, col: int) -> Tuple[int, int]:
        """(from_top, from_bottom) for the given column."""
        n = self.size
        return self.values[col], self.values[3 * n - 1 - col]

    def row_clues(self, row: int) -> Tuple[int, int]:
        """(from_left, from_right) for the given row."""
        n = self.size
        return self.values[4 * n - 1 - row], self.values[n + row]

    def is_empty(self) -> bool:
        return not any(self.values)


def visible_count(values: Sequence[int]) -> int:
    """Number of skyscrapers seen looking along `values` from its start."""
    seen = 0
    tallest = 0
    for v in values:
        if v > tallest:
            tallest = v
            seen += 1
    return seen


def clues_for(size: int, raw: Optional[Sequence[int]]) -> Optional[Clues]:
    if raw is None:
        return None
    clues = Clues.from_list(raw)
    if clues.size != size:
        raise ValueError(f"Clue table is for a {clues.size}x{clues.size} grid, not {size}x{size}.")
    return clues

from __future__ import annotations

import logging
from typing import List, Optional

from .line import Line
from .models import Board, Clues, Position
from .ordering import ROW_MAJOR, VisitationPolicy, build_queue

log = logging.getLogger(__name__)


class Grid:
    """
    The N x N board, its row and column lines, and the queue of positions
    the search visits next.

    `board[y][x]` holds the value at Position(x, y), so `board[0]` is the
    first row. Row and column lines both read and write that same board,
    which keeps matrix, row and column consistent by construction.
    """

    def __init__(
        self,
        size: int,
        clues: Optional[Clues] = None,
        givens: Optional[Board] = None,
        policy: VisitationPolicy = ROW_MAJOR,
    ) -> None:
        self.size = size
        self.clues = clues
        self.policy = policy
        self.board: Board = [[0] * size for _ in range(size)]

        symbols = frozenset(range(1, size + 1))
        self.rows: List[Line] = []
        self.columns: List[Line] = []
        for y in range(size):
            line_clues = clues.row_clues(y) if clues else (0, 0)
            self.rows.append(Line(self.board, [(y, x) for x in range(size)], symbols, line_clues))
        for x in range(size):
            line_clues = clues.column_clues(x) if clues else (0, 0)
            self.columns.append(Line(self.board, [(y, x) for y in range(size)], symbols, line_clues))

        self.queue = build_queue(policy, size, clues)
        log.debug("Visitation order (%s): %s", policy.name, " ".join(str(p) for p in self.queue))

        if givens is not None:
            self._seed(givens)

    def _seed(self, givens: Board) -> None:
        n = self.size
        if len(givens) != n or any(len(row) != n for row in givens):
            raise ValueError(f"Givens must be a {n}x{n} board.")
        for y in range(n):
            for x in range(n):
                v = givens[y][x]
                if not isinstance(v, int) or v < 0 or v > n:
                    raise ValueError(f"Invalid given at ({x},{y}): {v} (allowed: 0..{n}).")
                if v:
                    self.set_value(Position(x, y), v)

    def value_at(self, p: Position) -> int:
        return self.board[p.y][p.x]

    def set_value(self, p: Position, value: int) -> None:
        """Write `value` at `p`; 0 clears the cell."""
        self.board[p.y][p.x] = value

    def clear_value(self, p: Position) -> None:
        self.set_value(p, 0)

    def requeue_front(self, p: Position) -> None:
        self.policy.requeue(self.queue, p)

    def next_position(self) -> Optional[Position]:
        """
        Next empty position in visitation order, or None once every queued
        position has been consumed (the grid is complete).
        """
        while self.queue:
            p = self.queue.popleft()
            if self.value_at(p) == 0:
                return p
        return None

    def candidates_at(self, p: Position) -> List[int]:
        """
        Intersection of the values allowed by the row and by the column of `p`.
        """
        possible = self.rows[p.y].candidates(p.x)
        if not possible:
            return possible
        allowed_by_column = set(self.columns[p.x].candidates(p.y))
        return [v for v in possible if v in allowed_by_column]

    def is_consistent(self) -> bool:
        """No repeated value on any line, and every complete line matches its clues."""
        for line in self.rows + self.columns:
            if line.has_duplicates():
                return False
            if line.is_complete() and not line.satisfies_clues():
                return False
        return True

    def snapshot(self) -> Board:
        return [row[:] for row in self.board]

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self.board)

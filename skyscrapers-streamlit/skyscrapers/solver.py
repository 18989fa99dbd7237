from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import MAX_SIZE
from .errors import NoSolutionError, SearchBudgetExceeded
from .grid import Grid
from .models import Board, Position, clues_for
from .ordering import ROW_MAJOR, VisitationPolicy

log = logging.getLogger(__name__)


class Outcome(enum.Enum):
    SUCCEEDED = "succeeded"  # target number of solutions reached
    EXHAUSTED = "exhausted"  # dead end, caller must try its next value
    ABORTED = "aborted"      # node budget consumed


@dataclass
class SearchStats:
    nodes: int = 0        # values written by the search
    backtracks: int = 0   # branches undone after a dead end
    solutions: int = 0


@dataclass
class SolveResult:
    board: Board                      # last accepted solution
    solutions: List[Board] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)


class Solver:
    """
    Depth-first backtracking over the grid's visitation queue.

    For a position, each allowed value is tried in ascending order and the
    search goes on with the next position. A complete grid is recorded as a
    solution; the search stops once `target` solutions have been recorded.
    A position with no working value is a dead end: the value and the next
    position are reset and the caller tries its own next value.
    """

    def __init__(
        self,
        size: int,
        target: int = 1,
        clues: Optional[Sequence[int]] = None,
        givens: Optional[Board] = None,
        policy: VisitationPolicy = ROW_MAJOR,
        max_nodes: Optional[int] = None,
    ) -> None:
        if size < 0 or size > MAX_SIZE:
            raise ValueError(f"Invalid size: {size} (allowed: 0..{MAX_SIZE}).")
        if target < 1:
            raise ValueError(f"Invalid number of solutions: {target} (must be at least 1).")
        if max_nodes is not None and max_nodes < 1:
            raise ValueError(f"Invalid node budget: {max_nodes} (must be at least 1).")

        self.size = size
        self.target = target
        self.max_nodes = max_nodes
        self.grid = Grid(size, clues=clues_for(size, clues), givens=givens, policy=policy)
        self.solutions: List[Board] = []
        self.stats = SearchStats()

    def run(self) -> SolveResult:
        grid = self.grid
        if not grid.is_consistent():
            log.warning("Givens contradict each other:\n%s", grid)
            raise NoSolutionError("No solution found: the given values contradict each other.")

        log.info(
            "Solving %dx%d grid (target=%d, order=%s, max_nodes=%s)",
            self.size, self.size, self.target, grid.policy.name, self.max_nodes,
        )
        first = grid.next_position()
        if first is None:
            self._accept()
            return self._result()

        outcome = self._iter(first)
        log.info(
            "Search %s: %d solution(s), %d nodes, %d backtracks",
            outcome.value, self.stats.solutions, self.stats.nodes, self.stats.backtracks,
        )
        if outcome is Outcome.ABORTED:
            raise SearchBudgetExceeded(self.max_nodes, self.stats.solutions)
        if outcome is Outcome.EXHAUSTED:
            raise NoSolutionError(
                f"No solution found (needed {self.target}, found {self.stats.solutions})."
            )
        return self._result()

    def _result(self) -> SolveResult:
        return SolveResult(board=self.solutions[-1], solutions=self.solutions, stats=self.stats)

    def _accept(self) -> None:
        self.solutions.append(self.grid.snapshot())
        self.stats.solutions += 1
        log.info("Solution %d:\n%s", self.stats.solutions, self.grid)

    def _budget_spent(self) -> bool:
        return self.max_nodes is not None and self.stats.nodes >= self.max_nodes

    def _iter(self, p: Position) -> Outcome:
        grid = self.grid
        for value in grid.candidates_at(p):
            if self._budget_spent():
                log.debug("Node budget of %d spent at %s", self.max_nodes, p)
                return Outcome.ABORTED
            self.stats.nodes += 1
            grid.set_value(p, value)

            nxt = grid.next_position()
            if nxt is None:
                self._accept()
                if self.stats.solutions == self.target:
                    return Outcome.SUCCEEDED
                grid.clear_value(p)
                continue

            outcome = self._iter(nxt)
            if outcome is Outcome.SUCCEEDED:
                return outcome

            # undo: nxt goes back in front of the queue, p gets its next value
            grid.requeue_front(nxt)
            grid.clear_value(p)
            if outcome is Outcome.ABORTED:
                return outcome
            self.stats.backtracks += 1
        return Outcome.EXHAUSTED


def solve(
    size: int,
    target: int = 1,
    clues: Optional[Sequence[int]] = None,
    givens: Optional[Board] = None,
    policy: VisitationPolicy = ROW_MAJOR,
    max_nodes: Optional[int] = None,
) -> Board:
    """
    Returns the `target`-th accepted solution.
    Raises NoSolutionError if the puzzle can't be solved.
    """
    result = Solver(size, target, clues=clues, givens=givens, policy=policy, max_nodes=max_nodes).run()
    return result.board

from __future__ import annotations


class SkyscrapersError(Exception):
    pass


class InvariantViolation(SkyscrapersError, AssertionError):
    """Raised when the solver's own bookkeeping is broken (never expected)."""


class NoSolutionError(SkyscrapersError):
    """The puzzle as configured has no solution."""


class SearchBudgetExceeded(SkyscrapersError):
    def __init__(self, max_nodes: int, solutions_found: int) -> None:
        super().__init__(
            f"Search stopped after {max_nodes} nodes ({solutions_found} solution(s) accepted so far)."
        )
        self.max_nodes = max_nodes
        self.solutions_found = solutions_found

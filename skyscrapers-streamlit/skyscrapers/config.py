from __future__ import annotations

import os
from typing import Dict, List, Optional

DEFAULT_SIZE = 7
DEFAULT_SOLUTIONS = 2

# recursion depth of the search is N*N
MAX_SIZE = 16
SUPPORTED_SIZES = list(range(1, 10))

# Clue tables of known 6x6 puzzles (clockwise from the top-left corner).
CLUE_PRESETS: Dict[str, List[int]] = {
    "6x6 #1": [
        3, 2, 2, 3, 2, 1,
        1, 2, 3, 3, 2, 2,
        5, 1, 2, 2, 4, 3,
        3, 2, 1, 2, 2, 4,
    ],
    "6x6 #2": [
        0, 0, 0, 2, 2, 0,
        0, 0, 0, 6, 3, 0,
        0, 4, 0, 0, 0, 0,
        4, 4, 0, 3, 0, 0,
    ],
    "6x6 #3": [
        0, 3, 0, 5, 3, 4,
        0, 0, 0, 0, 0, 1,
        0, 3, 0, 3, 2, 3,
        3, 2, 0, 3, 1, 0,
    ],
}


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from None


def resolve_size() -> int:
    return _env_int("SKYSCRAPERS_SIZE", DEFAULT_SIZE)


def resolve_solutions() -> int:
    return _env_int("SKYSCRAPERS_SOLUTIONS", DEFAULT_SOLUTIONS)


def resolve_max_nodes() -> Optional[int]:
    """Node budget for one search; unset means unbounded."""
    return _env_int("SKYSCRAPERS_MAX_NODES", None)


def resolve_log_level() -> str:
    return os.environ.get("SKYSCRAPERS_LOG_LEVEL", "INFO").upper()

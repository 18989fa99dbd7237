from __future__ import annotations

from typing import List, Optional

import pandas as pd

from .models import Board, Clues


def board_to_text(board: Board) -> str:
    return "\n".join(str(row) for row in board)


def board_to_csv(board: Board) -> bytes:
    lines = [",".join(str(v) for v in row) for row in board]
    return ("\n".join(lines) + "\n").encode("utf-8")


def board_to_frame(board: Board, clues: Optional[Clues] = None) -> pd.DataFrame:
    """
    One row per grid row. With clues, the row clues are added as the
    "◀"/"▶" columns so the board reads like the printed puzzle.
    """
    n = len(board)
    df = pd.DataFrame(board, columns=[f"c{x + 1}" for x in range(n)], index=[f"r{y + 1}" for y in range(n)])
    if clues is not None:
        df.insert(0, "▶", [str(clues.row_clues(y)[0] or "") for y in range(n)])
        df["◀"] = [str(clues.row_clues(y)[1] or "") for y in range(n)]
    return df


def solutions_frame(solutions: List[Board]) -> pd.DataFrame:
    """Long form: one row per (solution, row, col) cell."""
    rows = []
    for i, board in enumerate(solutions):
        for y, line in enumerate(board):
            for x, v in enumerate(line):
                rows.append({"solution": i + 1, "row": y + 1, "col": x + 1, "value": v})
    if not rows:
        return pd.DataFrame(columns=["solution", "row", "col", "value"])
    return pd.DataFrame(rows)


def format_duration(seconds: float) -> str:
    whole = int(seconds)
    ms = int(round((seconds - whole) * 1000))
    if ms == 1000:
        whole, ms = whole + 1, 0
    return f"{whole}s {ms}ms"

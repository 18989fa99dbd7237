from __future__ import annotations

import logging
import time
from typing import List, Optional

import streamlit as st

from skyscrapers.config import (
    CLUE_PRESETS,
    SUPPORTED_SIZES,
    resolve_log_level,
    resolve_max_nodes,
    resolve_size,
    resolve_solutions,
)
from skyscrapers.errors import NoSolutionError, SearchBudgetExceeded
from skyscrapers.models import Board, clues_for
from skyscrapers.ordering import POLICIES
from skyscrapers.render import (
    board_to_csv,
    board_to_frame,
    board_to_text,
    format_duration,
    solutions_frame,
)
from skyscrapers.solver import Solver

logging.basicConfig(level=resolve_log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
log = logging.getLogger("skyscrapers.app")

NO_CLUES = "(none: Latin square only)"


def render_clued_board(board: Board, clues: Optional[List[int]], title: str) -> None:
    """
    Render the board with the column clues above and below it.
    """
    n = len(board)
    parsed = clues_for(n, clues) if clues else None
    st.markdown(f"**{title}**")
    if parsed is not None:
        top = " ".join(str(parsed.column_clues(x)[0] or "·") for x in range(n))
        st.caption(f"▼ {top}")
    st.dataframe(board_to_frame(board, parsed), use_container_width=False)
    if parsed is not None:
        bottom = " ".join(str(parsed.column_clues(x)[1] or "·") for x in range(n))
        st.caption(f"▲ {bottom}")


st.set_page_config(page_title="Skyscrapers Solver", layout="wide")

st.title("Skyscrapers Solver")
st.caption(
    "Fills an N x N grid so every row and column holds 1..N exactly once. "
    "Pick a clue table to also enforce the skyscraper visibility clues."
)

# ---- Sidebar controls ----
with st.sidebar:
    st.header("Settings")

    presets = [NO_CLUES] + list(CLUE_PRESETS.keys())
    preset = st.selectbox("Clue table", presets)
    clues = CLUE_PRESETS.get(preset)

    if clues:
        size = len(clues) // 4
        st.caption(f"Grid size fixed by the clue table: {size}x{size}")
    else:
        default_size = resolve_size()
        index = SUPPORTED_SIZES.index(default_size) if default_size in SUPPORTED_SIZES else 0
        size = st.selectbox("Grid size", SUPPORTED_SIZES, index=index)

    # a clued puzzle has a single solution
    default_target = 1 if clues else resolve_solutions()
    target = st.number_input("Solutions to collect", min_value=1, max_value=1000, value=default_target, step=1)
    orders = list(POLICIES.keys())
    order = st.selectbox("Visitation order", orders, index=orders.index("clues-first" if clues else "row-major"))

    st.divider()
    default_budget = resolve_max_nodes() or 0
    max_nodes = st.number_input("Node budget (0 = unbounded)", min_value=0, value=default_budget, step=10_000)

solve_clicked = st.button("Solve", type="primary")

if solve_clicked:
    solver = Solver(
        int(size),
        int(target),
        clues=clues,
        policy=POLICIES[order],
        max_nodes=int(max_nodes) or None,
    )
    before = time.perf_counter()
    try:
        result = solver.run()
    except NoSolutionError as e:
        st.error(str(e))
        result = None
    except SearchBudgetExceeded as e:
        st.warning(str(e))
        result = None
    elapsed = time.perf_counter() - before
    log.info("Computation time: %s", format_duration(elapsed))

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Solutions", solver.stats.solutions)
    with c2:
        st.metric("Nodes", solver.stats.nodes)
    with c3:
        st.metric("Backtracks", solver.stats.backtracks)
    with c4:
        st.metric("Computation time", format_duration(elapsed))

    if result is not None:
        st.success(f"Solution {len(result.solutions)} found ✅")
        render_clued_board(result.board, clues, f"Solution #{len(result.solutions)}")
        st.code(board_to_text(result.board))

        st.download_button(
            "Download solution as CSV",
            data=board_to_csv(result.board),
            file_name=f"skyscrapers_solution_{size}x{size}.csv",
            mime="text/csv",
        )

    if solver.solutions:
        st.subheader("All accepted solutions")
        for i, board in enumerate(solver.solutions):
            with st.expander(f"Solution #{i + 1}", expanded=False):
                render_clued_board(board, clues, f"Solution #{i + 1}")
        st.dataframe(solutions_frame(solver.solutions), use_container_width=True, hide_index=True)
else:
    st.info("Choose the settings in the sidebar and click **Solve**.")

import json
from decimal import Decimal

import streamlit as st

# Local solver
from slack_simplex.console import check_lp, lp_from_dict
from slack_simplex.graph import plot_2d
from slack_simplex.simplex import Simplex, fmt_out, solve

st.set_page_config(page_title="Simplex Visualizer", layout="wide")
st.title("Simplex (Tableau) — Solve & Visualize")

# Sidebar options
with st.sidebar:
    st.header("Options")
    exact = st.checkbox("Exact arithmetic (fractions)", value=False)
    show_graph = st.checkbox("Show graph (2 variables only)", value=True)

# Default JSON template: maximize c^T x, A x <= b, x >= 0
default_json = {
    "c": [800, 600],
    "A": [[250, 450], [250, 50]],
    "b": [9000, 5000],
}

st.subheader("Model JSON")
json_text = st.text_area("Edit LP JSON here", json.dumps(default_json, indent=2), height=260)

col_run, col_reset = st.columns([1, 1])
run = col_run.button("Solve")
if col_reset.button("Reset to template"):
    st.rerun()


def labeled_tableau(lines, n, m):
    # header with variable names above the fixed-width grid
    names = Simplex(n, m).var_names + ["RHS"]
    header = "".join(f"{name:>10} " for name in names)
    return "\n".join([header] + lines)


if run:
    try:
        cfg = json.loads(json_text, parse_float=Decimal)
        lp = lp_from_dict(cfg)
        check_lp(lp)
    except ValueError as e:
        st.error(f"Invalid LP: {e}")
    else:
        res = solve(lp, exact=exact)
        n, m = len(lp.c), len(lp.A)

        # Single-column layout: Iterations -> Result -> Graph
        st.subheader("Iterations / Tableaux")
        for k, lines in enumerate(res.tableaux):
            title = f"Iteration {k}"
            if k < len(res.pivots):
                row, col = res.pivots[k]
                title += f" — pivot on row {row}, column {col + 1}"
            st.text(title)
            st.code(labeled_tableau(lines, n, m))
        st.subheader("Result")
        if res.status == "unbounded":
            st.warning("The problem is unbounded.")
        st.json({
            "status": res.status,
            "optimal_value": fmt_out(res.optimal_value) if res.optimal_value is not None else None,
            "solution": [fmt_out(v) for v in (res.solution or [])],
            "iterations": res.iterations,
        })
        if res.alternate_optimal:
            st.info("Infinite many optimal solutions along an edge (alternate optimal).")

        st.subheader("Graph")
        if show_graph and n == 2:
            fig = plot_2d(lp, res)
            if fig is not None:
                st.pyplot(fig)
            else:
                st.info("No feasible region to plot or numerical issue.")
        else:
            st.info("Graph available only for 2 variables.")

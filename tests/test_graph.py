from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from slack_simplex.cli import main  # noqa: E402
from slack_simplex.graph import bfs_points, plot_2d  # noqa: E402
from slack_simplex.simplex import LP, solve  # noqa: E402

EXAMPLES = Path(__file__).parent.parent / "examples"


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_bfs_points_of_scenario_b():
    pts = bfs_points([[1.0, 1.0], [1.0, 2.0]], [4.0, 5.0])
    rounded = sorted((round(x, 9), round(y, 9)) for x, y in pts)
    assert rounded == [(0.0, 0.0), (0.0, 2.5), (3.0, 1.0), (4.0, 0.0)]


def test_plot_2d_with_result():
    lp = LP(c=[2, 3], A=[[1, 1], [1, 2]], b=[4, 5])
    fig = plot_2d(lp, solve(lp))

    assert fig is not None
    labels = fig.axes[0].get_legend_handles_labels()[1]
    assert "simplex path" in labels
    assert "optimal (3, 1)" in labels


def test_plot_2d_alternate_optimum_edge():
    lp = LP(c=[1, 1], A=[[1, 1]], b=[4])
    fig = plot_2d(lp, solve(lp))

    labels = fig.axes[0].get_legend_handles_labels()[1]
    assert "optimal edge (∞ solutions)" in labels


def test_plot_2d_unbounded_has_no_optimum():
    lp = LP(c=[1, 1], A=[[1, -1]], b=[2])
    fig = plot_2d(lp, solve(lp))

    labels = fig.axes[0].get_legend_handles_labels()[1]
    assert not any(label.startswith("optimal") for label in labels)


def test_plot_2d_rejects_other_dimensions():
    assert plot_2d(LP(c=[1, 1, 1], A=[[1, 1, 1]], b=[3])) is None


def test_cli_graph_shows_figure(monkeypatch):
    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))

    assert main([str(EXAMPLES / "furniture.json"), "--no-verbose", "--graph"]) == 0
    assert shown == [True]

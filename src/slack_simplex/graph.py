"""Feasible region plot for two-variable models.

Draws every constraint line, shades {x >= 0, A x <= b}, marks the basic
feasible solutions (BFS), and when a result is given, the vertices the simplex
walked through plus the iso-profit line through the optimum.
"""

from itertools import combinations
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .simplex import LP, F, SimplexResult, fmt_out

Point = Tuple[float, float]


def _feasible(A: List[List[float]], b: List[float], p: Point) -> bool:
    x, y = p
    if x < -1e-9 or y < -1e-9:
        return False
    return all(row[0]*x + row[1]*y <= bi + 1e-9 for row, bi in zip(A, b))


def bfs_points(A: List[List[float]], b: List[float]) -> List[Point]:
    """Feasible intersections of constraint lines and the axes, deduplicated."""
    lines = [(row[0], row[1], bi) for row, bi in zip(A, b)]
    lines.append((1.0, 0.0, 0.0))  # x = 0
    lines.append((0.0, 1.0, 0.0))  # y = 0
    cand = []
    for (a1, a2, bi), (c1, c2, bj) in combinations(lines, 2):
        det = a1*c2 - a2*c1
        if abs(det) < 1e-12:
            continue
        x = (bi*c2 - a2*bj) / det
        y = (a1*bj - bi*c1) / det
        if _feasible(A, b, (x, y)):
            cand.append((x, y))
    uniq: List[Point] = []
    for (x, y) in cand:
        if not any(abs(x-x2) < 1e-7 and abs(y-y2) < 1e-7 for (x2, y2) in uniq):
            uniq.append((x, y))
    return uniq


def plot_2d(lp: LP, res: Optional[SimplexResult] = None):
    """Return a matplotlib Figure, or None when the model is not 2-D or nothing is feasible."""
    if len(lp.c) != 2:
        return None

    A = [[float(v) for v in row] for row in lp.A]
    b = [float(v) for v in lp.b]

    bfs = bfs_points(A, b)
    if not bfs:
        return None

    xs = [p[0] for p in bfs]
    ys = [p[1] for p in bfs]
    # an unbounded region has no finite extent; fall back to a unit-ish window
    xmax = max(xs)*1.2 + 1e-9 if max(xs) > 0 else 10.0
    ymax = max(ys)*1.2 + 1e-9 if max(ys) > 0 else 10.0
    xmin, ymin = 0.0, 0.0

    grid_x = np.linspace(xmin, xmax, 400)
    fig, ax = plt.subplots(figsize=(6, 6))

    color_cycle = plt.rcParams.get('axes.prop_cycle', None)
    colors = color_cycle.by_key()['color'] if color_cycle else [f'C{i}' for i in range(10)]
    for i, ((a1, a2), bi) in enumerate(zip(A, b)):
        c = colors[i % len(colors)]
        label = f"Constraint {i+1}: {a1:g}x1 + {a2:g}x2 <= {bi:g}"
        if abs(a2) < 1e-12:
            if abs(a1) > 1e-12:
                ax.axvline(bi/a1, color=c, alpha=0.7, label=label)
        else:
            ax.plot(grid_x, (bi - a1*grid_x)/a2, color=c, alpha=0.7, label=label)

    # Shade feasible region
    X, Y = np.meshgrid(np.linspace(xmin, xmax, 200), np.linspace(ymin, ymax, 200))
    mask = np.ones_like(X, dtype=bool)
    for row, bi in zip(A, b):
        mask &= row[0]*X + row[1]*Y <= bi + 1e-9
    ax.contourf(X, Y, mask, levels=[0.5, 1.5], colors=['#e8f7ff'], alpha=0.5)

    ax.scatter(xs, ys, s=25, color='#444444', alpha=0.9, label='BFS')

    if res is not None and res.path:
        px = [float(p[0]) for p in res.path]
        py = [float(p[1]) for p in res.path]
        ax.plot(px, py, color='#ff7f0e', marker='o', linewidth=1.5, label='simplex path')
        for k in range(1, len(px)):
            ax.annotate("", xy=(px[k], py[k]), xytext=(px[k-1], py[k-1]),
                        arrowprops=dict(arrowstyle="->", color='#ff7f0e'))

    if res is not None and res.status == 'optimal':
        xopt, yopt = float(res.solution[0]), float(res.solution[1])
        zopt = float(res.optimal_value)
        c1, c2 = float(F(lp.c[0])), float(F(lp.c[1]))
        if abs(c2) < 1e-12:
            if abs(c1) > 1e-12:
                ax.axvline(zopt / c1, color='red', linestyle='--', label='iso-profit')
        else:
            ax.plot(grid_x, (zopt - c1*grid_x)/c2, 'r--', label='iso-profit (through optimum)')
        ax.plot([xopt], [yopt], 'ro', label=f"optimal ({fmt_out(res.solution[0])}, {fmt_out(res.solution[1])})")
        ax.annotate(f"Z* = {fmt_out(res.optimal_value)}", (xopt, yopt), textcoords="offset points", xytext=(8, 8))

        # Highlight optimal edge if alternate optimal
        if res.alternate_optimal:
            on_edge = sorted((x, y) for (x, y) in bfs if abs(c1*x + c2*y - zopt) <= 1e-6)
            if len(on_edge) >= 2:
                (x1, y1), (x2, y2) = on_edge[0], on_edge[-1]
                ax.plot([x1, x2], [y1, y2], color='red', linewidth=3, alpha=0.6, label='optimal edge (∞ solutions)')

    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymin, ymax)
    ax.set_xlabel('x1')
    ax.set_ylabel('x2')
    ax.set_title('Constraints, Feasible Region, Iso-profit')
    ax.legend(loc='best', fontsize=8)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig

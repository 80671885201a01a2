"""
Graph builder for MathPanel.

Produces dark-themed matplotlib Figures:
  - equation : both sides a·x + b drawn as lines, the solution marked where
               they cross (parallel lines for "no solution", one line for
               "infinitely many")
  - histogram: distribution of a dataset with mean and median markers
"""

import io

import numpy as np
from matplotlib.figure import Figure

from solver.formatting import fmt_num
from solver.types import SolutionKind

# ── palette ────────────────────────────────────────────────────────────────
C_BG       = "#0f0f0f"
C_AX       = "#181818"
C_GRID     = "#252525"
C_TICK     = "#666666"
C_SPINE    = "#333333"
C_LINE1    = "#1a8cff"   # left side / bars
C_LINE2    = "#ff8c42"   # right side / median
C_DOT      = "#4caf50"   # solution dot / mean
C_TEXT     = "#cccccc"


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def _legend(ax):
    ax.legend(fontsize=8, facecolor="#1e1e1e", edgecolor=C_SPINE,
              labelcolor=C_TEXT)


def _form_label(side: str, form) -> str:
    sign = "+" if form.b >= 0 else "-"
    return f"{side}: {fmt_num(form.a)}x {sign} {fmt_num(abs(form.b))}"


def build_equation_figure(result) -> Figure:
    """Plot ``y = a·x + b`` for both sides of a solved equation."""
    left, right = result.left, result.right
    centre = result.solution if result.kind is SolutionKind.UNIQUE else 0.0
    x_range = np.linspace(centre - 5, centre + 5, 400)
    y_left = left.a * x_range + left.b
    y_right = right.a * x_range + right.b

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(x_range, y_left, color=C_LINE1, linewidth=2,
            label=_form_label("Left", left))
    ax.plot(x_range, y_right, color=C_LINE2, linewidth=2,
            linestyle="--" if result.kind is SolutionKind.INFINITE else "-",
            label=_form_label("Right", right))

    if result.kind is SolutionKind.NONE:
        ax.set_title("No Solution — Lines are parallel", color=C_TEXT, fontsize=10)
    elif result.kind is SolutionKind.INFINITE:
        ax.set_title("Infinite Solutions — Lines overlap", color=C_TEXT, fontsize=10)
    else:
        sol = result.solution
        y_at_sol = left.a * sol + left.b
        ax.scatter([sol], [y_at_sol], color=C_DOT, s=80, zorder=5,
                   label=f"Solution: x = {fmt_num(sol)}")
        ax.axvline(sol, color=C_DOT, linewidth=1, linestyle=":", alpha=0.6)
        ax.set_title(f"Solution: x = {fmt_num(sol)}", color=C_TEXT, fontsize=10)

    ax.set_xlabel("x", color=C_TEXT)
    ax.set_ylabel("value", color=C_TEXT)
    _legend(ax)
    fig.tight_layout(pad=1.2)
    return fig


def build_histogram_figure(values, report) -> Figure:
    """Histogram of *values* with the report's mean and median marked."""
    data = np.asarray(list(values), dtype=float)
    bins = min(30, max(1, int(np.ceil(np.sqrt(data.size)))))

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.hist(data, bins=bins, color=C_LINE1, edgecolor=C_BG, alpha=0.85)
    ax.axvline(report.mean, color=C_DOT, linewidth=2,
               label=f"Mean: {fmt_num(report.mean, 2)}")
    ax.axvline(report.median, color=C_LINE2, linewidth=2, linestyle="--",
               label=f"Median: {fmt_num(report.median, 2)}")
    ax.set_title(f"Distribution ({report.count} observations)",
                 color=C_TEXT, fontsize=10)
    ax.set_xlabel("value", color=C_TEXT)
    ax.set_ylabel("count", color=C_TEXT)
    _legend(ax)
    fig.tight_layout(pad=1.2)
    return fig


def figure_to_png(fig: Figure) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", facecolor=fig.get_facecolor())
    return buf.getvalue()

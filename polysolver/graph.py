"""
Graph builder for PolySolver.

Produces a dark-themed matplotlib Figure of the reduced polynomial
P(X) = 0 with its real roots marked.  Handles:
  - constant : a horizontal line (identity or contradiction)
  - linear   : a line crossing the axis once
  - quadratic: a parabola with 0, 1 or 2 crossings
Anything above degree 2 gets a text figure instead of a plot.
"""

import numpy as np

from polysolver.formatter import _fmt_num
from polysolver.numerical import coefficient_vector

# ── palette ────────────────────────────────────────────────────────────────
C_BG       = "#0f0f0f"
C_AX       = "#181818"
C_GRID     = "#252525"
C_TICK     = "#666666"
C_SPINE    = "#333333"
C_LINE1    = "#1a8cff"   # reduced polynomial
C_DOT      = "#4caf50"   # real root
C_VERTEX   = "#ff8c42"   # parabola vertex
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


def _text_figure(title: str, message: str):
    """A figure with no axes, only an explanatory message."""
    from matplotlib.figure import Figure

    fig = Figure(figsize=(7, 2.2), dpi=100)
    fig.patch.set_facecolor(C_BG)
    fig.text(0.5, 0.65, title, ha="center", va="center",
             color=C_TEXT, fontsize=12, fontweight="bold")
    fig.text(0.5, 0.35, message, ha="center", va="center",
             color=C_TICK, fontsize=9)
    return fig


def _x_window(result: dict) -> tuple[float, float]:
    """Centre the plot on the real roots (or the vertex) with some margin."""
    reduced = result["reduced"]
    centres = [r for r in result.get("roots", []) if not isinstance(r, complex)]
    if reduced.degree() == 2:
        centres.append(-reduced.coefficient(1) / (2 * reduced.coefficient(2)))
    if not centres:
        return -5.0, 5.0
    lo, hi = min(centres), max(centres)
    margin = max(5.0, (hi - lo) * 0.5)
    return lo - margin, hi + margin


def build_figure(result: dict):
    """
    Build and return a dark-themed matplotlib Figure for a solver *result*.
    Degrees above 2 produce a text figure; nothing is raised.
    """
    from matplotlib.figure import Figure

    reduced = result["reduced"]
    variable = result.get("given", {}).get("inputs", {}).get("variable", "X")
    degree = reduced.degree()

    if result.get("case") == "degree_too_high":
        return _text_figure(
            "Degree too high",
            f"{result['reduced_form']}  has degree {degree}; nothing to plot.",
        )

    lo, hi = _x_window(result)
    xs = np.linspace(lo, hi, 400)
    ys = np.polyval(np.array(coefficient_vector(reduced), dtype=float), xs)

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(xs, ys, color=C_LINE1, linewidth=2, label=f"P({variable}) = {reduced.format(variable)}")

    real_roots = [r for r in result.get("roots", []) if not isinstance(r, complex)]
    if real_roots:
        ax.scatter(real_roots, [0.0] * len(real_roots), color=C_DOT, s=80, zorder=5,
                   label=", ".join(f"{variable} = {_fmt_num(r)}" for r in real_roots))
    if degree == 2:
        vx = -reduced.coefficient(1) / (2 * reduced.coefficient(2))
        vy = float(np.polyval(np.array(coefficient_vector(reduced), dtype=float), vx))
        ax.scatter([vx], [vy], color=C_VERTEX, s=40, zorder=4, label="vertex")

    case = result.get("case")
    if case == "all_reals":
        ax.set_title("Identity — every number is a solution", color=C_TEXT, fontsize=10)
    elif case == "no_solution":
        ax.set_title("Contradiction — no solution", color=C_TEXT, fontsize=10)
    elif case == "complex_pair":
        ax.set_title("No real crossing — complex roots", color=C_TEXT, fontsize=10)
    else:
        ax.set_title(result.get("final_answer", "").replace("\n", ",  "),
                     color=C_TEXT, fontsize=10)

    ax.set_xlabel(variable, color=C_TEXT)
    ax.set_ylabel(f"P({variable})", color=C_TEXT)
    ax.legend(fontsize=8, facecolor="#1e1e1e", edgecolor=C_SPINE, labelcolor=C_TEXT)
    fig.tight_layout(pad=1.2)
    return fig


def save_figure(result: dict, path: str) -> str:
    """Render :func:`build_figure` to *path* and return the path."""
    fig = build_figure(result)
    fig.savefig(path, facecolor=fig.get_facecolor())
    return path

"""Frequency polygon charts.

A frequency polygon connects (distinct value, occurrence count) points in
ascending value order. Two renderings share the same axis rules:

  - render_frequency_polygon(): 1280x720 PNG via the matplotlib Agg canvas.
    Uses the object oriented API (no pyplot state), so calls from worker
    threads do not interfere with each other.
  - frequency_polygon_figure(): Plotly figure dict; write_frequency_polygon_html()
    writes it as a standalone HTML page.

Axis rules: x spans [min(value), max(value)], y spans [0, max(count) + 1].
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

import plotly.graph_objects as go
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from procstats.errors import ChartIOError, InvalidInputError
from procstats.utils.logging import get_logger

logger = get_logger(__name__)

WIDTH_PX = 1280
HEIGHT_PX = 720
DPI = 100
LINE_COLOR = "red"
BG_COLOR = "white"
DEFAULT_TITLE = "Frequency polygon"

PathLike = Union[str, Path]


def _sorted_points(points: Iterable[tuple[float, int]]) -> tuple[list[float], list[int]]:
    pts = sorted((float(v), int(c)) for v, c in points)
    if not pts:
        raise InvalidInputError("frequency polygon needs at least one point")
    xs = [v for v, _ in pts]
    ys = [c for _, c in pts]
    return xs, ys


def axis_ranges(
    points: Iterable[tuple[float, int]],
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Return ((x_min, x_max), (0, max_count + 1)) for the given points."""
    xs, ys = _sorted_points(points)
    return (xs[0], xs[-1]), (0.0, float(max(ys) + 1))


def _padded(lo: float, hi: float) -> tuple[float, float]:
    # A single distinct value gives a zero-width x-range; widen it so the
    # point sits in the middle of the canvas.
    if lo != hi:
        return lo, hi
    pad = abs(lo) * 0.05 or 0.5
    return lo - pad, hi + pad


def render_frequency_polygon(
    points: Iterable[tuple[float, int]],
    output_path: PathLike,
    *,
    title: str = DEFAULT_TITLE,
) -> Path:
    """Draw the frequency polygon and save it as a PNG.

    Args:
        points: (value, count) pairs, any order.
        output_path: Destination file. Its directory must already exist.
        title: Chart caption.

    Returns:
        The path written.

    Raises:
        InvalidInputError: If points is empty.
        ChartIOError: If the file cannot be written.
    """
    xs, ys = _sorted_points(points)
    (x_lo, x_hi), (y_lo, y_hi) = axis_ranges(zip(xs, ys))
    x_lo, x_hi = _padded(x_lo, x_hi)
    path = Path(output_path)

    try:
        fig = Figure(figsize=(WIDTH_PX / DPI, HEIGHT_PX / DPI), dpi=DPI, facecolor=BG_COLOR)
        FigureCanvasAgg(fig)
        ax = fig.add_subplot(1, 1, 1)
        ax.set_facecolor(BG_COLOR)
        ax.plot(xs, ys, color=LINE_COLOR, marker="o" if len(xs) == 1 else None)
        ax.set_xlim(x_lo, x_hi)
        ax.set_ylim(y_lo, y_hi)
        ax.set_xlabel("Value")
        ax.set_ylabel("Count")
        ax.set_title(title, fontsize=20)
        ax.grid(True, color="#cccccc")
        fig.savefig(path, dpi=DPI, facecolor=BG_COLOR, format="png")
    except OSError as e:
        raise ChartIOError(f"cannot write chart {str(path)!r}: {e}") from e
    except (ValueError, OverflowError) as e:
        # Tick placement fails when the value range exceeds float limits.
        raise ChartIOError(f"cannot draw chart {str(path)!r}: {e}") from e
    logger.info(f"wrote {path} ({len(xs)} points)")
    return path


def frequency_polygon_figure(
    points: Iterable[tuple[float, int]],
    *,
    title: str = DEFAULT_TITLE,
) -> dict:
    """Build the frequency polygon as a Plotly figure dict.

    Args:
        points: (value, count) pairs, any order.
        title: Chart caption.

    Returns:
        Plotly figure dict (go.Figure(...).to_dict()).
    """
    xs, ys = _sorted_points(points)
    (x_lo, x_hi), (y_lo, y_hi) = axis_ranges(zip(xs, ys))
    x_lo, x_hi = _padded(x_lo, x_hi)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=xs,
            y=ys,
            mode="lines+markers" if len(xs) == 1 else "lines",
            line=dict(color=LINE_COLOR),
            name="count",
        )
    )
    fig.update_layout(
        title=dict(text=title),
        width=WIDTH_PX,
        height=HEIGHT_PX,
        paper_bgcolor=BG_COLOR,
        plot_bgcolor=BG_COLOR,
        xaxis=dict(title="Value", range=[x_lo, x_hi], gridcolor="#cccccc"),
        yaxis=dict(title="Count", range=[y_lo, y_hi], gridcolor="#cccccc"),
        showlegend=False,
    )
    return fig.to_dict()


def write_frequency_polygon_html(
    points: Iterable[tuple[float, int]],
    output_path: PathLike,
    *,
    title: str = DEFAULT_TITLE,
) -> Path:
    """Write the Plotly frequency polygon as a standalone HTML file.

    Raises:
        ChartIOError: If the file cannot be written.
    """
    fig = go.Figure(frequency_polygon_figure(points, title=title))
    path = Path(output_path)
    try:
        fig.write_html(str(path), include_plotlyjs=True, full_html=True)
    except OSError as e:
        raise ChartIOError(f"cannot write chart {str(path)!r}: {e}") from e
    logger.info(f"wrote {path}")
    return path

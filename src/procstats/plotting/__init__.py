"""Chart rendering for frequency tables."""

from procstats.plotting.frequency_polygon import (
    axis_ranges,
    frequency_polygon_figure,
    render_frequency_polygon,
    write_frequency_polygon_html,
)

__all__ = [
    "axis_ranges",
    "frequency_polygon_figure",
    "render_frequency_polygon",
    "write_frequency_polygon_html",
]

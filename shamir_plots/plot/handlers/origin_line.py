"""Vertical reference line at x=0."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from shamir_plots.plot.chart_params import ChartParams
    from shamir_plots.plot.themes.base import Theme

from shamir_plots.plot.constants import ORIGIN_LINE_GID
from shamir_plots.plot.handlers.base import SeriesHandler, SeriesResult


class OriginLineHandler(SeriesHandler):
    """Draws a line at x=0 spanning the full y-range, without a legend entry."""

    def applies_to(self, params: "ChartParams") -> bool:
        return params.show_origin_line

    def plot(self, ax: "Axes", params: "ChartParams", theme: "Theme") -> SeriesResult:
        y_start, y_end = params.y_range
        ax.plot(
            [0.0, 0.0],
            [y_start, y_end],
            color=theme.reference_line_color,
            gid=ORIGIN_LINE_GID,
            zorder=1,
        )
        return SeriesResult()

    def get_description(self) -> str:
        return "Vertical reference line marking x=0, where the secret lives"

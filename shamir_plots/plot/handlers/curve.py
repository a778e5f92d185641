"""Curve handler: the sampled function drawn as a continuous line."""

from typing import TYPE_CHECKING

from matplotlib.lines import Line2D

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from shamir_plots.plot.chart_params import ChartParams
    from shamir_plots.plot.themes.base import Theme

from shamir_plots.plot.constants import CURVE_GID, CURVE_STEP, LEGEND_LINE_WIDTH_PX, px_to_pt
from shamir_plots.plot.handlers.base import SeriesHandler, SeriesResult
from shamir_plots.plot.sampling import sample_curve


class CurveHandler(SeriesHandler):
    """Samples f across the x-range at a fixed step and connects the samples."""

    def __init__(self, step: float = CURVE_STEP):
        self.step = step

    def plot(self, ax: "Axes", params: "ChartParams", theme: "Theme") -> SeriesResult:
        x_start, x_end = params.x_range
        xs, ys = sample_curve(params.function, x_start, x_end, self.step)

        ax.plot(xs, ys, color=theme.curve_color, linewidth=px_to_pt(1), gid=CURVE_GID, zorder=2)

        handle = Line2D(
            [],
            [],
            color=theme.curve_color,
            linewidth=px_to_pt(LEGEND_LINE_WIDTH_PX),
        )
        return SeriesResult(
            points=[(float(x), float(y)) for x, y in zip(xs, ys)],
            legend_label=params.function_label,
            legend_handle=handle,
        )

    def get_description(self) -> str:
        return "Continuous line through f sampled every 1e-3 across the x-range"

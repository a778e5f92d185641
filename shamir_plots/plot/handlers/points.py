"""Point handlers: shares on the curve and the secret at x=0.

Both draw filled circles annotated with their coordinates; they differ in
which points they draw, their color and their legend label.
"""

from typing import TYPE_CHECKING, List

import numpy as np
from matplotlib.lines import Line2D

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from shamir_plots.plot.chart_params import ChartParams, Point
    from shamir_plots.plot.themes.base import Theme

from shamir_plots.plot.constants import (
    ANNOTATION_FONT_PX,
    ANNOTATION_OFFSET_PX,
    POINT_RADIUS_PX,
    SECRET_GID,
    SHARE_GID_PREFIX,
    px_to_pt,
)
from shamir_plots.plot.handlers.base import SeriesHandler, SeriesResult


def format_coordinate(value: float) -> str:
    """Shortest single-precision representation, always with a decimal point."""
    return str(np.float32(value))


def format_point(point: "Point") -> str:
    x, y = point
    return f"({format_coordinate(x)}, {format_coordinate(y)})"


def _marker_handle(color: str) -> Line2D:
    return Line2D(
        [],
        [],
        linestyle="none",
        marker="o",
        markersize=px_to_pt(2 * POINT_RADIUS_PX),
        color=color,
        markeredgewidth=0,
    )


def draw_point(ax: "Axes", point: "Point", color: str, text_color: str, gid: str) -> None:
    """Filled circle plus its coordinate label below and to the right."""
    x, y = point
    ax.plot(
        [x],
        [y],
        linestyle="none",
        marker="o",
        markersize=px_to_pt(2 * POINT_RADIUS_PX),
        color=color,
        markeredgewidth=0,
        gid=gid,
        zorder=3,
    )
    dx, dy = ANNOTATION_OFFSET_PX
    ax.annotate(
        format_point(point),
        xy=(x, y),
        xytext=(dx, -dy),
        textcoords="offset pixels",
        ha="left",
        va="top",
        fontsize=px_to_pt(ANNOTATION_FONT_PX),
        color=text_color,
        gid=f"{gid}-label",
        zorder=4,
    )


class SharesHandler(SeriesHandler):
    """Draws (x, f(x)) for every sample x under a single "Shares" legend entry."""

    LABEL = "Shares"

    def applies_to(self, params: "ChartParams") -> bool:
        return len(params.sample_xs) > 0

    def plot(self, ax: "Axes", params: "ChartParams", theme: "Theme") -> SeriesResult:
        points: List["Point"] = params.share_points()
        for index, point in enumerate(points):
            draw_point(ax, point, theme.share_color, theme.text_color, f"{SHARE_GID_PREFIX}-{index}")
        return SeriesResult(
            points=points,
            legend_label=self.LABEL,
            legend_handle=_marker_handle(theme.share_color),
        )

    def get_description(self) -> str:
        return "Red filled circles at each sample point, labelled with their coordinates"


class SecretHandler(SeriesHandler):
    """Draws (0, f(0)) as a distinct "Secret" point."""

    LABEL = "Secret"

    def applies_to(self, params: "ChartParams") -> bool:
        return params.show_secret

    def plot(self, ax: "Axes", params: "ChartParams", theme: "Theme") -> SeriesResult:
        point = params.evaluate(0.0)
        draw_point(ax, point, theme.secret_color, theme.text_color, SECRET_GID)
        return SeriesResult(
            points=[point],
            legend_label=self.LABEL,
            legend_handle=_marker_handle(theme.secret_color),
        )

    def get_description(self) -> str:
        return "Green filled circle at x=0 marking the secret f(0)"

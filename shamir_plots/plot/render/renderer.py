"""Chart renderer implementation.

Main renderer class that coordinates the rendering pipeline.
Uses the Agg backend for headless rendering.
"""

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot

import matplotlib.pyplot as plt  # noqa: E402
from pathlib import Path  # noqa: E402
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Union  # noqa: E402

from matplotlib.ticker import LinearLocator, StrMethodFormatter  # noqa: E402

from shamir_plots.exceptions import RenderError  # noqa: E402
from shamir_plots.logger import Logger, session_logger  # noqa: E402
from shamir_plots.plot.chart_params import ChartParams  # noqa: E402
from shamir_plots.plot.constants import (  # noqa: E402
    ANNOTATION_FONT_PX,
    CAPTION_AREA_PX,
    CAPTION_FONT_PX,
    DPI,
    LEGEND_BACKGROUND_ALPHA,
    LEGEND_GID,
    LEGEND_GLYPH_PX,
    LEGEND_LOCATION,
    OUTER_MARGIN_PX,
    SVG_HASH_SALT,
    TICK_LABEL_FORMAT,
    X_LABEL_AREA_PX,
    Y_LABEL_AREA_PX,
    Y_TICK_COUNT,
    px_to_pt,
)
from shamir_plots.plot.handlers import SeriesResult, get_handler, list_handlers  # noqa: E402
from shamir_plots.plot.render.summary import RenderSummary  # noqa: E402
from shamir_plots.plot.themes import get_theme  # noqa: E402
from shamir_plots.plot.themes.base import Theme  # noqa: E402
from shamir_plots.plot.validation import ChartParamsValidator  # noqa: E402

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

# Text stays as <text> elements and ids are salted so output is reproducible.
# Tick labels keep the ASCII hyphen for negative values.
SVG_RC_PARAMS = {
    "axes.unicode_minus": False,
    "svg.fonttype": "none",
    "svg.hashsalt": SVG_HASH_SALT,
}


class ChartRenderer:
    """Renders a ChartParams request into an SVG document on disk."""

    def __init__(
        self,
        logger: Optional[Logger] = None,
        validator: Optional[ChartParamsValidator] = None,
    ):
        self.logger = logger or session_logger
        self.validator = validator or ChartParamsValidator()

    def render(self, destination: Union[str, Path], params: ChartParams) -> RenderSummary:
        """Render a chart to ``destination``.

        The destination's directory must already exist. A partially written
        file may remain if a late step fails.

        Args:
            destination: Path of the SVG file to write
            params: ChartParams describing the figure

        Returns:
            RenderSummary describing what was drawn

        Raises:
            RenderError: If any step of the pipeline fails
        """
        destination = Path(destination)
        fig = None

        self.logger.info(
            "Starting render",
            title=params.title,
            destination=str(destination),
            num_shares=len(params.sample_xs),
            show_secret=params.show_secret,
            theme=params.theme,
        )

        try:
            with open(destination, "wb") as handle:
                with matplotlib.rc_context(SVG_RC_PARAMS):
                    fig, ax = self._create_surface(params, destination)
                    self._build_coordinates(fig, ax, params, destination)
                    theme = get_theme(params.theme)
                    theme.apply(fig, ax)
                    self._configure_mesh(ax, params)
                    results = self._draw_series(ax, params, theme)
                    legend_labels = self._draw_legend(ax, results, theme)
                    fig.savefig(
                        handle,
                        format="svg",
                        transparent=True,
                        metadata={"Date": None},
                    )
            output_size = destination.stat().st_size

        except RenderError:
            raise
        except OSError as e:
            self.logger.error(
                "Cannot write document",
                destination=str(destination),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise RenderError(f"Cannot write document: {e}", destination) from e
        except Exception as e:
            self.logger.error(
                "Unexpected error during rendering",
                destination=str(destination),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise RenderError(f"Unexpected error during rendering: {e}", destination) from e
        finally:
            if fig is not None:
                plt.close(fig)

        curve = results.get("curve", SeriesResult())
        shares = results.get("shares", SeriesResult())
        secret = results.get("secret")

        self.logger.info(
            "Render completed",
            title=params.title,
            destination=str(destination),
            legend_entries=len(legend_labels),
            output_size_bytes=output_size,
        )
        return RenderSummary(
            destination=str(destination),
            title=params.title,
            legend_labels=legend_labels,
            curve_point_count=len(curve.points),
            share_points=shares.points,
            secret_point=secret.points[0] if secret else None,
            output_size_bytes=output_size,
        )

    def _create_surface(
        self, params: ChartParams, destination: Path
    ) -> Tuple["Figure", "Axes"]:
        width, height = params.dimensions
        if width <= 0 or height <= 0:
            raise RenderError(
                f"Canvas dimensions must be positive, got {width}x{height}", destination
            )
        fig, ax = plt.subplots(figsize=(width / DPI, height / DPI), dpi=DPI)
        fig.patch.set_alpha(0.0)
        return fig, ax

    def _build_coordinates(
        self, fig: "Figure", ax: "Axes", params: ChartParams, destination: Path
    ) -> None:
        """Map the data ranges onto the canvas, leaving room for labels and title."""
        result = self.validator.validate(params)
        if not result.is_valid:
            raise RenderError(f"Invalid chart parameters: {result.summary()}", destination)

        width, height = params.dimensions
        fig.subplots_adjust(
            left=(OUTER_MARGIN_PX + Y_LABEL_AREA_PX) / width,
            right=1 - OUTER_MARGIN_PX / width,
            bottom=(OUTER_MARGIN_PX + X_LABEL_AREA_PX) / height,
            top=1 - (OUTER_MARGIN_PX + CAPTION_AREA_PX) / height,
        )
        ax.set_xlim(*params.x_range)
        ax.set_ylim(*params.y_range)
        ax.set_title(
            params.title,
            fontsize=px_to_pt(CAPTION_FONT_PX),
            pad=px_to_pt(CAPTION_AREA_PX - CAPTION_FONT_PX),
        )

    def _configure_mesh(self, ax: "Axes", params: ChartParams) -> None:
        ax.grid(False)
        ax.xaxis.set_major_locator(LinearLocator(params.x_tick_count()))
        ax.yaxis.set_major_locator(LinearLocator(Y_TICK_COUNT))
        ax.xaxis.set_major_formatter(StrMethodFormatter(TICK_LABEL_FORMAT))
        ax.yaxis.set_major_formatter(StrMethodFormatter(TICK_LABEL_FORMAT))

    def _draw_series(
        self, ax: "Axes", params: ChartParams, theme: Theme
    ) -> Dict[str, SeriesResult]:
        results: Dict[str, SeriesResult] = {}
        for name in list_handlers():
            handler = get_handler(name)
            if not handler.applies_to(params):
                continue
            results[name] = handler.plot(ax, params, theme)
            self.logger.debug(
                "Series drawn",
                series=name,
                points=len(results[name].points),
            )
        return results

    def _draw_legend(
        self, ax: "Axes", results: Dict[str, SeriesResult], theme: Theme
    ) -> List[str]:
        entries = [
            (result.legend_handle, result.legend_label)
            for result in results.values()
            if result.legend_label is not None
        ]
        handles = [handle for handle, _ in entries]
        labels = [label for _, label in entries]

        legend = ax.legend(
            handles,
            labels,
            loc=LEGEND_LOCATION,
            frameon=True,
            fancybox=False,
            edgecolor=theme.legend_edge_color,
            facecolor=theme.legend_face_color,
            framealpha=LEGEND_BACKGROUND_ALPHA,
            labelcolor=theme.text_color,
            fontsize=px_to_pt(ANNOTATION_FONT_PX),
            handlelength=LEGEND_GLYPH_PX / ANNOTATION_FONT_PX,
        )
        legend.set_gid(LEGEND_GID)
        return labels

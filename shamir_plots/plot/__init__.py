"""Plot domain package for shamir-plots.

Provides the chart rendering pipeline: request model, series handlers,
themes, validation and the SVG renderer.
"""

from shamir_plots.plot.chart_params import ChartParams
from shamir_plots.plot.render.renderer import ChartRenderer
from shamir_plots.plot.render.summary import RenderSummary
from shamir_plots.plot.validation.validator import ChartParamsValidator

__all__ = [
    "ChartParams",
    "ChartRenderer",
    "RenderSummary",
    "ChartParamsValidator",
]

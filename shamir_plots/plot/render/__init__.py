"""Chart rendering pipeline."""

from shamir_plots.plot.render.renderer import ChartRenderer
from shamir_plots.plot.render.summary import RenderSummary

__all__ = ["ChartRenderer", "RenderSummary"]

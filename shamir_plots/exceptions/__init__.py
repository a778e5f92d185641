"""Custom exceptions for the chart rendering pipeline and figure catalogue."""

from shamir_plots.exceptions.base import ShamirPlotsError, ConfigurationError
from shamir_plots.exceptions.render import RenderError, BatchRenderError
from shamir_plots.exceptions.figure import FigureNotFoundError

__all__ = [
    "ShamirPlotsError",
    "ConfigurationError",
    "RenderError",
    "BatchRenderError",
    "FigureNotFoundError",
]

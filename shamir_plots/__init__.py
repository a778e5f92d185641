"""shamir-plots: SVG illustrations of polynomial interpolation and Shamir's Secret Sharing."""

from shamir_plots.figures import FIGURES, FigureSpec, get_figure, list_figures, render_figures
from shamir_plots.plot import ChartParams, ChartRenderer, RenderSummary
from shamir_plots.polynomial import Polynomial

__version__ = "0.1.0"

__all__ = [
    "FIGURES",
    "FigureSpec",
    "ChartParams",
    "ChartRenderer",
    "RenderSummary",
    "Polynomial",
    "get_figure",
    "list_figures",
    "render_figures",
]

"""Figure not found exception."""
from typing import List, Optional

from shamir_plots.exceptions.base import ShamirPlotsError


class FigureNotFoundError(ShamirPlotsError):
    """Raised when a figure name is not in the catalogue."""

    def __init__(self, name: str, available_figures: Optional[List[str]] = None):
        """
        Args:
            name: Name of the figure that was not found
            available_figures: Names of the figures that do exist
        """
        self.name = name
        available_text = ""
        if available_figures:
            figure_list = ", ".join(available_figures)
            available_text = f" Available figures: {figure_list}."

        message = f"Figure '{name}' not found.{available_text}"
        super().__init__(message)

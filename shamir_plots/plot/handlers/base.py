"""Base class for chart series handlers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from matplotlib.artist import Artist
    from matplotlib.axes import Axes
    from shamir_plots.plot.chart_params import ChartParams
    from shamir_plots.plot.themes.base import Theme


@dataclass
class SeriesResult:
    """What a handler drew: its data points and an optional legend entry."""

    points: List[Tuple[float, float]] = field(default_factory=list)
    legend_label: Optional[str] = None
    legend_handle: Optional["Artist"] = None


class SeriesHandler(ABC):
    """Draws one kind of series onto the chart axes."""

    def applies_to(self, params: "ChartParams") -> bool:
        """Whether this series is part of the given chart."""
        return True

    @abstractmethod
    def plot(self, ax: "Axes", params: "ChartParams", theme: "Theme") -> SeriesResult:
        """Draw the series on the given axes."""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get a human-readable description of the handler."""
        pass

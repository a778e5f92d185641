"""Base class for chart themes."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


class Theme(ABC):
    """Colors and text styling for one visual variant of the charts.

    Subclasses set the color attributes in ``__init__``; ``apply`` styles
    the figure and axes before anything is drawn.
    """

    name: str = ""

    background_color: str
    text_color: str
    curve_color: str
    share_color: str
    secret_color: str
    reference_line_color: str
    legend_edge_color: str
    legend_face_color: str
    font_family: str

    def apply(self, fig: "Figure", ax: "Axes") -> None:
        fig.patch.set_facecolor(self.background_color)
        ax.set_facecolor(self.background_color)
        ax.title.set_color(self.text_color)
        ax.title.set_fontfamily(self.font_family)
        ax.tick_params(colors=self.text_color, labelfontfamily=self.font_family)
        for spine in ax.spines.values():
            spine.set_edgecolor(self.text_color)

    def get_config(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "background_color": self.background_color,
            "text_color": self.text_color,
            "curve_color": self.curve_color,
            "share_color": self.share_color,
            "secret_color": self.secret_color,
            "reference_line_color": self.reference_line_color,
            "legend_edge_color": self.legend_edge_color,
            "legend_face_color": self.legend_face_color,
            "font_family": self.font_family,
        }

    @abstractmethod
    def get_description(self) -> str:
        """Get a human-readable description of the theme."""
        pass

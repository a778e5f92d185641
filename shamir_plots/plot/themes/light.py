"""Light theme: transparent canvas with pure primary accent colors."""

from shamir_plots.plot.constants import FONT_FAMILY
from shamir_plots.plot.themes.base import Theme


class LightTheme(Theme):
    """Black text on a transparent canvas; blue curve, red shares, green secret."""

    name = "light"

    def __init__(self):
        self.background_color = "none"
        self.text_color = "#000000"
        self.curve_color = "#0000FF"
        self.share_color = "#FF0000"
        self.secret_color = "#00FF00"
        self.reference_line_color = "#000000"
        self.legend_edge_color = "#000000"
        self.legend_face_color = "#FFFFFF"
        self.font_family = FONT_FAMILY

    def get_description(self) -> str:
        return (
            "Transparent background with black axes and text, for pages and "
            "light slide decks"
        )

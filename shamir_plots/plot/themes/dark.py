"""Dark theme with muted colors for dark slide decks."""

from shamir_plots.plot.constants import FONT_FAMILY
from shamir_plots.plot.themes.base import Theme


class DarkTheme(Theme):
    """Light text on a transparent canvas with muted accents."""

    name = "dark"

    def __init__(self):
        self.background_color = "none"
        self.text_color = "#E0E0E0"
        self.curve_color = "#5DADE2"  # light blue
        self.share_color = "#EC7063"  # red
        self.secret_color = "#58D68D"  # green
        self.reference_line_color = "#E0E0E0"
        self.legend_edge_color = "#E0E0E0"
        self.legend_face_color = "#1E1E1E"
        self.font_family = FONT_FAMILY

    def get_description(self) -> str:
        return (
            "Light text and muted accents on a transparent canvas, "
            "for presentations with dark backgrounds"
        )

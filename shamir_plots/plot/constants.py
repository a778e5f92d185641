"""Geometry and typography constants shared by the rendering pipeline.

Pixel values assume ``DPI`` dots per inch; matplotlib sizes in points are
derived with ``px_to_pt``. The SVG backend writes 72 units per inch, so at
72 DPI one pixel is one SVG unit.
"""

DPI = 72
DEFAULT_DIMENSIONS = (640, 480)

# Sampling step for the plotted curve
CURVE_STEP = 1e-3

# Layout, in pixels
OUTER_MARGIN_PX = 5
X_LABEL_AREA_PX = 35
Y_LABEL_AREA_PX = 40
CAPTION_FONT_PX = 32
CAPTION_AREA_PX = 45

# Ticks
Y_TICK_COUNT = 5
FALLBACK_X_TICK_COUNT = 5
TICK_LABEL_FORMAT = "{x:.0f}"

# Points and their coordinate annotations
POINT_RADIUS_PX = 5
ANNOTATION_FONT_PX = 15
# (right, down) from the point centre
ANNOTATION_OFFSET_PX = (1, 10)

# Legend
LEGEND_LOCATION = "lower right"
LEGEND_GLYPH_PX = 10
LEGEND_LINE_WIDTH_PX = 2
LEGEND_BACKGROUND_ALPHA = 0.8

FONT_FAMILY = "sans-serif"

# Fixed salt keeps SVG element ids stable between runs
SVG_HASH_SALT = "shamir-plots"

# Stable ids of the SVG groups written for each element
CURVE_GID = "curve"
SHARE_GID_PREFIX = "share"
SECRET_GID = "secret"
ORIGIN_LINE_GID = "origin-line"
LEGEND_GID = "legend"


def px_to_pt(pixels: float) -> float:
    """Convert pixels at ``DPI`` to typographic points."""
    return pixels * 72.0 / DPI

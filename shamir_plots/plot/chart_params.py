"""Chart rendering parameters.

Defines the data model for a single render request.
"""

from typing import Callable, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from shamir_plots.plot.constants import DEFAULT_DIMENSIONS, FALLBACK_X_TICK_COUNT

Point = Tuple[float, float]


def to_f32(value: float) -> float:
    """Round a value to single precision, returned as a Python float."""
    return float(np.float32(value))


class ChartParams(BaseModel):
    """Everything needed to draw one figure.

    Range and dimension invariants are deliberately not enforced here; the
    renderer checks them when it builds the coordinate system so a bad
    request surfaces as a ``RenderError``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str
    function: Callable[[float], float]
    function_label: str

    # Data-space ranges as (start, end)
    x_range: Tuple[float, float]
    y_range: Tuple[float, float]

    sample_xs: List[float] = Field(default_factory=list)
    show_secret: bool = False
    show_origin_line: bool = True

    width: int = DEFAULT_DIMENSIONS[0]
    height: int = DEFAULT_DIMENSIONS[1]
    theme: str = "light"

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def evaluate(self, x: float) -> Point:
        """Return ``(x, f(x))`` in single precision."""
        x32 = to_f32(x)
        return (x32, to_f32(self.function(x32)))

    def share_points(self) -> List[Point]:
        return [self.evaluate(x) for x in self.sample_xs]

    def secret_point(self) -> Optional[Point]:
        if not self.show_secret:
            return None
        return self.evaluate(0.0)

    def x_tick_count(self) -> int:
        """One x tick per highlighted point.

        Falls back to a fixed count when nothing is highlighted.
        """
        count = len(self.sample_xs) + (1 if self.show_secret else 0)
        return count or FALLBACK_X_TICK_COUNT

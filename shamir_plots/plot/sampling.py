"""Uniform curve sampling in single precision."""

from typing import Callable, Tuple

import numpy as np

from shamir_plots.plot.constants import CURVE_STEP


def sample_range(start: float, end: float, step: float = CURVE_STEP) -> np.ndarray:
    """Return ``start, start + step, ...`` up to and including ``end``.

    Values are float32. An empty array is returned when ``end <= start``.
    """
    if step <= 0:
        raise ValueError(f"Sampling step must be positive, got {step}")

    start32 = np.float32(start)
    end32 = np.float32(end)
    step32 = np.float32(step)
    if not end32 > start32:
        return np.empty(0, dtype=np.float32)

    # One extra sample absorbs floor() rounding; the mask trims the overshoot
    count = int(np.floor((float(end32) - float(start32)) / float(step32))) + 2
    xs = start32 + np.arange(count, dtype=np.float32) * step32
    return xs[xs <= end32]


def sample_curve(
    function: Callable[[float], float],
    start: float,
    end: float,
    step: float = CURVE_STEP,
) -> Tuple[np.ndarray, np.ndarray]:
    """Evaluate ``function`` over ``sample_range`` and return ``(xs, ys)``."""
    xs = sample_range(start, end, step)
    ys = np.fromiter((function(float(x)) for x in xs), dtype=np.float32, count=len(xs))
    return xs, ys

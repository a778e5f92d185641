"""Tests for curve sampling -- float32 steps across a range."""

import numpy as np
import pytest

from shamir_plots.plot.constants import CURVE_STEP
from shamir_plots.plot.sampling import sample_curve, sample_range


class TestSampleRange:
    def test_starts_at_range_start(self):
        xs = sample_range(-2.5, 2.5)
        assert xs[0] == np.float32(-2.5)

    def test_strictly_increasing(self):
        xs = sample_range(-2.7, 3.0)
        assert np.all(np.diff(xs) > 0)

    def test_last_point_within_range(self):
        xs = sample_range(2.5, 4.5)
        assert xs[-1] <= np.float32(4.5)
        assert np.float32(4.5) - xs[-1] < CURVE_STEP + 1e-6

    def test_point_count(self):
        for start, end in [(2.5, 4.5), (-5.1, 5.1), (-2.1, 2.4), (-1.1, 3.4)]:
            xs = sample_range(start, end)
            expected = (end - start) / CURVE_STEP + 1
            assert abs(len(xs) - expected) <= 1, (start, end, len(xs))

    def test_step_is_uniform(self):
        xs = sample_range(-1.0, 1.0)
        np.testing.assert_allclose(np.diff(xs), CURVE_STEP, atol=1e-6)

    def test_single_precision(self):
        assert sample_range(0.0, 1.0).dtype == np.float32

    def test_degenerate_range_is_empty(self):
        assert len(sample_range(1.0, 1.0)) == 0

    def test_inverted_range_is_empty(self):
        assert len(sample_range(2.0, 1.0)) == 0

    def test_non_positive_step_raises(self):
        with pytest.raises(ValueError):
            sample_range(0.0, 1.0, step=0.0)


class TestSampleCurve:
    def test_values_follow_function(self):
        xs, ys = sample_curve(lambda x: x**2, -1.0, 1.0)
        assert len(xs) == len(ys)
        np.testing.assert_allclose(ys, xs.astype(np.float64) ** 2, rtol=1e-5, atol=1e-6)

    def test_values_are_float32(self):
        _, ys = sample_curve(lambda x: 3.0 * x, 0.0, 1.0)
        assert ys.dtype == np.float32

    def test_coarse_step(self):
        xs, ys = sample_curve(lambda x: x, 0.0, 1.0, step=0.25)
        np.testing.assert_allclose(xs, [0.0, 0.25, 0.5, 0.75, 1.0])
        np.testing.assert_allclose(ys, xs)

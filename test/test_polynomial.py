"""Tests for Polynomial -- evaluation and legend labels."""

import numpy as np
import pytest

from shamir_plots.polynomial import Polynomial, monomial


class TestPolynomialEvaluation:
    """Horner evaluation on scalars and arrays."""

    def test_constant_term_is_value_at_zero(self):
        assert Polynomial([2, -3, 2, 5])(0.0) == 5.0

    def test_evaluates_cubic(self):
        p = Polynomial([2, -3, 2, 5])
        # 2*8 - 3*4 + 2*2 + 5
        assert p(2.0) == 13.0
        assert p(-1.0) == -2.0

    def test_evaluates_numpy_array(self):
        xs = np.array([-2.0, 0.0, 3.0])
        np.testing.assert_allclose(monomial(2)(xs), [4.0, 0.0, 9.0])

    def test_leading_zeros_are_stripped(self):
        p = Polynomial([0, 0, 1, 0])
        assert p.degree == 1
        assert p.coefficients == (1.0, 0.0)

    def test_empty_coefficients_raise(self):
        with pytest.raises(ValueError):
            Polynomial([])

    def test_equality_and_hash(self):
        assert Polynomial([1, 0]) == monomial(1)
        assert hash(Polynomial([1, 0])) == hash(monomial(1))
        assert Polynomial([1, 0]) != Polynomial([1, 1])


class TestPolynomialLabel:
    """Superscript labels used in chart legends."""

    def test_identity(self):
        assert monomial(1).label() == "x"

    def test_square_and_cube(self):
        assert monomial(2).label() == "x²"
        assert monomial(3).label() == "x³"

    def test_mixed_signs(self):
        assert Polynomial([2, -3, 2, 5]).label() == "2x³ - 3x² + 2x + 5"

    def test_negative_leading_term(self):
        assert Polynomial([-1, 0, 1]).label() == "-x² + 1"

    def test_fractional_coefficient(self):
        assert Polynomial([0.5, 0]).label() == "0.5x"

    def test_zero_polynomial(self):
        assert Polynomial([0, 0]).label() == "0"

    def test_custom_variable(self):
        assert Polynomial([1, -1]).label(variable="t") == "t - 1"

    def test_high_degree_superscript(self):
        assert monomial(12).label() == "x¹²"

    def test_negative_degree_raises(self):
        with pytest.raises(ValueError):
            monomial(-1)

"""Coefficient-backed polynomials used as chart functions.

Any callable taking one number and returning one number can be plotted;
``Polynomial`` is the one the figure catalogue uses because it can also
describe itself for the legend.
"""

from typing import Iterable, Tuple

_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


class Polynomial:
    """Polynomial with coefficients ordered from the highest degree down.

    Example:
        >>> p = Polynomial([2, -3, 2, 5])
        >>> p(0)
        5.0
        >>> p.label()
        '2x³ - 3x² + 2x + 5'
    """

    def __init__(self, coefficients: Iterable[float]):
        coefficients = [float(c) for c in coefficients]
        if not coefficients:
            raise ValueError("A polynomial needs at least one coefficient")
        # Leading zeros do not change the function but would inflate the degree
        while len(coefficients) > 1 and coefficients[0] == 0:
            coefficients.pop(0)
        self._coefficients: Tuple[float, ...] = tuple(coefficients)

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def __call__(self, x):
        """Evaluate with Horner's rule; accepts scalars or numpy arrays."""
        result = x * 0 + self._coefficients[0]
        for coefficient in self._coefficients[1:]:
            result = result * x + coefficient
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r})"

    def label(self, variable: str = "x") -> str:
        """Human-readable form with superscript exponents, e.g. ``x³ - 1``."""
        terms = []
        for power, coefficient in zip(range(self.degree, -1, -1), self._coefficients):
            if coefficient == 0:
                continue
            magnitude = abs(coefficient)
            if power == 0:
                body = _format_number(magnitude)
            else:
                body = "" if magnitude == 1 else _format_number(magnitude)
                body += variable
                if power > 1:
                    body += str(power).translate(_SUPERSCRIPTS)
            terms.append((coefficient < 0, body))

        if not terms:
            return "0"

        negative, body = terms[0]
        parts = [f"-{body}" if negative else body]
        for negative, body in terms[1:]:
            parts.append(f"- {body}" if negative else f"+ {body}")
        return " ".join(parts)


def monomial(degree: int) -> Polynomial:
    """``x`` raised to ``degree``."""
    if degree < 0:
        raise ValueError(f"Degree must be non-negative, got {degree}")
    return Polynomial([1.0] + [0.0] * degree)

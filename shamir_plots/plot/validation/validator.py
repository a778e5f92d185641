"""Chart parameter validator.

Checks the invariants the coordinate system needs and reports each
problem with the offending field, the expected value and suggestions.
"""

import math
from typing import List

from shamir_plots.plot.chart_params import ChartParams, to_f32
from shamir_plots.plot.themes import list_themes


class ValidationError:
    """Structured validation error with suggestions."""

    def __init__(
        self,
        field: str,
        message: str,
        received_value=None,
        expected: str = "",
        suggestions: list[str] | None = None,
    ):
        self.field = field
        self.message = message
        self.received_value = received_value
        self.expected = expected
        self.suggestions = suggestions or []

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "message": self.message,
            "received_value": str(self.received_value) if self.received_value is not None else None,
            "expected": self.expected,
            "suggestions": self.suggestions,
        }


class ValidationResult:
    """Result of chart parameter validation."""

    def __init__(self, is_valid: bool, errors: List[ValidationError] | None = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def summary(self) -> str:
        """All errors on one line, with expected values and suggestions."""
        parts = []
        for e in self.errors:
            text = f"{e.field}: {e.message}"
            if e.expected:
                text += f" (expected: {e.expected})"
            if e.suggestions:
                text += f" [{'; '.join(e.suggestions)}]"
            parts.append(text)
        return "; ".join(parts)


class ChartParamsValidator:
    """Validates ChartParams before a coordinate system is built."""

    def __init__(self):
        self.valid_themes = list_themes()

    def validate(self, params: ChartParams) -> ValidationResult:
        """Validate chart parameters and return structured validation results."""
        errors: List[ValidationError] = []

        errors.extend(self._validate_range("x_range", params.x_range))
        errors.extend(self._validate_range("y_range", params.y_range))
        errors.extend(self._validate_dimensions(params))
        errors.extend(self._validate_samples(params))
        errors.extend(self._validate_theme(params))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    def _validate_range(self, field: str, value: tuple[float, float]) -> List[ValidationError]:
        # Coordinates are single precision; bounds that collapse there are degenerate
        start, end = value
        start32, end32 = to_f32(start), to_f32(end)
        if not (math.isfinite(start32) and math.isfinite(end32)):
            return [
                ValidationError(
                    field=field,
                    message="Range bounds must be finite numbers",
                    received_value=value,
                    expected="(start, end) with finite start < end",
                )
            ]
        if start32 == end32:
            return [
                ValidationError(
                    field=field,
                    message=(
                        f"Range is degenerate: start {start} and end {end} "
                        "are equal in single precision"
                    ),
                    received_value=value,
                    expected="start < end",
                    suggestions=["Widen the range around the points you want to show"],
                )
            ]
        if start32 > end32:
            return [
                ValidationError(
                    field=field,
                    message=f"Range start {start} is greater than end {end}",
                    received_value=value,
                    expected="start < end",
                    suggestions=[f"Swap the bounds: ({end}, {start})"],
                )
            ]
        return []

    def _validate_dimensions(self, params: ChartParams) -> List[ValidationError]:
        errors = []
        for field in ("width", "height"):
            value = getattr(params, field)
            if value <= 0:
                errors.append(
                    ValidationError(
                        field=field,
                        message=f"Canvas {field} must be positive",
                        received_value=value,
                        expected="Positive number of pixels (typically 640x480)",
                    )
                )
        return errors

    def _validate_samples(self, params: ChartParams) -> List[ValidationError]:
        errors = []
        for i, x in enumerate(params.sample_xs):
            if not math.isfinite(x):
                errors.append(
                    ValidationError(
                        field=f"sample_xs[{i}]",
                        message="Sample x-coordinates must be finite",
                        received_value=x,
                        expected="Finite number",
                    )
                )
        return errors

    def _validate_theme(self, params: ChartParams) -> List[ValidationError]:
        errors = []
        if params.theme.lower() not in self.valid_themes:
            errors.append(
                ValidationError(
                    field="theme",
                    message=f"Invalid theme '{params.theme}'",
                    received_value=params.theme,
                    expected=f"One of: {', '.join(self.valid_themes)}",
                    suggestions=[
                        "Use 'light' for pages and light slides",
                        "Use 'dark' for dark slides",
                    ],
                )
            )
        return errors

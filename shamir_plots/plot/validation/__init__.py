"""Chart parameter validation."""

from shamir_plots.plot.validation.validator import (
    ChartParamsValidator,
    ValidationError,
    ValidationResult,
)

__all__ = ["ChartParamsValidator", "ValidationError", "ValidationResult"]

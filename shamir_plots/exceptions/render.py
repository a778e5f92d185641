"""Rendering exceptions."""

from pathlib import Path
from typing import Dict, Optional, Union

from shamir_plots.exceptions.base import ShamirPlotsError


class RenderError(ShamirPlotsError):
    """Raised when any step of a chart render fails.

    The underlying cause, if any, is chained as ``__cause__``.
    """

    def __init__(self, message: str, destination: Optional[Union[str, Path]] = None):
        self.destination = str(destination) if destination is not None else None
        if self.destination:
            message = f"{message} (destination: {self.destination})"
        super().__init__(message)


class BatchRenderError(ShamirPlotsError):
    """Raised after a keep-going batch in which one or more figures failed."""

    def __init__(self, failures: Dict[str, RenderError]):
        self.failures = failures
        names = ", ".join(failures)
        super().__init__(f"{len(failures)} figure(s) failed to render: {names}")

"""Pytest configuration and fixtures

Provides shared fixtures for all tests: temporary output directories,
a recording logger, and a ready-made render request.
"""

import sys
from pathlib import Path
from typing import Any, List, Tuple

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir_plots.logger import Logger  # noqa: E402
from shamir_plots.plot.chart_params import ChartParams  # noqa: E402
from shamir_plots.polynomial import monomial  # noqa: E402


class RecordingLogger(Logger):
    """Logger that keeps (level, message, context) tuples for assertions."""

    def __init__(self):
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, kwargs: dict[str, Any]) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("CRITICAL", message, kwargs)

    def messages(self, level: str | None = None) -> List[str]:
        return [m for lvl, m, _ in self.records if level is None or lvl == level]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """An existing, empty directory for rendered documents."""
    directory = tmp_path / "plots"
    directory.mkdir()
    return directory


@pytest.fixture
def cubic_params() -> ChartParams:
    return ChartParams(
        title="Four Points are Uniquely Determined by a Cubic",
        function=monomial(3),
        function_label="x³",
        x_range=(-2.5, 2.5),
        y_range=(-20.0, 20.0),
        sample_xs=[-2.0, -1.0, 1.0, 2.0],
        show_secret=False,
    )

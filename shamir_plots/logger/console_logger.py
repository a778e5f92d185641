"""Console logger writing formatted records to stderr."""

import logging
import sys

from shamir_plots.logger.default_logger import DefaultLogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(DefaultLogger):
    """DefaultLogger with a single stderr handler attached."""

    def __init__(self, name: str = "shamir_plots", level: int = logging.INFO):
        super().__init__(name=name, level=level)
        # getLogger returns a shared instance; attach the handler only once
        if not any(getattr(h, "_shamir_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._shamir_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
        self._logger.propagate = False

"""Logger implementation backed by the standard logging module."""

import logging
from typing import Any, Optional

from shamir_plots.logger.base import Logger


def format_context(message: str, kwargs: dict[str, Any]) -> str:
    """Append sorted key=value pairs to a message."""
    if not kwargs:
        return message
    context = " ".join(f"{key}={value}" for key, value in sorted(kwargs.items()))
    return f"{message} | {context}"


class DefaultLogger(Logger):
    """Forwards to a named ``logging.Logger`` without adding handlers."""

    def __init__(self, name: str = "shamir_plots", level: Optional[int] = None):
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    def set_level(self, level: int) -> None:
        self._logger.setLevel(level)

    def get_level(self) -> int:
        return self._logger.level

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(format_context(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(format_context(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(format_context(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(format_context(message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(format_context(message, kwargs))

"""Series handler registry.

Handlers are kept in drawing order: later series are layered on top of
earlier ones.
"""

from typing import Dict

from shamir_plots.plot.handlers.base import SeriesHandler, SeriesResult
from shamir_plots.plot.handlers.origin_line import OriginLineHandler
from shamir_plots.plot.handlers.curve import CurveHandler
from shamir_plots.plot.handlers.points import SharesHandler, SecretHandler

# Registry of available handlers, in drawing order
_HANDLERS: Dict[str, SeriesHandler] = {
    "origin_line": OriginLineHandler(),
    "curve": CurveHandler(),
    "shares": SharesHandler(),
    "secret": SecretHandler(),
}


def get_handler(name: str) -> SeriesHandler:
    """Get a handler by name.

    Raises:
        ValueError: If handler name is not found
    """
    handler_name = name.lower() if name else ""
    handler = _HANDLERS.get(handler_name)
    if handler is None:
        available = ", ".join(_HANDLERS.keys())
        raise ValueError(f"Unknown handler '{name}'. Available handlers: {available}")
    return handler


def list_handlers() -> list[str]:
    """Get handler names in drawing order."""
    return list(_HANDLERS.keys())


def list_handlers_with_descriptions() -> dict[str, str]:
    """Get all series handlers with their descriptions."""
    return {name: handler.get_description() for name, handler in _HANDLERS.items()}


__all__ = [
    "SeriesHandler",
    "SeriesResult",
    "OriginLineHandler",
    "CurveHandler",
    "SharesHandler",
    "SecretHandler",
    "get_handler",
    "list_handlers",
    "list_handlers_with_descriptions",
]

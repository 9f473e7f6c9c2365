"""
Error sink for non-fatal diagnostics.

Conditions such as an unresolved projection are reported here instead of
being raised. The default handler logs a warning; applications can install
their own handler to collect or surface these reports.
"""

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

ErrorHandler = Callable[..., None]


def _log_error(message: str, **details: Any) -> None:
    logger.warning(message, extra=details)


_handler: ErrorHandler = _log_error


def report_error(message: str, **details: Any) -> None:
    """
    Send a diagnostic to the installed error handler.

    Args:
        message: Human-readable description of the problem
        **details: Structured context (e.g. crs_code, projection_name)
    """
    _handler(message, **details)


def set_error_handler(handler: Optional[ErrorHandler]) -> ErrorHandler:
    """
    Install a new error handler.

    Args:
        handler: Callable taking (message, **details); None restores logging

    Returns:
        The previously installed handler
    """
    global _handler
    previous = _handler
    _handler = handler if handler is not None else _log_error
    return previous


def reset_error_handler() -> None:
    """Restore the default logging handler."""
    set_error_handler(None)

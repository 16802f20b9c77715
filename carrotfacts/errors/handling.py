from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    ConfigError,
    ConnectError,
    InternalError,
    LoadError,
)


def error_category(error: BaseException) -> str:
    """Map an exception onto the category name used in structured logs."""
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, LoadError):
        return "load"
    if isinstance(error, ConnectError):
        return "connect"
    if isinstance(error, OSError | ConnectionError):
        return "network"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict = None) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging. Structured
            data carried by InternalError subclasses is merged in.
    """
    merged = dict(getattr(error, "data", {}) or {})
    if context:
        merged.update(context)
    log_structured_error(
        error_type=error_category(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
    )

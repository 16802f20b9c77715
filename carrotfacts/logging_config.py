"""Root logger setup for carrotfacts.

Plain ``logging`` calls (startup, fact loading, shutdown) go through the
colorlog handler installed here. IRC and bot events use ``logs.logger``.
"""

import logging
import os
import sys
from typing import Any

import colorlog

LOG_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s "
    "%(message_log_color)s%(message)s"
)
LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


def level_from_env() -> int:
    """DEBUG when the ``DEBUG`` env var is truthy, else INFO."""
    debug_env = os.environ.get("DEBUG", "").lower()
    return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO


def log_structured_error(
    error_type: str,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log one error line: ``[TYPE] message | Exception | Cause | Context``.

    The cause segment shows what a domain error was raised ``from``, which is
    usually the OSError or ValidationError the user needs to see.
    """
    parts = [f"[{error_type.upper()}] {message}"]
    if exception is not None:
        parts.append(f"Exception: {type(exception).__name__}: {exception}")
        cause = exception.__cause__
        if cause is not None:
            parts.append(f"Cause: {type(cause).__name__}: {cause}")
    if context:
        parts.append("Context: " + " | ".join(f"{k}={v}" for k, v in context.items()))
    logging.log(level, " | ".join(parts))


class LoggerConfigurator:
    """Installs a colorlog stderr handler on the root logger."""

    def __init__(self, config: dict[str, Any] | None = None):
        """
        Args:
            config: Optional dict; its ``level`` key overrides the env level.
        """
        self.config = config or {}

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors=LEVEL_COLORS,
            secondary_log_colors={"message": {"ERROR": "red", "CRITICAL": "magenta"}},
            reset=True,
        )

    def configure(self) -> colorlog.ColoredFormatter:
        log_level = self.config.get("level", level_from_env())
        formatter = self.build_formatter()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.handlers[:] = [handler]
        root_logger.setLevel(log_level)
        # asyncio's own debug chatter is noise unless we are debugging.
        logging.getLogger("asyncio").setLevel(max(log_level, logging.WARNING))
        return formatter

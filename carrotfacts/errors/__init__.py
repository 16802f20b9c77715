"""Error hierarchy and structured error logging."""

from .handling import error_category, log_error
from .internal import (
    ConfigError,
    ConnectError,
    EmptyCollectionError,
    FactIOError,
    FactParseError,
    InternalError,
    LoadError,
    UnsupportedFormatError,
)

__all__ = [
    "InternalError",
    "ConfigError",
    "LoadError",
    "FactIOError",
    "FactParseError",
    "UnsupportedFormatError",
    "EmptyCollectionError",
    "ConnectError",
    "error_category",
    "log_error",
]

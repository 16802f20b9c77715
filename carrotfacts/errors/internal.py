"""Centralized internal error hierarchy.

Every failure the bot can hit before it is connected maps onto one of three
categories. All of them are fatal at startup; nothing here is retried.

Classes:
  InternalError           – Base for all internal errors.
  ConfigError             – Bad configuration file or server address.
  LoadError               – Fact file could not be turned into a collection.
    FactIOError           – File missing or unreadable.
    FactParseError        – JSON document malformed or of the wrong shape.
    UnsupportedFormatError – File suffix is neither .json nor .txt.
    EmptyCollectionError  – File loaded but held no facts.
  ConnectError            – IRC connection could not be established.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigError(InternalError):
    """Raised when the configuration cannot be read or fails validation."""


class LoadError(InternalError):
    """Raised when a fact collection cannot be loaded."""


class FactIOError(LoadError):
    """Fact file is missing or unreadable. The OSError is chained as __cause__."""


class FactParseError(LoadError):
    """Fact file content could not be decoded into facts."""


class UnsupportedFormatError(LoadError):
    """Fact file carries an extension that has no loader.

    Attributes:
        extension: The rejected suffix, including the leading dot ('' if none).
    """

    def __init__(self, path: str, extension: str) -> None:
        super().__init__(
            f"filename {path!r} has unknown extension {extension!r} (not .json or .txt)",
            data={"path": path, "extension": extension},
        )
        self.extension = extension


class EmptyCollectionError(LoadError):
    """Fact file held no facts."""


class ConnectError(InternalError):
    """Raised when the IRC server cannot be reached or the handshake fails."""


__all__ = [
    "InternalError",
    "ConfigError",
    "LoadError",
    "FactIOError",
    "FactParseError",
    "UnsupportedFormatError",
    "EmptyCollectionError",
    "ConnectError",
]

"""Bot package: command routing, signal handling and the session lifecycle."""

from .router import GREETINGS, CommandRouter, carrot_chant
from .session import SessionController, SessionState
from .signal_handler import SignalHandler

__all__ = [
    "CommandRouter",
    "GREETINGS",
    "SessionController",
    "SessionState",
    "SignalHandler",
    "carrot_chant",
]

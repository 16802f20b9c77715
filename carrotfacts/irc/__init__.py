"""IRC subsystem package.

A small asyncio client: connection and registration, line parsing, PING
handling, and delivery of CONNECTED / MESSAGE / DISCONNECTED events to a
single handler.
"""

from .client import AsyncIRCClient  # noqa: F401
from .dispatcher import IRCDispatcher  # noqa: F401
from .models import BotEvent, ChatMessage, ConnectionState, EventKind  # noqa: F401
from .parser import IRCMessage, build_chat_message, parse_irc_message  # noqa: F401

__all__ = [
    "AsyncIRCClient",
    "BotEvent",
    "ChatMessage",
    "ConnectionState",
    "EventKind",
    "IRCDispatcher",
    "IRCMessage",
    "build_chat_message",
    "parse_irc_message",
]

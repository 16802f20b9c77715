"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTING = auto()
    REGISTERING = auto()
    READY = auto()
    QUITTING = auto()


class EventKind(Enum):
    CONNECTED = auto()
    MESSAGE = auto()
    DISCONNECTED = auto()


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """One inbound PRIVMSG.

    ``channel`` is where a reply belongs: the channel name for channel
    traffic, the sender's nick for a private query.
    """

    sender: str
    channel: str
    text: str
    target: str = ""


@dataclass(frozen=True, slots=True)
class BotEvent:
    kind: EventKind
    message: ChatMessage | None = None
    reason: str | None = None

    @classmethod
    def connected(cls) -> BotEvent:
        return cls(EventKind.CONNECTED)

    @classmethod
    def chat(cls, message: ChatMessage) -> BotEvent:
        return cls(EventKind.MESSAGE, message=message)

    @classmethod
    def disconnected(cls, reason: str | None = None) -> BotEvent:
        return cls(EventKind.DISCONNECTED, reason=reason)

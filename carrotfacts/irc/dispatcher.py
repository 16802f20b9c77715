"""Inbound line dispatch: buffering, PING, registration and PRIVMSG."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..logs.logger import logger
from .models import BotEvent, ConnectionState
from .parser import IRCMessage, build_chat_message, parse_irc_message

if TYPE_CHECKING:  # pragma: no cover
    from .client import AsyncIRCClient

RPL_WELCOME = "001"
ERR_NICKNAMEINUSE = "433"


class IRCDispatcher:
    def __init__(self, client: AsyncIRCClient):
        self.client = client

    async def process_incoming_data(self, buffer: str, new_data: str) -> str:
        """Append ``new_data`` to ``buffer`` and handle every complete line.

        Returns the unterminated remainder.
        """
        buffer += new_data
        while "\n" in buffer:
            line, buffer = buffer.split("\n", 1)
            line = line.rstrip("\r")
            if line.strip():
                await self._handle_irc_message(line)
        return buffer

    async def _handle_irc_message(self, raw_message: str) -> None:
        parsed = parse_irc_message(raw_message)
        command = parsed.command
        if command != "PING":
            logger.log_event(
                "irc",
                "raw",
                level=logging.DEBUG,
                nick=self.client.nick,
                raw=raw_message,
            )
        if not command:
            return
        if command == "PING":
            await self._handle_ping(parsed)
        elif command == RPL_WELCOME:
            await self._handle_welcome(parsed)
        elif command == ERR_NICKNAMEINUSE:
            await self._handle_nick_in_use()
        elif command == "PRIVMSG" and parsed.prefix:
            await self._handle_privmsg(parsed)
        elif command == "ERROR":
            logger.log_event(
                "irc",
                "server_error",
                level=logging.WARNING,
                nick=self.client.nick,
                error=parsed.trailing,
            )

    async def _handle_ping(self, parsed: IRCMessage) -> None:
        token = parsed.trailing or self.client.host or ""
        await self.client.send_raw(f"PONG :{token}")

    async def _handle_welcome(self, parsed: IRCMessage) -> None:
        # The server may have truncated or changed the nick we asked for.
        if parsed.params:
            self.client.nick = parsed.params[0]
        self.client.set_state(ConnectionState.READY)
        logger.log_event("irc", "registered", nick=self.client.nick)
        await self.client.emit(BotEvent.connected())

    async def _handle_nick_in_use(self) -> None:
        if self.client.state is not ConnectionState.REGISTERING:
            return
        old = self.client.nick
        self.client.nick = f"{old}_"
        logger.log_event(
            "irc",
            "nick_in_use",
            level=logging.WARNING,
            nick=old,
            new_nick=self.client.nick,
        )
        await self.client.send_raw(f"NICK {self.client.nick}")

    async def _handle_privmsg(self, parsed: IRCMessage) -> None:
        message = build_chat_message(parsed, self.client.nick)
        if message is None:
            return
        logger.log_event(
            "irc",
            "privmsg",
            level=logging.DEBUG,
            nick=message.sender,
            channel=message.target,
            chat_message=message.text,
        )
        await self.client.emit(BotEvent.chat(message))

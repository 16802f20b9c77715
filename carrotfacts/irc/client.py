"""Async IRC client.

Owns the socket, registration and the read loop. Everything the bot cares
about is delivered through one event handler as ``BotEvent`` values, one at
a time, from the read loop task.
"""

from __future__ import annotations

import asyncio
import codecs
import inspect
import logging
import ssl
from collections.abc import Callable
from typing import Any

from ..constants import IRC_CONNECT_TIMEOUT, IRC_MAX_LINE_BYTES, IRC_READ_CHUNK
from ..errors.internal import ConnectError
from ..logs.logger import logger
from .dispatcher import IRCDispatcher
from .models import BotEvent, ConnectionState

EventHandler = Callable[[BotEvent], Any]


class AsyncIRCClient:  # pylint: disable=too-many-instance-attributes
    def __init__(self) -> None:
        self.host: str | None = None
        self.port: int | None = None
        self.nick: str | None = None
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None
        self.state = ConnectionState.DISCONNECTED
        self.event_handler: EventHandler | None = None
        self.message_buffer = ""
        self.dispatcher = IRCDispatcher(self)
        self._listen_task: asyncio.Task[None] | None = None

    @property
    def connected(self) -> bool:
        return self.writer is not None

    def set_state(self, new_state: ConnectionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                nick=self.nick,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    def set_event_handler(self, handler: EventHandler) -> None:
        self.event_handler = handler

    async def connect(
        self,
        host: str,
        port: int,
        *,
        nick: str,
        user: str,
        realname: str,
        password: str = "",
        tls: bool = False,
        server_hostname: str | None = None,
    ) -> None:
        """Open the connection, send registration and start the read loop.

        Raises:
            ConnectError: If the TCP or TLS handshake fails or times out.
        """
        self.host = host
        self.port = port
        self.nick = nick
        ssl_context = ssl.create_default_context() if tls else None
        self.set_state(ConnectionState.CONNECTING)
        logger.log_event("irc", "connect_start", nick=nick, server=host, port=port, tls=tls)
        try:
            self.reader, self.writer = await asyncio.wait_for(
                asyncio.open_connection(
                    host,
                    port,
                    ssl=ssl_context,
                    server_hostname=(server_hostname or host) if tls else None,
                ),
                timeout=IRC_CONNECT_TIMEOUT,
            )
        except TimeoutError as e:
            self.set_state(ConnectionState.DISCONNECTED)
            raise ConnectError(
                f"timed out after {IRC_CONNECT_TIMEOUT:g}s connecting to {host}:{port}",
                data={"server": host, "port": port},
            ) from e
        except OSError as e:
            self.set_state(ConnectionState.DISCONNECTED)
            raise ConnectError(
                f"unable to connect to {host}:{port}: {e}",
                data={"server": host, "port": port},
            ) from e

        logger.log_event("irc", "connection_established", level=logging.DEBUG, nick=nick)
        self.set_state(ConnectionState.REGISTERING)
        if password:
            await self.send_raw(f"PASS {password}")
        await self.send_raw(f"NICK {nick}")
        await self.send_raw(f"USER {user} 0 * :{realname}")
        self._listen_task = asyncio.create_task(self.listen(), name="irc-listen")

    async def listen(self) -> None:
        """Read until the server closes the connection, then emit DISCONNECTED."""
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        reason = "connection closed by server"
        try:
            while self.reader is not None:
                data = await self.reader.read(IRC_READ_CHUNK)
                if not data:
                    break
                self.message_buffer = await self.dispatcher.process_incoming_data(
                    self.message_buffer, decoder.decode(data)
                )
        except asyncio.CancelledError:
            await self._close_transport()
            raise
        except OSError as e:
            reason = str(e) or type(e).__name__
        await self._close_transport()
        logger.log_event(
            "irc", "disconnected", level=logging.WARNING, nick=self.nick, reason=reason
        )
        await self.emit(BotEvent.disconnected(reason))

    async def emit(self, event: BotEvent) -> None:
        handler = self.event_handler
        if handler is None:
            logger.log_event(
                "irc",
                "no_event_handler",
                level=logging.WARNING,
                nick=self.nick,
                kind=event.kind.name,
            )
            return
        try:
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        except Exception as e:  # noqa: BLE001
            logger.log_event(
                "irc",
                "event_handler_error",
                level=logging.ERROR,
                nick=self.nick,
                kind=event.kind.name,
                error=str(e),
                error_type=type(e).__name__,
            )

    async def send_raw(self, line: str) -> None:
        if self.writer is None:
            raise ConnectionError("not connected")
        line = line.replace("\r", " ").replace("\n", " ")
        payload = line.encode("utf-8")[: IRC_MAX_LINE_BYTES - 2]
        # Drop a multi-byte character split by the cut.
        payload = payload.decode("utf-8", "ignore").encode("utf-8")
        self.writer.write(payload + b"\r\n")
        await self.writer.drain()

    async def join(self, channel: str) -> None:
        logger.log_event("irc", "join", nick=self.nick, channel=channel)
        await self.send_raw(f"JOIN {channel}")

    async def privmsg(self, target: str, text: str) -> None:
        await self.send_raw(f"PRIVMSG {target} :{text}")

    async def notice(self, target: str, text: str) -> None:
        await self.send_raw(f"NOTICE {target} :{text}")

    async def quit(self, message: str) -> None:
        """Ask the server to close the session. The read loop sees the close."""
        if self.writer is None:
            return
        self.set_state(ConnectionState.QUITTING)
        logger.log_event("irc", "quit", nick=self.nick, quit_message=message)
        await self.send_raw(f"QUIT :{message}")

    async def disconnect(self) -> None:
        """Tear down the connection without emitting DISCONNECTED."""
        task, self._listen_task = self._listen_task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        await self._close_transport()

    async def _close_transport(self) -> None:
        writer, self.writer = self.writer, None
        self.reader = None
        self.message_buffer = ""
        if writer is not None:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError as e:
                logger.log_event(
                    "irc",
                    "close_error",
                    level=logging.DEBUG,
                    nick=self.nick,
                    error=str(e),
                )
        self.set_state(ConnectionState.DISCONNECTED)

"""SessionController - owns the bot's lifecycle from config to exit."""

from __future__ import annotations

import asyncio
import logging
import random
from enum import Enum, auto

from ..config.model import BotConfig
from ..constants import QUIT_MESSAGE
from ..facts.selector import RandomSelector, RoundRobinSelector, secure_rng
from ..facts.store import load_collection
from ..irc.client import AsyncIRCClient
from ..irc.models import BotEvent, EventKind
from ..logs.logger import logger
from .router import CommandRouter
from .signal_handler import SignalHandler


class SessionState(Enum):
    CONFIGURING = auto()
    LOADING = auto()
    CONNECTING = auto()
    CONNECTED = auto()
    DISCONNECTING = auto()
    TERMINATED = auto()


class SessionController:  # pylint: disable=too-many-instance-attributes
    """Runs one bot session.

    The configuration is already built when the controller is created, so the
    session starts in CONFIGURING and moves forward through LOADING,
    CONNECTING and CONNECTED. It ends in TERMINATED after either an
    interrupt (QUIT is sent first) or an unsolicited disconnect (no QUIT).

    Attributes:
        config: Immutable bot configuration.
        client: IRC client the session drives.
        signals: Source of interrupt requests.
        router: Built during LOADING.
        quit_sent: True once QUIT has gone out.
    """

    def __init__(
        self,
        config: BotConfig,
        client: AsyncIRCClient | None = None,
        signals: SignalHandler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.client = client or AsyncIRCClient()
        self.signals = signals or SignalHandler()
        self.rng = rng or secure_rng()
        self.state = SessionState.CONFIGURING
        self.router: CommandRouter | None = None
        self.quit_sent = False
        self.disconnected = asyncio.Event()

    def _set_state(self, new_state: SessionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "session",
                "state_change",
                level=logging.DEBUG,
                nick=self.config.irc.nick,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    def load(self) -> CommandRouter:
        """Load both fact files and build the router.

        Raises:
            LoadError: If either collection cannot be loaded or is empty.
        """
        self._set_state(SessionState.LOADING)
        facts = self.config.facts
        carrots = load_collection(facts.carrots, "carrot")
        turnips = load_collection(facts.turnips, "turnip")
        self.router = CommandRouter(
            RandomSelector(carrots, rng=self.rng),
            RoundRobinSelector(turnips),
            rng=self.rng,
        )
        return self.router

    async def connect(self) -> None:
        """Register the event handler and open the IRC connection.

        Raises:
            ConnectError: If the connection cannot be established.
        """
        self._set_state(SessionState.CONNECTING)
        irc = self.config.irc
        self.client.set_event_handler(self.handle_event)
        await self.client.connect(
            irc.host,
            irc.port,
            nick=irc.nick,
            user=irc.user,
            realname=irc.realname,
            password=irc.password,
            tls=irc.ssl,
            server_hostname=irc.host,
        )

    async def handle_event(self, event: BotEvent) -> None:
        """Single entry point for everything the IRC client reports."""
        if event.kind is EventKind.CONNECTED:
            self._set_state(SessionState.CONNECTED)
            await self.client.join(self.config.irc.channel)
        elif event.kind is EventKind.MESSAGE:
            if self.router is not None and event.message is not None:
                await self.router.handle(self.client, event.message)
        elif event.kind is EventKind.DISCONNECTED:
            self.disconnected.set()

    async def wait_for_shutdown(self) -> None:
        """Block until an interrupt or a disconnect, whichever comes first.

        On interrupt, QUIT is sent and the server's close is awaited. On
        disconnect, the session ends without sending anything.
        """
        interrupt = asyncio.create_task(self.signals.wait(), name="wait-interrupt")
        disconnect = asyncio.create_task(self.disconnected.wait(), name="wait-disconnect")
        try:
            done, _ = await asyncio.wait(
                {interrupt, disconnect}, return_when=asyncio.FIRST_COMPLETED
            )
            if disconnect in done:
                logging.warning("🔌 Disconnected")
                return
            self._set_state(SessionState.DISCONNECTING)
            try:
                await self.client.quit(QUIT_MESSAGE)
            except (OSError, ConnectionError) as e:
                # Connection died under us; nothing left to say goodbye to.
                logging.warning(f"🔌 Quit not delivered: {e}")
                return
            self.quit_sent = True
            await disconnect
            logging.info("🔌 Disconnected after quit")
        finally:
            for task in (interrupt, disconnect):
                task.cancel()

    async def run(self) -> None:
        """Load, connect, serve and shut down.

        Raises:
            LoadError: Fact files unusable.
            ConnectError: Server unreachable.
        """
        self.load()
        self.signals.setup_signal_handlers()
        try:
            await self.connect()
            logging.info("🏃 Bot running - press Ctrl+C to stop")
            await self.wait_for_shutdown()
        finally:
            await self.client.disconnect()
            self.signals.restore_signal_handlers()
            self._set_state(SessionState.TERMINATED)

"""CommandRouter - maps chat text to a reply."""

from __future__ import annotations

import logging
import random
from typing import Protocol

from ..constants import (
    CARROT_COMMAND,
    CARROT_MAX_REPEAT,
    CARROT_STEM,
    CARROT_WORD,
    GREETING_RARE_ODDS,
    GREETING_TRIGGERS,
    TURNIP_COMMAND,
)
from ..facts.selector import FactSelector, secure_rng
from ..irc.formatting import GREEN, ORANGE, RED, bold, colorize
from ..irc.models import ChatMessage
from ..logs.logger import logger

GREETING_COMMON = f"{colorize('Merry', RED)} {colorize('Christmas!', GREEN)}"
GREETING_RARE = bold(f"{colorize('Merry', ORANGE)} {colorize('Carrotmas!', GREEN)}")
GREETINGS = (GREETING_COMMON, GREETING_RARE)


class MessageSender(Protocol):
    async def privmsg(self, target: str, text: str) -> None: ...  # noqa: E701


def carrot_chant(message: str, limit: int = CARROT_MAX_REPEAT) -> str:
    """One CARROT per 'o' in ``message``, at most ``limit``, space separated."""
    count = min(message.count("o"), limit)
    return " ".join([CARROT_WORD] * count)


class CommandRouter:
    """First matching rule wins:

    1. ``.carrot``: a fact from the carrot selector.
    2. ``.turnip``: a fact from the turnip selector.
    3. anything starting with ``.carro``: the carrot chant.
    4. a message containing both greeting triggers: a holiday greeting.

    Anything else is ignored.
    """

    def __init__(
        self,
        carrots: FactSelector,
        turnips: FactSelector,
        rng: random.Random | None = None,
    ) -> None:
        self.carrots = carrots
        self.turnips = turnips
        self.rng = rng or secure_rng()

    def route(self, message: str) -> str | None:
        if message == CARROT_COMMAND:
            return self.carrots.next().text
        if message == TURNIP_COMMAND:
            return self.turnips.next().text
        if message.startswith(CARROT_STEM):
            return carrot_chant(message)
        if all(trigger in message for trigger in GREETING_TRIGGERS):
            return self.greeting()
        return None

    def greeting(self) -> str:
        if self.rng.randrange(GREETING_RARE_ODDS) == 0:
            return GREETING_RARE
        return GREETING_COMMON

    async def handle(self, client: MessageSender, message: ChatMessage) -> str | None:
        """Route ``message`` and send any reply back where it came from.

        Send failures propagate to the caller.
        """
        reply = self.route(message.text)
        if reply is None:
            return None
        logger.log_event(
            "bot",
            "reply",
            level=logging.DEBUG,
            channel=message.channel,
            requested_by=message.sender,
            command=message.text[:32],
        )
        await client.privmsg(message.channel, reply)
        return reply

import asyncio
import json
from pathlib import Path

import pytest

from carrotfacts.config.model import BotConfig
from carrotfacts.irc.models import BotEvent


class FakeIRCClient:
    """Records outbound calls instead of touching the network."""

    def __init__(
        self, fail_connect: Exception | None = None, close_on_quit: bool = True
    ) -> None:
        self.sent: list[tuple[str, ...]] = []
        self.event_handler = None
        self.connect_kwargs: dict | None = None
        self.disconnect_calls = 0
        self.fail_connect = fail_connect
        self.close_on_quit = close_on_quit
        self._tasks: list[asyncio.Task] = []

    def set_event_handler(self, handler) -> None:
        self.event_handler = handler

    async def connect(self, host: str, port: int, **kwargs) -> None:
        if self.fail_connect is not None:
            raise self.fail_connect
        self.connect_kwargs = {"host": host, "port": port, **kwargs}

    async def join(self, channel: str) -> None:
        self.sent.append(("JOIN", channel))

    async def privmsg(self, target: str, text: str) -> None:
        self.sent.append(("PRIVMSG", target, text))

    async def notice(self, target: str, text: str) -> None:
        self.sent.append(("NOTICE", target, text))

    async def quit(self, message: str) -> None:
        self.sent.append(("QUIT", message))
        if self.close_on_quit:
            # A real server closes the link after QUIT.
            self._tasks.append(
                asyncio.get_running_loop().create_task(
                    self.emit(BotEvent.disconnected("quit"))
                )
            )

    async def disconnect(self) -> None:
        self.disconnect_calls += 1

    async def emit(self, event: BotEvent) -> None:
        await self.event_handler(event)


@pytest.fixture
def fake_client() -> FakeIRCClient:
    return FakeIRCClient()


@pytest.fixture
def fact_files(tmp_path: Path) -> tuple[Path, Path]:
    carrots = tmp_path / "carrots.json"
    carrots.write_text(
        json.dumps(
            [
                {"text": "Carrots were originally purple.", "id": 10},
                {"text": "Carrots are biennial plants.", "id": 11},
            ]
        ),
        encoding="utf-8",
    )
    turnips = tmp_path / "turnips.txt"
    turnips.write_text("Turnip one\nTurnip two\nTurnip three\n", encoding="utf-8")
    return carrots, turnips


@pytest.fixture
def bot_config(fact_files: tuple[Path, Path]) -> BotConfig:
    carrots, turnips = fact_files
    return BotConfig.model_validate(
        {
            "irc": {
                "server": "irc.example.org:6697",
                "ssl": True,
                "nick": "carrotbot",
                "channel": "#veg",
            },
            "facts": {"carrots": str(carrots), "turnips": str(turnips)},
        }
    )

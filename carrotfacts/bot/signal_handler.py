"""SignalHandler - turns SIGINT/SIGTERM into an awaitable shutdown request."""

import asyncio
import logging
import signal

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class SignalHandler:
    """Handler for system signals and shutdown coordination."""

    def __init__(self) -> None:
        self.shutdown_initiated = False
        self.interrupted = asyncio.Event()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._previous: dict[int, object] = {}

    def stop(self) -> None:
        """Request shutdown. Safe to call more than once."""
        self.shutdown_initiated = True
        self.interrupted.set()

    async def wait(self) -> None:
        await self.interrupted.wait()

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Route SIGINT/SIGTERM to ``stop`` on the running loop."""
        self._loop = loop or asyncio.get_running_loop()

        def handler(signum: int, _frame: object | None) -> None:  # noqa: D401
            # Only the first signal counts
            if self.shutdown_initiated:
                return
            logging.warning(
                f"🛑 Signal received - initiating shutdown (signal={signum})"
            )
            self.shutdown_initiated = True
            self._loop.call_soon_threadsafe(self.interrupted.set)

        for signum in SHUTDOWN_SIGNALS:
            self._previous[signum] = signal.signal(signum, handler)

    def restore_signal_handlers(self) -> None:
        for signum, previous in self._previous.items():
            signal.signal(signum, previous)
        self._previous.clear()

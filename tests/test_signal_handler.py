from __future__ import annotations

import asyncio
import signal
from unittest.mock import patch

import pytest

from carrotfacts.bot.signal_handler import SignalHandler


def _registered(mock_signal) -> dict[int, object]:
    return {call[0][0]: call[0][1] for call in mock_signal.call_args_list}


@pytest.mark.asyncio
async def test_sigint_requests_shutdown():
    """SIGINT sets shutdown_initiated and wakes waiters."""
    handler = SignalHandler()
    with patch("signal.signal") as mock_signal:
        handler.setup_signal_handlers()
        sigint_handler = _registered(mock_signal)[signal.SIGINT]
        sigint_handler(signal.SIGINT, None)
        assert handler.shutdown_initiated is True
        await asyncio.wait_for(handler.wait(), timeout=1)
        assert handler.interrupted.is_set()


@pytest.mark.asyncio
async def test_sigterm_requests_shutdown():
    handler = SignalHandler()
    with patch("signal.signal") as mock_signal:
        handler.setup_signal_handlers()
        _registered(mock_signal)[signal.SIGTERM](signal.SIGTERM, None)
        await asyncio.wait_for(handler.wait(), timeout=1)
        assert handler.shutdown_initiated is True


@pytest.mark.asyncio
async def test_multiple_signals_are_idempotent():
    handler = SignalHandler()
    loop = asyncio.get_running_loop()
    with patch("signal.signal") as mock_signal, patch.object(
        loop, "call_soon_threadsafe", wraps=loop.call_soon_threadsafe
    ) as scheduled:
        handler.setup_signal_handlers(loop)
        sigint_handler = _registered(mock_signal)[signal.SIGINT]
        sigint_handler(signal.SIGINT, None)
        sigint_handler(signal.SIGINT, None)
        assert scheduled.call_count == 1
    await asyncio.wait_for(handler.wait(), timeout=1)


@pytest.mark.asyncio
async def test_restore_reinstalls_previous_handlers():
    handler = SignalHandler()
    with patch("signal.signal", return_value=signal.SIG_DFL) as mock_signal:
        handler.setup_signal_handlers()
        handler.restore_signal_handlers()
        restored = mock_signal.call_args_list[2:]
    assert sorted(call[0][0] for call in restored) == sorted(
        [signal.SIGINT, signal.SIGTERM]
    )
    assert all(call[0][1] is signal.SIG_DFL for call in restored)


def test_restore_without_setup_is_noop():
    handler = SignalHandler()
    with patch("signal.signal") as mock_signal:
        handler.restore_signal_handlers()
    mock_signal.assert_not_called()


def test_stop_already_shutdown():
    """Test stop method when already shutdown."""
    handler = SignalHandler()
    handler.stop()
    assert handler.shutdown_initiated is True
    handler.stop()
    assert handler.shutdown_initiated is True
    assert handler.interrupted.is_set()

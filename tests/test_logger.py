"""
Tests for the event logger
"""

import logging

import pytest

from carrotfacts.logs.logger import BotLogger, SimpleFormatter


@pytest.fixture
def bot_logger(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    inst = BotLogger("carrotfacts.test")
    inst.logger.propagate = True
    return inst


def _record(level=logging.INFO, msg="Test message"):
    return logging.LogRecord(
        name="test", level=level, pathname="", lineno=0, msg=msg, args=(), exc_info=None
    )


class TestSimpleFormatter:
    def test_plain_output_without_tty(self, tmp_path):
        with open(tmp_path / "out.log", "w", encoding="utf-8") as stream:
            formatter = SimpleFormatter(stream)
        assert formatter.format(_record()) == "INFO     Test message"

    def test_color_output_for_tty(self):
        class Tty:
            def isatty(self):
                return True

        formatted = SimpleFormatter(Tty()).format(_record(logging.ERROR, "boom"))
        assert formatted.startswith("\x1b[31m")
        assert formatted.endswith("boom")


class TestLogEvent:
    def test_template_is_filled(self, bot_logger, caplog):
        with caplog.at_level(logging.INFO, logger="carrotfacts.test"):
            bot_logger.log_event("irc", "join", nick="carrotbot", channel="#veg")
        assert "Joining channel" in caplog.text
        assert caplog.records[-1].getMessage().startswith("[carrotbot#veg")

    def test_missing_template_falls_back(self, bot_logger, caplog):
        with caplog.at_level(logging.INFO, logger="carrotfacts.test"):
            bot_logger.log_event("garden", "weeded_out")
        assert "garden: weeded out" in caplog.records[-1].getMessage()

    def test_template_with_missing_field_kept_raw(self, bot_logger, caplog):
        with caplog.at_level(logging.INFO, logger="carrotfacts.test"):
            bot_logger.log_event("bot", "reply")
        assert "{" in caplog.records[-1].getMessage()

    def test_explicit_human_text(self, bot_logger, caplog):
        with caplog.at_level(logging.INFO, logger="carrotfacts.test"):
            bot_logger.log_event("bot", "reply", human="custom text")
        assert caplog.records[-1].getMessage() == f"{BotLogger._build_prefix(None, None)} custom text"

    def test_level_respected(self, bot_logger, caplog):
        with caplog.at_level(logging.INFO, logger="carrotfacts.test"):
            bot_logger.log_event("irc", "raw", level=logging.DEBUG, line="PING :x")
        assert caplog.records == []

    def test_debug_mode_appends_context(self, bot_logger, caplog, monkeypatch):
        monkeypatch.setenv("DEBUG", "1")
        bot_logger.set_level(logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger="carrotfacts.test"):
            bot_logger.log_event("garden", "dug", depth=3)
        msg = caplog.records[-1].getMessage()
        assert msg.startswith("garden_dug")
        assert "depth=3" in msg
        assert "derived=True" in msg


class TestPrefix:
    def test_long_prefix_truncated(self):
        prefix = BotLogger._build_prefix("n" * 30, "#veg")
        assert prefix == "[" + "n" * 24 + "]"

    def test_system_label_without_nick(self):
        assert BotLogger._build_prefix(None, None).startswith("[system")

    def test_long_event_name_truncated(self):
        msg = BotLogger._build_debug_message("x" * 40, "[p]", "text", {})
        assert msg.startswith("x" * 27 + "…")

#!/usr/bin/env python3
"""
Main entry point for the carrotfacts IRC bot
"""

import argparse
import asyncio
import logging
import sys

from .bot.session import SessionController
from .config import get_configuration, print_config_summary
from .config.model import BotConfig
from .constants import DEFAULT_CONFIG_FILE
from .errors.handling import log_error
from .errors.internal import InternalError
from .facts.store import load_collection
from .logging_config import LoggerConfigurator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carrotfacts", description="IRC bot that shares carrot and turnip facts"
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_FILE, help="Config file (TOML)"
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Validate config and fact files, then exit without connecting",
    )
    return parser


def health_check(config: BotConfig) -> None:
    """Load both fact files without connecting.

    Raises:
        LoadError: If either file is unusable.
    """
    logging.info("🏥 Health check mode")
    load_collection(config.facts.carrots, "carrot")
    load_collection(config.facts.turnips, "turnip")
    logging.info("✅ Health check passed")


async def main(config: BotConfig) -> None:
    """Run one bot session until interrupt or disconnect.

    Raises:
        InternalError: Any fatal startup failure.
    """
    logging.info("🥕 Starting carrotfacts")
    try:
        await SessionController(config).run()
    finally:
        logging.info("✅ Application shutdown complete")


def run(argv: list[str] | None = None) -> None:
    """Synchronous entry point for the application.

    Exits with status 1 on any fatal startup error and 0 otherwise.
    """
    args = build_parser().parse_args(argv)
    LoggerConfigurator().configure()
    try:
        config = get_configuration(args.config)
        print_config_summary(config)
        if args.health_check:
            health_check(config)
            sys.exit(0)
        asyncio.run(main(config))
    except InternalError as e:
        log_error("Fatal startup error", e)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(0)
    sys.exit(0)


if __name__ == "__main__":
    run()

"""Configuration loading utilities."""

from __future__ import annotations

import logging
import os
import tomllib
from typing import Any

from pydantic import ValidationError

from ..constants import DEFAULT_CONFIG_FILE
from ..errors.internal import ConfigError
from .model import BotConfig


class ConfigLoader:
    """Reads the TOML configuration file into a BotConfig."""

    def __init__(self, config_file: str | os.PathLike[str] | None = None) -> None:
        self.config_file = str(config_file or DEFAULT_CONFIG_FILE)

    def load_raw(self) -> dict[str, Any]:
        """Return the parsed TOML document, or {} when the file does not exist.

        Raises:
            ConfigError: If the file exists but cannot be read or parsed.
        """
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except FileNotFoundError:
            logging.warning(
                f"📁 Config file {self.config_file} not found, using defaults"
            )
            return {}
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(
                f"invalid TOML in {self.config_file}: {e}",
                data={"config_file": self.config_file},
            ) from e
        except OSError as e:
            raise ConfigError(
                f"unable to read {self.config_file}: {e}",
                data={"config_file": self.config_file},
            ) from e

    def get_configuration(self) -> BotConfig:
        """Load and validate the configuration.

        Raises:
            ConfigError: On unreadable files or invalid values.
        """
        raw = self.load_raw()
        try:
            config = BotConfig.model_validate(raw)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigError(
                f"invalid configuration in {self.config_file}: {problems}",
                data={"config_file": self.config_file},
            ) from e
        logging.debug(f"✅ Configuration loaded from {self.config_file}")
        return config


def get_configuration(config_file: str | os.PathLike[str] | None = None) -> BotConfig:
    return ConfigLoader(config_file).get_configuration()


def print_config_summary(config: BotConfig) -> None:
    irc = config.irc
    logging.info(
        f"📊 {irc.nick} -> {irc.host}:{irc.port} tls={irc.ssl} channel={irc.channel}"
    )
    logging.debug(
        f"📚 Fact files carrots={config.facts.carrots} turnips={config.facts.turnips}"
    )

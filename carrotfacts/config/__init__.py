"""Configuration package exports."""

from .config_loader import ConfigLoader, get_configuration, print_config_summary
from .model import BotConfig, FactSettings, IRCSettings, split_server_address

__all__ = [
    "BotConfig",
    "ConfigLoader",
    "FactSettings",
    "IRCSettings",
    "get_configuration",
    "print_config_summary",
    "split_server_address",
]

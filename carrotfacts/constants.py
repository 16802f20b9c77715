"""
Runtime constants for the carrotfacts bot

Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int, minimum: int | None = None) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.
    Values below ``minimum`` are rejected the same way.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.
        minimum: Smallest accepted value, if any.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            parsed = int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
        else:
            if minimum is None or parsed >= minimum:
                return parsed
            print(
                f"Warning: {name}={parsed} is below {minimum}, using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Float counterpart of _get_env_int."""
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Configuration file
DEFAULT_CONFIG_FILE = os.getenv("CARROTFACTS_CONF_FILE", "config.toml")

# IRC defaults
DEFAULT_IRC_SERVER = "irc.libera.chat:6697"
DEFAULT_IRC_NICK = "carrotfacts"
DEFAULT_IRC_CHANNEL = "#carrotfacts-test"
DEFAULT_CARROT_DB = "carrots.json"
DEFAULT_TURNIP_DB = "turnips.txt"

IRC_CONNECT_TIMEOUT = _get_env_float(
    "IRC_CONNECT_TIMEOUT", 30.0
)  # Seconds allowed for the TCP/TLS handshake
IRC_READ_CHUNK = _get_env_int("IRC_READ_CHUNK", 4096, minimum=1)  # Bytes per socket read
IRC_MAX_LINE_BYTES = 512  # RFC 1459 line limit, CRLF included

# Commands
CARROT_COMMAND = ".carrot"
TURNIP_COMMAND = ".turnip"
CARROT_STEM = ".carro"
CARROT_WORD = "CARROT"
CARROT_MAX_REPEAT = _get_env_int(
    "CARROT_MAX_REPEAT", 61, minimum=1
)  # max which fit on one PRIVMSG line

# Holiday greeting
GREETING_TRIGGERS = ("Merry", "Christmas")
GREETING_RARE_ODDS = 5  # one in five draws picks the rare greeting

QUIT_MESSAGE = "Carrot be with you!"

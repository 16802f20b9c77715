from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    DEFAULT_CARROT_DB,
    DEFAULT_IRC_CHANNEL,
    DEFAULT_IRC_NICK,
    DEFAULT_IRC_SERVER,
    DEFAULT_TURNIP_DB,
)


def split_server_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` (or ``[v6addr]:port``) into its parts.

    Raises:
        ValueError: If the port is missing, not numeric or out of range.
    """
    host, sep, port_text = address.strip().rpartition(":")
    if not sep or not host or not port_text.isdigit():
        raise ValueError(f"server address {address!r} is not of the form host:port")
    port = int(port_text)
    if not 0 < port < 65536:
        raise ValueError(f"server port {port} out of range")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


class IRCSettings(BaseModel):
    """The ``[irc]`` table.

    Attributes:
        server: ``host:port`` of the IRC server.
        ssl: Wrap the connection in TLS, validating the certificate against host.
        nick: Nickname to register.
        name: Real name sent with USER; the nick is used when empty.
        user: Username sent with USER.
        password: Server password (PASS); skipped when empty.
        channel: Channel joined once registration completes.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    server: str = DEFAULT_IRC_SERVER
    ssl: bool = True
    nick: str = Field(default=DEFAULT_IRC_NICK, min_length=1)
    name: str = ""
    user: str = DEFAULT_IRC_NICK
    password: str = ""
    channel: str = Field(default=DEFAULT_IRC_CHANNEL, min_length=1)

    @field_validator("server")
    @classmethod
    def validate_server(cls, v: str) -> str:
        split_server_address(v)
        return v.strip()

    @field_validator("nick", "user", "channel")
    @classmethod
    def no_whitespace(cls, v: str) -> str:
        v = v.strip()
        if any(ch.isspace() for ch in v):
            raise ValueError("must not contain whitespace")
        return v

    @property
    def realname(self) -> str:
        return self.name or self.nick

    @property
    def host(self) -> str:
        return split_server_address(self.server)[0]

    @property
    def port(self) -> int:
        return split_server_address(self.server)[1]


class FactSettings(BaseModel):
    """The ``[facts]`` table: paths of the two fact files."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    carrots: str = DEFAULT_CARROT_DB
    turnips: str = DEFAULT_TURNIP_DB


class BotConfig(BaseModel):
    """Immutable configuration built once at startup and passed down."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    irc: IRCSettings = Field(default_factory=IRCSettings)
    facts: FactSettings = Field(default_factory=FactSettings)

"""IRC message parsing utilities."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import ChatMessage


@dataclass
class IRCMessage:
    raw: str
    prefix: str | None
    command: str | None
    params: list[str] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def nick(self) -> str | None:
        if not self.prefix:
            return None
        return self.prefix.split("!", 1)[0]

    @property
    def trailing(self) -> str:
        return self.params[-1] if self.params else ""


def parse_irc_message(raw_line: str) -> IRCMessage:
    tags: dict[str, str] = {}
    prefix: str | None = None
    trailing: str | None = None

    original = raw_line

    if raw_line.startswith("@"):
        tags_part, _, raw_line = raw_line.partition(" ")
        tags = _parse_tags(tags_part[1:])

    if raw_line.startswith(":"):
        # A prefix with nothing after it leaves an empty command.
        prefix, _, raw_line = raw_line[1:].partition(" ")

    if raw_line.startswith(":"):
        trailing = raw_line[1:]
        raw_line = ""
    elif " :" in raw_line:
        raw_line, trailing = raw_line.split(" :", 1)

    parts = raw_line.split()
    command = parts[0].upper() if parts else None
    params = parts[1:]
    if trailing is not None:
        params.append(trailing)

    return IRCMessage(
        raw=original, prefix=prefix, command=command, params=params, tags=tags
    )


def _parse_tags(raw_tags: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for tag in raw_tags.split(";"):
        k, _, v = tag.partition("=")
        tags[k] = v
    return tags


def build_chat_message(parsed: IRCMessage, own_nick: str | None) -> ChatMessage | None:
    """Turn a parsed PRIVMSG into a ChatMessage, or None for anything else.

    A message whose target is our own nick is a private query; replies to it go
    back to the sender.
    """
    if parsed.command != "PRIVMSG" or len(parsed.params) < 2:
        return None
    target, text = parsed.params[0], parsed.params[-1]
    sender = parsed.nick or "?"
    if own_nick and target.lower() == own_nick.lower():
        channel = sender
    else:
        channel = target
    return ChatMessage(sender=sender, channel=channel, text=text, target=target)

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Fact(BaseModel):
    """A single reply: its text and a stable identifier.

    JSON sources carry ``id`` explicitly; text sources use the zero-based
    line number.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    text: str
    id: int


FactCollection = tuple[Fact, ...]

"""Strategies for picking the next fact to send."""

from __future__ import annotations

import random
import secrets
from collections.abc import Sequence
from typing import Protocol

from .models import Fact


class FactSelector(Protocol):
    def next(self) -> Fact: ...  # noqa: E701


def secure_rng() -> random.Random:
    """A PRNG seeded from the OS entropy pool so runs do not replay."""
    return random.Random(secrets.randbits(64))


class RandomSelector:
    """Uniform random choice, with replacement."""

    def __init__(self, facts: Sequence[Fact], rng: random.Random | None = None) -> None:
        if not facts:
            raise ValueError("RandomSelector needs at least one fact")
        self.facts = tuple(facts)
        self.rng = rng or secure_rng()

    def next(self) -> Fact:
        return self.facts[self.rng.randrange(len(self.facts))]


class RoundRobinSelector:
    """Cycles through the facts in load order, wrapping at the end.

    The cursor is only touched from the IRC read loop, which delivers one
    event at a time, so it is not locked.
    """

    def __init__(self, facts: Sequence[Fact]) -> None:
        if not facts:
            raise ValueError("RoundRobinSelector needs at least one fact")
        self.facts = tuple(facts)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def next(self) -> Fact:
        fact = self.facts[self._cursor]
        self._cursor = (self._cursor + 1) % len(self.facts)
        return fact

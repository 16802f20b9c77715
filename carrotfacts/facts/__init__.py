"""Fact collections: model, file loading and selection strategies."""

from .models import Fact, FactCollection
from .selector import FactSelector, RandomSelector, RoundRobinSelector, secure_rng
from .store import load_collection, load_facts

__all__ = [
    "Fact",
    "FactCollection",
    "FactSelector",
    "RandomSelector",
    "RoundRobinSelector",
    "load_collection",
    "load_facts",
    "secure_rng",
]

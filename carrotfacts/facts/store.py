"""Fact file loading.

Two formats are understood, chosen by file suffix:

* ``.json``: an array of objects, each with a ``text`` string and an
  integer ``id``.
* ``.txt``: one fact per line; the zero-based line number is the id.

Any other suffix is rejected before the file is opened.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors.internal import (
    EmptyCollectionError,
    FactIOError,
    FactParseError,
    UnsupportedFormatError,
)
from .models import Fact, FactCollection

JSON_SUFFIX = ".json"
TEXT_SUFFIX = ".txt"

_FACT_LIST = TypeAdapter(list[Fact])


def load_facts(path: str | os.PathLike[str]) -> FactCollection:
    """Load the facts stored in ``path``.

    Raises:
        UnsupportedFormatError: Suffix is neither .json nor .txt.
        FactIOError: The file could not be opened or read.
        FactParseError: The content could not be decoded into facts.
    """
    fn = str(path)
    # Dotfiles such as ".json" have no Path suffix but still name a format.
    if fn.endswith(JSON_SUFFIX):
        return _load_json(fn)
    if fn.endswith(TEXT_SUFFIX):
        return _load_lines(fn)
    raise UnsupportedFormatError(fn, Path(fn).suffix)


def _load_json(fn: str) -> FactCollection:
    try:
        with open(fn, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise FactIOError(f"unable to read {fn!r}: {e}", data={"path": fn}) from e
    try:
        return tuple(_FACT_LIST.validate_json(raw))
    except ValidationError as e:
        raise FactParseError(
            f"{fn!r} is not a JSON array of {{text, id}} objects: "
            f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}",
            data={"path": fn},
        ) from e


def _load_lines(fn: str) -> FactCollection:
    try:
        with open(fn, encoding="utf-8") as f:
            return tuple(
                Fact(text=line.rstrip("\r\n"), id=lineno)
                for lineno, line in enumerate(f)
            )
    except UnicodeDecodeError as e:
        raise FactParseError(f"{fn!r} is not valid UTF-8: {e}", data={"path": fn}) from e
    except OSError as e:
        raise FactIOError(f"unable to read {fn!r}: {e}", data={"path": fn}) from e


def load_collection(path: str | os.PathLike[str], label: str) -> FactCollection:
    """Load a fact file that must contain at least one fact.

    Raises:
        LoadError: Any failure from ``load_facts``, or EmptyCollectionError.
    """
    facts = load_facts(path)
    if not facts:
        raise EmptyCollectionError(
            f"no {label} facts available in {str(path)!r}", data={"path": str(path)}
        )
    logging.info(f"🥕 Loaded {len(facts)} {label} facts")
    return facts

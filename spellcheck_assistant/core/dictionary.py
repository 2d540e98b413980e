# dictionary.py
"""
Dictionary - the fixed word corpus behind the spell checker.

 - normalize_words() is the single normalization step; both the exact
   membership set and the BK-tree are built from its output.
 - Dictionary is immutable after construction (frozenset backed).
 - read_word_file() reads a plain word list, one word per line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

logger = logging.getLogger(__name__)


class DictionaryLoadError(OSError):
    """Raised when a word list cannot be read or decoded."""


def normalize_word(raw: str) -> str:
    """Trim + lowercase."""
    return raw.strip().lower()


def normalize_words(words: Iterable[str]) -> List[str]:
    """
    Normalize each entry, drop empties and non-strings, keep first-occurrence order.
    """
    seen = set()
    out: List[str] = []
    for raw in words:
        if not isinstance(raw, str):
            continue
        w = normalize_word(raw)
        if not w or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


class Dictionary:
    """Exact-membership set of normalized words."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words = frozenset(words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"


def read_word_file(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """Read a word list, one entry per line. Entries are returned raw."""
    p = Path(path)
    try:
        text = p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"cannot read word list {p}: {e}") from e
    lines = text.splitlines()
    logger.debug("read %d lines from %s", len(lines), p)
    return lines

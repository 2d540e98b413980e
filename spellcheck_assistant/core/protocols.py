# spellcheck_assistant/core/protocols.py
"""
Protocol interfaces for the collaborators of the spell checking engine.

The service depends on these small shapes rather than on concrete classes:
the metric index it queries, the dictionary source it loads from, and the
document/cursor provider that feeds it live text. The TypedDicts describe
the plain-data payloads returned by `as_dict()` on query results.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol, runtime_checkable
from typing_extensions import TypedDict


# Plain-data payloads ---------------------------------------------------------

class SuggestionDict(TypedDict):
    word: str
    distance: int


class CursorContextDict(TypedDict):
    """
    Example:
      {"current_token": "teh", "is_known": False, "status": "ok",
       "suggestions": [{"word": "the", "distance": 1}, ...]}
    """
    current_token: str
    is_known: bool
    suggestions: List[SuggestionDict]
    status: str


class UnknownTokensDict(TypedDict):
    tokens: List[str]
    status: str


# Protocols ------------------------------------------------------------------

@runtime_checkable
class MetricIndexProtocol(Protocol):
    """Interface of the fuzzy index (BKTree) used by SpellCheckService."""

    def insert(self, word: str) -> bool:
        ...

    def insert_many(self, words: Iterable[str]) -> int:
        ...

    def search(self, word: str, tolerance: int, limit: int = 20) -> list:
        """
        Return list of (word, distance) sorted by distance, then word.
        """
        ...

    def words(self) -> Iterable[str]:
        ...

    def size(self) -> int:
        ...

    def depth(self) -> int:
        ...


@runtime_checkable
class DictionarySourceProtocol(Protocol):
    """Zero-argument callable yielding candidate word strings (one load per service)."""

    def __call__(self) -> Iterable[str]:
        ...


@runtime_checkable
class DocumentProviderProtocol(Protocol):
    """Live text source: full document text plus a zero-based cursor offset."""

    def get_text(self) -> str:
        ...

    def get_cursor_offset(self) -> int:
        ...

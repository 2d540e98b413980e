# spellcheck_assistant/core/spell_checker.py
"""
SpellCheckService - dictionary-backed fuzzy lookup over a live document.

Purpose:
 - Load the word corpus once (Loading -> Ready, or Loading -> Failed).
 - Keep an exact-membership Dictionary and a BKTree built from the same
   normalized word list, published together.
 - Answer two query shapes on every document change:
     analyze_cursor_context(text, cursor_offset, tolerance)
       -> is the token under the cursor known, and if not what are the best corrections?
     find_unknown_tokens(text)
       -> which distinct tokens in the document are unknown?
 - Return plain frozen dataclasses; nothing references tree internals.

Queries never raise for per-query anomalies (empty token, negative tolerance,
empty dictionary). A failed load is reported through QueryStatus.UNAVAILABLE
on every query so callers can tell "no misspellings" from "checker not operating".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from spellcheck_assistant.context.tokenizer import (
    MIN_CHECKED_LENGTH,
    is_checkable,
    token_at_cursor,
    tokenize,
)
from spellcheck_assistant.core.bktree import DEFAULT_RESULT_LIMIT, BKTree, Suggestion
from spellcheck_assistant.core.dictionary import Dictionary, normalize_word, normalize_words, read_word_file
from spellcheck_assistant.core.distance import DistanceMetric, levenshtein
from spellcheck_assistant.core.protocols import (
    CursorContextDict,
    DictionarySourceProtocol,
    DocumentProviderProtocol,
    MetricIndexProtocol,
    UnknownTokensDict,
)
from spellcheck_assistant.utils.logger_utils import Log

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 2
DEFAULT_NEIGHBOR_RADIUS = 1


class ServiceState(Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class QueryStatus(Enum):
    OK = "ok"
    LOADING = "loading"
    UNAVAILABLE = "unavailable"  # dictionary failed to load


class DictionaryUnavailable(RuntimeError):
    """Raised by require_ready() when the dictionary failed to load."""


# -------------------------
# Structured return objects
# -------------------------
@dataclass(frozen=True)
class CursorContext:
    """
    Result of analyze_cursor_context().
    is_known is True whenever there is nothing to flag (short/empty token,
    or the service is not ready).
    """

    current_token: str = ""
    is_known: bool = True
    suggestions: Tuple[Suggestion, ...] = ()
    status: QueryStatus = QueryStatus.OK

    @property
    def available(self) -> bool:
        return self.status is QueryStatus.OK

    def as_dict(self) -> CursorContextDict:
        return {
            "current_token": self.current_token,
            "is_known": self.is_known,
            "suggestions": [{"word": s.word, "distance": s.distance} for s in self.suggestions],
            "status": self.status.value,
        }


@dataclass(frozen=True)
class UnknownTokens:
    """Result of find_unknown_tokens(): distinct lowercase tokens, first-occurrence order."""

    tokens: Tuple[str, ...] = ()
    status: QueryStatus = QueryStatus.OK

    @property
    def available(self) -> bool:
        return self.status is QueryStatus.OK

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    def as_dict(self) -> UnknownTokensDict:
        return {"tokens": list(self.tokens), "status": self.status.value}


@dataclass(frozen=True)
class DocumentReport:
    """Both query shapes for one document change."""

    context: CursorContext = field(default_factory=CursorContext)
    unknown: UnknownTokens = field(default_factory=UnknownTokens)

    @property
    def error_count(self) -> int:
        return len(self.unknown)

    @property
    def status(self) -> QueryStatus:
        return self.context.status


class SpellCheckService:
    """
    Owns one Dictionary + BKTree pair and answers queries against live text.

    Public API:
      - load_dictionary(words) / load_from_source(source) / load_word_file(path)
      - mark_failed(reason)
      - analyze_cursor_context(text, cursor_offset, tolerance=None)
      - find_unknown_tokens(text)
      - update(text, cursor_offset) / update_from(provider)
      - is_known(word), set_tolerance(n), stats(), reset(), require_ready()
    """

    def __init__(
        self,
        tolerance: int = DEFAULT_TOLERANCE,
        neighbor_radius: int = DEFAULT_NEIGHBOR_RADIUS,
        max_suggestions: int = DEFAULT_RESULT_LIMIT,
        min_token_length: int = MIN_CHECKED_LENGTH,
        metric: DistanceMetric = levenshtein,
    ):
        self.tolerance = int(tolerance)
        self.neighbor_radius = int(neighbor_radius)
        self.max_suggestions = int(max_suggestions)
        self.min_token_length = int(min_token_length)
        self.metric = metric

        self._state = ServiceState.LOADING
        self._dictionary = Dictionary()
        self._tree: MetricIndexProtocol = BKTree(metric)
        self.failure_reason: Optional[str] = None
        self.last_report: Optional[DocumentReport] = None

    # -------------------------
    # State
    # -------------------------
    @property
    def state(self) -> ServiceState:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state is ServiceState.READY

    def require_ready(self) -> None:
        """Raise DictionaryUnavailable after a failed load (no-op otherwise)."""
        if self._state is ServiceState.FAILED:
            raise DictionaryUnavailable(self.failure_reason or "dictionary unavailable")

    def _blocked_status(self) -> Optional[QueryStatus]:
        if self._state is ServiceState.READY:
            return None
        if self._state is ServiceState.FAILED:
            return QueryStatus.UNAVAILABLE
        return QueryStatus.LOADING

    # -------------------------
    # Loading
    # -------------------------
    def load_dictionary(self, words: Iterable[str]) -> ServiceState:
        """
        Normalize `words` (trim, lowercase, drop empties), then build the
        Dictionary and the BKTree from that one list in the given order.
        An error raised while reading `words` marks the service FAILED.
        """
        if self._state is not ServiceState.LOADING:
            logger.warning("dictionary already %s; ignoring reload", self._state.value)
            return self._state

        try:
            with Log.time_block("dictionary build"):
                normalized = normalize_words(words)
                dictionary = Dictionary(normalized)
                tree = BKTree(self.metric)
                tree.insert_many(normalized)
        except Exception as e:
            self.mark_failed(f"{type(e).__name__}: {e}")
            return self._state

        # publish both together
        self._dictionary, self._tree = dictionary, tree
        self._state = ServiceState.READY
        logger.info("dictionary ready: %d words, tree depth %d", len(dictionary), tree.depth())
        return self._state

    def load_from_source(self, source: DictionarySourceProtocol) -> ServiceState:
        """Call the dictionary source once and load what it yields."""
        if self._state is not ServiceState.LOADING:
            logger.warning("dictionary already %s; ignoring reload", self._state.value)
            return self._state
        try:
            words = source()
        except Exception as e:
            self.mark_failed(f"{type(e).__name__}: {e}")
            return self._state
        return self.load_dictionary(words)

    def load_word_file(self, path: Union[str, Path], encoding: str = "utf-8") -> ServiceState:
        """Load a newline separated word list from disk."""
        return self.load_from_source(lambda: read_word_file(path, encoding=encoding))

    def mark_failed(self, reason: str) -> None:
        """Record an upstream load failure. Terminal."""
        if self._state is not ServiceState.LOADING:
            logger.warning("cannot mark %s service as failed", self._state.value)
            return
        self._state = ServiceState.FAILED
        self.failure_reason = reason
        logger.error("dictionary load failed: %s", reason)

    # -------------------------
    # Queries
    # -------------------------
    def set_tolerance(self, tolerance: int) -> None:
        self.tolerance = int(tolerance)

    def is_known(self, word: str) -> bool:
        """Exact (normalized) membership; False unless the dictionary is ready."""
        if not self.ready or not isinstance(word, str):
            return False
        return normalize_word(word) in self._dictionary

    def _search(self, token: str, tolerance: int) -> List[Suggestion]:
        if tolerance < 0:
            logger.debug("negative tolerance %d for %r; no suggestions", tolerance, token)
            return []
        return self._tree.search(token, tolerance, limit=self.max_suggestions)

    def suggest(
        self, word: str, tolerance: Optional[int] = None, limit: Optional[int] = None
    ) -> List[Suggestion]:
        """
        Ranked dictionary words within `tolerance` of the normalized `word`.
        `tolerance` and `limit` default to the service settings.
        """
        if not self.ready or not isinstance(word, str):
            return []
        tol = self.tolerance if tolerance is None else int(tolerance)
        if tol < 0:
            return []
        cap = self.max_suggestions if limit is None else int(limit)
        return self._tree.search(normalize_word(word), tol, limit=cap)

    def vocabulary(self) -> List[str]:
        """Copy of the indexed words in insertion order."""
        return list(self._tree.words())

    def analyze_cursor_context(
        self, text: str, cursor_offset: int, tolerance: Optional[int] = None
    ) -> CursorContext:
        """
        Check the alphabetic run ending at `cursor_offset`.
        Unknown token -> corrections within `tolerance` (service default when None).
        Known token -> near neighbours within neighbor_radius, excluding itself.
        """
        blocked = self._blocked_status()
        if blocked is not None:
            return CursorContext(status=blocked)

        token = token_at_cursor(text or "", cursor_offset).lower()
        if not is_checkable(token, self.min_token_length):
            return CursorContext(current_token=token)

        if token not in self._dictionary:
            tol = self.tolerance if tolerance is None else int(tolerance)
            return CursorContext(
                current_token=token,
                is_known=False,
                suggestions=tuple(self._search(token, tol)),
            )

        neighbours = [s for s in self._search(token, self.neighbor_radius) if s.word != token]
        return CursorContext(current_token=token, is_known=True, suggestions=tuple(neighbours))

    def find_unknown_tokens(self, text: str) -> UnknownTokens:
        """Distinct lowercase tokens (length >= min_token_length) missing from the dictionary."""
        blocked = self._blocked_status()
        if blocked is not None:
            return UnknownTokens(status=blocked)

        seen = set()
        unknown: List[str] = []
        for raw in tokenize(text or ""):
            tok = raw.lower()
            if tok in seen:
                continue
            seen.add(tok)
            if is_checkable(tok, self.min_token_length) and tok not in self._dictionary:
                unknown.append(tok)
        return UnknownTokens(tokens=tuple(unknown))

    def update(self, text: str, cursor_offset: int, tolerance: Optional[int] = None) -> DocumentReport:
        """Run both queries for one document change; supersedes the previous report."""
        report = DocumentReport(
            context=self.analyze_cursor_context(text, cursor_offset, tolerance),
            unknown=self.find_unknown_tokens(text),
        )
        self.last_report = report
        return report

    def update_from(self, provider: DocumentProviderProtocol, tolerance: Optional[int] = None) -> DocumentReport:
        return self.update(provider.get_text(), provider.get_cursor_offset(), tolerance)

    def reset(self) -> None:
        """Drop the last derived report (the dictionary stays loaded)."""
        self.last_report = None

    def stats(self) -> Dict[str, Any]:
        return {
            "state": self._state.value,
            "words": len(self._dictionary),
            "nodes": self._tree.size(),
            "depth": self._tree.depth(),
            "tolerance": self.tolerance,
            "neighbor_radius": self.neighbor_radius,
            "failure": self.failure_reason,
        }

"""
spellcheck_assistant.core

The spell checking engine.
Contains:
 - edit distance metric (levenshtein)
 - BK-tree metric index (BKTree, Suggestion)
 - immutable word set and word-list reading (Dictionary)
 - the query service (SpellCheckService) and its result types
"""

from .distance import levenshtein
from .bktree import BKTree, Suggestion, linear_search
from .dictionary import Dictionary, DictionaryLoadError, normalize_words, read_word_file
from .spell_checker import (
    CursorContext,
    DictionaryUnavailable,
    DocumentReport,
    QueryStatus,
    ServiceState,
    SpellCheckService,
    UnknownTokens,
)

__all__ = [
    "levenshtein",
    "BKTree",
    "Suggestion",
    "linear_search",
    "Dictionary",
    "DictionaryLoadError",
    "normalize_words",
    "read_word_file",
    "CursorContext",
    "DictionaryUnavailable",
    "DocumentReport",
    "QueryStatus",
    "ServiceState",
    "SpellCheckService",
    "UnknownTokens",
]

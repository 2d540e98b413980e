"""
spellcheck_assistant

Dictionary-backed fuzzy spell checking over live text.
 - Levenshtein edit distance (core.distance)
 - BK-tree metric index with triangle-inequality pruning (core.bktree)
 - SpellCheckService: unknown-token detection and ranked corrections (core.spell_checker)
"""

from .core import (
    BKTree,
    CursorContext,
    Dictionary,
    DictionaryLoadError,
    DictionaryUnavailable,
    DocumentReport,
    QueryStatus,
    ServiceState,
    SpellCheckService,
    Suggestion,
    UnknownTokens,
    levenshtein,
)

__all__ = [
    "BKTree",
    "CursorContext",
    "Dictionary",
    "DictionaryLoadError",
    "DictionaryUnavailable",
    "DocumentReport",
    "QueryStatus",
    "ServiceState",
    "SpellCheckService",
    "Suggestion",
    "UnknownTokens",
    "levenshtein",
]

__version__ = "0.1.0"

# spellcheck_assistant/context/tokenizer.py
# tokens are maximal runs of ASCII letters; the same rule serves both
# whole-document scanning and the token under the cursor

import re
import string
from typing import List

_word_re = re.compile(r"[A-Za-z]+")
_LETTERS = frozenset(string.ascii_letters)

MIN_CHECKED_LENGTH = 3


def tokenize(s: str) -> List[str]:
    """Return every alphabetic run in `s`, original case, in document order."""
    if not s:
        return []
    return _word_re.findall(s)


def token_at_cursor(s: str, cursor_offset: int) -> str:
    """
    Return the alphabetic run ending exactly at `cursor_offset` ('' if the
    character before the cursor is not a letter). Offset is clamped to the text.
    """
    if not s:
        return ""
    offset = max(0, min(int(cursor_offset), len(s)))
    start = offset
    while start > 0 and s[start - 1] in _LETTERS:
        start -= 1
    return s[start:offset]


def is_checkable(token: str, min_length: int = MIN_CHECKED_LENGTH) -> bool:
    """Tokens shorter than `min_length` are never flagged."""
    return len(token) >= min_length

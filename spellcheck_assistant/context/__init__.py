# spellcheck_assistant/context/__init__.py
# tokenizer contract shared by document scanning and cursor extraction

from .tokenizer import tokenize, token_at_cursor, is_checkable, MIN_CHECKED_LENGTH

__all__ = [
    "tokenize",
    "token_at_cursor",
    "is_checkable",
    "MIN_CHECKED_LENGTH",
]

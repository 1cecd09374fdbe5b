"""Lexical tokenizer turning markup into ordered Tag/Text tokens."""

from domdiff.tokenizer.models import Token, TokenKind
from domdiff.tokenizer.tokenizer import TAG_PATTERN, tokenize

__all__ = [
    "TAG_PATTERN",
    "Token",
    "TokenKind",
    "tokenize",
]

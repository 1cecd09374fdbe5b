"""Single-pass markup tokenizer.

No nesting or validity checks are made. Anything that does not match
``TAG_PATTERN`` (an unclosed ``<`` for instance) is carried through as
text, so every input string is tokenizable.
"""

from __future__ import annotations

import bisect
import re

from domdiff.tokenizer.models import Token, TokenKind

TAG_PATTERN = re.compile(r"<[^>]+>")

_LEADING_WS_RE = re.compile(r"\s*")


def _newline_offsets(markup: str) -> list[int]:
    """Sorted offsets of every ``\\n`` in *markup*."""
    return [i for i, ch in enumerate(markup) if ch == "\n"]


def _line_at(newlines: list[int], offset: int) -> int:
    """1-based line number of *offset*: one plus the newlines before it."""
    return bisect.bisect_left(newlines, offset) + 1


def _text_token(markup: str, start: int, end: int, newlines: list[int]) -> Token | None:
    segment = markup[start:end]
    text = segment.strip()
    if not text:
        return None
    # Report the line the visible text starts on, not where its padding does
    lead = _LEADING_WS_RE.match(segment).end()
    return Token(TokenKind.TEXT, text, _line_at(newlines, start + lead))


def tokenize(markup: str) -> list[Token]:
    """Split *markup* into ordered Tag/Text tokens.

    Text between tags is stripped and dropped when empty. Tags have their
    internal whitespace collapsed to single spaces; attribute order is kept.
    """
    newlines = _newline_offsets(markup)
    tokens: list[Token] = []
    last_end = 0

    for match in TAG_PATTERN.finditer(markup):
        if match.start() > last_end:
            text = _text_token(markup, last_end, match.start(), newlines)
            if text is not None:
                tokens.append(text)

        tag = " ".join(match.group().split())
        if tag:
            tokens.append(Token(TokenKind.TAG, tag, _line_at(newlines, match.start())))
        last_end = match.end()

    if last_end < len(markup):
        text = _text_token(markup, last_end, len(markup), newlines)
        if text is not None:
            tokens.append(text)

    return tokens

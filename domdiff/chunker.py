"""Group tokens into fixed-size chunks for hashing."""

from __future__ import annotations

from collections.abc import Sequence

from domdiff.tokenizer import Token

CHUNK_DELIMITER = "\n"


def _as_text(token: Token | str) -> str:
    return token.normalized if isinstance(token, Token) else token


def chunk(tokens: Sequence[Token | str], chunk_size: int = 1) -> list[str]:
    """Partition *tokens* into consecutive groups joined by ``CHUNK_DELIMITER``.

    Every group holds exactly *chunk_size* tokens except possibly the last.
    A *chunk_size* of 1 or less means no aggregation: one chunk per token.
    """
    texts = [_as_text(t) for t in tokens]
    if chunk_size <= 1:
        return texts
    return [
        CHUNK_DELIMITER.join(texts[i : i + chunk_size])
        for i in range(0, len(texts), chunk_size)
    ]

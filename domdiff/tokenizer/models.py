"""Data models for the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    TAG = "TAG"
    TEXT = "TEXT"


@dataclass(frozen=True)
class Token:
    """A single tag run or text run, with the 1-based line it starts on."""

    kind: TokenKind
    content: str
    line: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")

    @property
    def normalized(self) -> str:
        """Kind-prefixed content, e.g. ``TAG:<div>`` or ``TEXT:Hi``."""
        return f"{self.kind.value}:{self.content}"

    def __str__(self) -> str:
        return self.normalized

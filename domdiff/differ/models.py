"""Data models for the differ subsystem."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum


@dataclass(frozen=True)
class DiffResult:
    """Distinct-content divergence between two digest collections."""

    percent_different: float = 0.0
    total_distinct_a: int = 0
    total_distinct_b: int = 0
    total: int = 0
    common: int = 0
    different: int = 0

    def __post_init__(self) -> None:
        if not 0.0 <= self.percent_different <= 100.0:
            raise ValueError(
                f"percent_different must be within [0, 100], got {self.percent_different}"
            )

    @property
    def identical(self) -> bool:
        return self.different == 0

    def to_dict(self) -> dict:
        return asdict(self)


class ChangeType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class LineDiffEntry:
    """A run of consecutive lines whose tokens were added or removed."""

    start_line: int
    end_line: int
    change_type: ChangeType
    content_preview: str

    @property
    def line_range(self) -> str:
        if self.start_line == self.end_line:
            return f"L{self.start_line}"
        return f"L{self.start_line}-L{self.end_line}"

    def to_dict(self) -> dict:
        return {
            "line_range": self.line_range,
            "change_type": self.change_type.value,
            "content_preview": self.content_preview,
        }

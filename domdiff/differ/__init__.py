"""Set-level and line-level comparison of two documents."""

from domdiff.differ.line_diff import PREVIEW_LIMIT, line_diff
from domdiff.differ.models import ChangeType, DiffResult, LineDiffEntry
from domdiff.differ.set_diff import diff

__all__ = [
    "PREVIEW_LIMIT",
    "ChangeType",
    "DiffResult",
    "LineDiffEntry",
    "diff",
    "line_diff",
]

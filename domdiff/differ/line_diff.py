"""Map token-level additions and removals back to line ranges."""

from __future__ import annotations

from collections.abc import Sequence

from domdiff.differ.models import ChangeType, LineDiffEntry
from domdiff.tokenizer import Token

PREVIEW_LIMIT = 100

# Tokens quoted verbatim in a preview before the rest are summarised
_PREVIEW_SAMPLES = 2

_PREFIX = {ChangeType.ADDED: "+ ", ChangeType.REMOVED: "- "}


def _group_runs(tokens: list[Token]) -> list[list[Token]]:
    """Split line-sorted tokens into runs of consecutive line numbers."""
    runs: list[list[Token]] = []
    for token in tokens:
        if runs and token.line - runs[-1][-1].line <= 1:
            runs[-1].append(token)
        else:
            runs.append([token])
    return runs


def _preview(run: list[Token], change_type: ChangeType) -> str:
    # Repeated tokens (every <li> of a list, say) are quoted and counted once
    distinct = list(dict.fromkeys(t.normalized for t in run))
    samples = " ".join(distinct[:_PREVIEW_SAMPLES])
    extra = len(distinct) - _PREVIEW_SAMPLES
    if extra > 0:
        samples += f" ... ({extra} more)"
    return (_PREFIX[change_type] + samples)[:PREVIEW_LIMIT]


def _entries(tokens: list[Token], change_type: ChangeType) -> list[LineDiffEntry]:
    ordered = sorted(tokens, key=lambda t: t.line)
    return [
        LineDiffEntry(
            start_line=run[0].line,
            end_line=run[-1].line,
            change_type=change_type,
            content_preview=_preview(run, change_type),
        )
        for run in _group_runs(ordered)
    ]


def line_diff(tokens_a: Sequence[Token], tokens_b: Sequence[Token]) -> list[LineDiffEntry]:
    """Report lines whose token content appears on only one side.

    Tokens are matched by normalized content alone, so a token that moved
    to another line without changing is not reported. Added entries come
    first, then removed entries, each in ascending line order.
    """
    content_a = {t.normalized for t in tokens_a}
    content_b = {t.normalized for t in tokens_b}

    added = [t for t in tokens_b if t.normalized not in content_a]
    removed = [t for t in tokens_a if t.normalized not in content_b]

    return _entries(added, ChangeType.ADDED) + _entries(removed, ChangeType.REMOVED)

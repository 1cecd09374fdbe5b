"""Symmetric-difference ratio over two digest collections."""

from __future__ import annotations

from collections.abc import Iterable

from domdiff.differ.models import DiffResult


def diff(hashes_a: Iterable[str], hashes_b: Iterable[str]) -> DiffResult:
    """Compare the distinct digests of *hashes_a* and *hashes_b*.

    Order and repetition are ignored: a chunk that appears three times
    counts once. ``percent_different`` is the share of the union found on
    only one side, and 0.0 when both sides are empty.
    """
    set_a = set(hashes_a)
    set_b = set(hashes_b)

    total = len(set_a | set_b)
    common = len(set_a & set_b)
    different = len(set_a ^ set_b)
    percent = (different / total) * 100.0 if total else 0.0

    return DiffResult(
        percent_different=percent,
        total_distinct_a=len(set_a),
        total_distinct_b=len(set_b),
        total=total,
        common=common,
        different=different,
    )

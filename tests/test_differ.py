"""Tests for the set-diff engine and the line-diff reconstructor."""

from __future__ import annotations

import pytest

from domdiff.differ import PREVIEW_LIMIT, ChangeType, DiffResult, LineDiffEntry, diff, line_diff
from domdiff.hashing import compute_digest
from domdiff.tokenizer import Token, TokenKind, tokenize


def _digests(markup: str) -> list[str]:
    return [compute_digest(t.normalized) for t in tokenize(markup)]


# ── Set diff ─────────────────────────────────────────────────────────


def test_empty_case():
    result = diff([], [])
    assert result == DiffResult(
        percent_different=0.0, total_distinct_a=0, total_distinct_b=0, total=0, common=0, different=0
    )


def test_identity():
    assert diff(["a", "b", "c"], ["a", "b", "c"]).percent_different == 0.0


def test_full_divergence():
    assert diff(["a", "b"], ["c"]).percent_different == 100.0


def test_one_side_empty():
    result = diff(["a"], [])
    assert result.percent_different == 100.0
    assert result.total_distinct_b == 0


def test_partial_overlap_counts():
    result = diff(["a", "b"], ["b", "c"])
    assert result.total == 3
    assert result.common == 1
    assert result.different == 2
    assert result.total_distinct_a == 2
    assert result.total_distinct_b == 2
    assert result.percent_different == pytest.approx(200 / 3)


@pytest.mark.parametrize(
    "a, b",
    [
        (["a", "b"], ["b", "c"]),
        (["x"], []),
        (["a", "a", "b"], ["c", "d", "e", "f"]),
        ([], []),
    ],
)
def test_symmetry(a, b):
    assert diff(a, b).percent_different == diff(b, a).percent_different


def test_order_and_multiplicity_ignored():
    assert diff(["a", "a", "b"], ["b", "a"]).identical


def test_percent_bounds_enforced():
    with pytest.raises(ValueError):
        DiffResult(percent_different=101.0)


def test_diff_result_to_dict():
    data = diff(["a"], ["b"]).to_dict()
    assert data["percent_different"] == 100.0
    assert data["different"] == 2


def test_added_paragraph_changes_percent(markup_a, markup_b):
    assert diff(_digests(markup_a), _digests(markup_b)).percent_different > 0


# ── Line diff ────────────────────────────────────────────────────────


def test_added_paragraph_single_entry(markup_a, markup_b):
    entries = line_diff(tokenize(markup_a), tokenize(markup_b))
    assert len(entries) == 1
    entry = entries[0]
    assert entry.change_type is ChangeType.ADDED
    assert entry.line_range == "L1"
    assert entry.content_preview.startswith("+ TAG:<p>")
    assert entry.content_preview == "+ TAG:<p> TEXT:New ... (1 more)"


def test_identical_documents_have_no_line_diff(multiline_page):
    tokens = tokenize(multiline_page)
    assert line_diff(tokens, tokenize(multiline_page)) == []


def test_added_and_removed_ranges():
    a = "<ul>\n<li>one</li>\n<li>two</li>\n</ul>"
    b = "<ul>\n<li>one</li>\n<li>three</li>\n<li>four</li>\n</ul>"
    entries = line_diff(tokenize(a), tokenize(b))
    assert [(e.change_type, e.line_range, e.content_preview) for e in entries] == [
        (ChangeType.ADDED, "L3-L4", "+ TEXT:three TEXT:four"),
        (ChangeType.REMOVED, "L3", "- TEXT:two"),
    ]


def test_moved_content_is_invisible():
    a = "<p>x</p>\n<p>y</p>"
    b = "<p>y</p>\n<p>x</p>"
    assert line_diff(tokenize(a), tokenize(b)) == []


def test_non_consecutive_lines_split_runs():
    added = [Token(TokenKind.TEXT, "c", 3), Token(TokenKind.TEXT, "a", 1)]
    entries = line_diff([], added)
    assert [e.line_range for e in entries] == ["L1", "L3"]
    assert all(e.change_type is ChangeType.ADDED for e in entries)


def test_added_entries_precede_removed():
    a = [Token(TokenKind.TEXT, "old", 1)]
    b = [Token(TokenKind.TEXT, "new", 5)]
    entries = line_diff(a, b)
    assert [e.change_type for e in entries] == [ChangeType.ADDED, ChangeType.REMOVED]
    assert entries[1].content_preview == "- TEXT:old"


def test_preview_more_count():
    tokens = [Token(TokenKind.TEXT, f"t{i}", 2 + i // 3) for i in range(6)]
    (entry,) = line_diff([], tokens)
    assert entry.line_range == "L2-L3"
    assert entry.content_preview == "+ TEXT:t0 TEXT:t1 ... (4 more)"


def test_preview_truncated():
    long_text = "word " * 80
    entries = line_diff([], tokenize(f"<p>{long_text}</p>"))
    preview = entries[0].content_preview
    assert len(preview) == PREVIEW_LIMIT
    assert preview.startswith("+ TAG:<p> TEXT:word word")


def test_line_diff_entry_to_dict():
    entry = LineDiffEntry(start_line=4, end_line=9, change_type=ChangeType.REMOVED, content_preview="- x")
    assert entry.to_dict() == {
        "line_range": "L4-L9",
        "change_type": "removed",
        "content_preview": "- x",
    }


def test_preview_counts_repeated_tokens_once():
    (entry,) = line_diff([], tokenize("<ul><li>a</li><li>a</li><li>a</li></ul>"))
    assert entry.content_preview == "+ TAG:<ul> TAG:<li> ... (3 more)"


def test_preview_without_suffix_when_two_distinct():
    tokens = [Token(TokenKind.TEXT, "x", 1), Token(TokenKind.TEXT, "y", 1), Token(TokenKind.TEXT, "x", 2)]
    (entry,) = line_diff([], tokens)
    assert entry.line_range == "L1-L2"
    assert entry.content_preview == "+ TEXT:x TEXT:y"

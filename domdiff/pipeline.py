"""End-to-end comparison of two markup documents."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from domdiff.chunker import chunk
from domdiff.config import DomDiffConfig
from domdiff.differ import DiffResult, LineDiffEntry, diff, line_diff
from domdiff.hashing import HashCache, digest_all
from domdiff.merkle import build_merkle_tree, extract_leaves
from domdiff.tokenizer import Token, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentDigests:
    """Everything derived from one side of a comparison."""

    tokens: tuple[Token, ...]
    chunks: tuple[str, ...]
    digests: tuple[str, ...]
    root_hash: str | None = None


@dataclass(frozen=True)
class ComparisonResult:
    diff: DiffResult
    line_diffs: tuple[LineDiffEntry, ...] = ()
    root_a: str | None = None
    root_b: str | None = None
    chunk_count_a: int = 0
    chunk_count_b: int = 0
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def roots_match(self) -> bool:
        return self.root_a == self.root_b

    def to_dict(self) -> dict:
        return {
            "diff": self.diff.to_dict(),
            "line_diffs": [e.to_dict() for e in self.line_diffs],
            "root_a": self.root_a,
            "root_b": self.root_b,
            "chunk_count_a": self.chunk_count_a,
            "chunk_count_b": self.chunk_count_b,
            "timings": dict(self.timings),
        }


@contextmanager
def _timed(timings: dict[str, float], stage: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        timings[stage] = timings.get(stage, 0.0) + time.perf_counter() - start
        logger.debug("Stage %s took %.6fs", stage, timings[stage])


def digest_document(
    markup: str,
    config: DomDiffConfig,
    cache: HashCache | None = None,
    timings: dict[str, float] | None = None,
) -> DocumentDigests:
    """Tokenize, chunk and hash one document according to *config*.

    When the Merkle stage is enabled the digests returned are the leaves
    read back out of the tree, which are the chunk digests in order.
    """
    timings = timings if timings is not None else {}

    with _timed(timings, "tokenize"):
        tokens = tokenize(markup)
    with _timed(timings, "chunk"):
        chunks = chunk(tokens, config.chunk_size)
    with _timed(timings, "hash"):
        digests = digest_all(chunks, config.hash_kind, cache, config.workers)

    root_hash: str | None = None
    if config.merkle:
        with _timed(timings, "merkle"):
            root = build_merkle_tree(digests, config.hash_kind, config.workers)
            digests = extract_leaves(root)
            root_hash = root.hash if root is not None else None

    return DocumentDigests(
        tokens=tuple(tokens),
        chunks=tuple(chunks),
        digests=tuple(digests),
        root_hash=root_hash,
    )


def compare(
    markup_a: str,
    markup_b: str,
    config: DomDiffConfig | None = None,
    cache: HashCache | None = None,
) -> ComparisonResult:
    """Compare two documents and return the set diff plus line-level changes.

    A *cache* passed in may be shared across calls; otherwise a fresh one is
    scoped to this call when ``config.cache.enabled`` is set.
    """
    config = config or DomDiffConfig()
    if cache is None and config.cache.enabled:
        cache = HashCache(config.cache.max_entries)

    timings: dict[str, float] = {}
    side_a = digest_document(markup_a, config, cache, timings)
    side_b = digest_document(markup_b, config, cache, timings)

    with _timed(timings, "diff"):
        result = diff(side_a.digests, side_b.digests)

    entries: list[LineDiffEntry] = []
    if config.line_diff:
        with _timed(timings, "line_diff"):
            entries = line_diff(side_a.tokens, side_b.tokens)

    logger.info(
        "Compared %d vs %d chunks: %.2f%% different, %d line ranges changed",
        len(side_a.chunks),
        len(side_b.chunks),
        result.percent_different,
        len(entries),
    )

    return ComparisonResult(
        diff=result,
        line_diffs=tuple(entries),
        root_a=side_a.root_hash,
        root_b=side_b.root_hash,
        chunk_count_a=len(side_a.chunks),
        chunk_count_b=len(side_b.chunks),
        timings=timings,
    )

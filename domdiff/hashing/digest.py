"""Digest functions over chunk strings."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import TYPE_CHECKING

import xxhash

if TYPE_CHECKING:
    from domdiff.hashing.cache import HashCache


class HashKind(str, Enum):
    """Which hash function turns chunk bytes into a digest.

    ``FAST`` is 64-bit xxHash: a change-detection fingerprint, not collision
    resistant. ``CRYPTOGRAPHIC`` is SHA-256, for tamper evidence or when
    digests are compared across systems.
    """

    FAST = "xxh64"
    CRYPTOGRAPHIC = "sha256"


def compute_digest(chunk: str, kind: HashKind | str = HashKind.FAST) -> str:
    """Hex digest of the UTF-8 bytes of *chunk*. Never cached.

    *kind* may be a `HashKind` or its value (`"xxh64"`, `"sha256"`); anything
    else raises `ValueError`.
    """
    kind = HashKind(kind)
    data = chunk.encode("utf-8", "surrogatepass")
    if kind is HashKind.CRYPTOGRAPHIC:
        return hashlib.sha256(data).hexdigest()
    return xxhash.xxh64_hexdigest(data)


def digest(
    chunk: str,
    kind: HashKind | str = HashKind.FAST,
    cache: HashCache | None = None,
) -> str:
    """Digest *chunk*, going through *cache* when one is supplied."""
    if cache is None:
        return compute_digest(chunk, kind)
    return cache.get_or_compute(chunk, kind)


def digest_all(
    chunks: Sequence[str],
    kind: HashKind | str = HashKind.FAST,
    cache: HashCache | None = None,
    max_workers: int | None = None,
) -> list[str]:
    """Digest every chunk, preserving order.

    With *max_workers* above 1 the chunks are spread over a thread pool;
    no chunk's digest depends on another's.
    """
    if not max_workers or max_workers <= 1 or len(chunks) < 2:
        return [digest(c, kind, cache) for c in chunks]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda c: digest(c, kind, cache), chunks))

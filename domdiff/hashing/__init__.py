"""Chunk digests and the shared memoization table behind them."""

from domdiff.hashing.cache import DEFAULT_MAX_ENTRIES, HashCache
from domdiff.hashing.digest import HashKind, compute_digest, digest, digest_all

__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "HashCache",
    "HashKind",
    "compute_digest",
    "digest",
    "digest_all",
]

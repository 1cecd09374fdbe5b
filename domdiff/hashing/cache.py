"""Thread-safe memoization table for chunk digests."""

from __future__ import annotations

import logging
import threading

from domdiff.hashing.digest import HashKind, compute_digest

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10_000

# Seconds to wait on the table lock before recomputing without the cache
_LOCK_TIMEOUT = 0.05


class HashCache:
    """Digest cache keyed by hash kind and the exact chunk content.

    Once more than *max_entries* digests are stored, the whole table is
    flushed; there is no LRU bookkeeping. The cache only affects speed:
    when its lock cannot be taken in time, or the table misbehaves, the
    digest is computed directly and the caller never sees an error.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self._entries: dict[tuple[HashKind, str], str] = {}
        self._lock = threading.Lock()
        # Counters have their own lock so bypasses can be counted while the
        # table lock is held elsewhere
        self._stats_lock = threading.Lock()
        self._counts = {"hits": 0, "misses": 0, "flushes": 0, "bypasses": 0}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    @property
    def hits(self) -> int:
        return self._count("hits")

    @property
    def misses(self) -> int:
        return self._count("misses")

    @property
    def flushes(self) -> int:
        return self._count("flushes")

    @property
    def bypasses(self) -> int:
        return self._count("bypasses")

    def get_or_compute(self, chunk: str, kind: HashKind | str = HashKind.FAST) -> str:
        """Return the cached digest for *chunk*, computing and storing it on a miss."""
        kind = HashKind(kind)
        key = (kind, chunk)

        if not self._lock.acquire(timeout=_LOCK_TIMEOUT):
            return self._bypass(chunk, kind, "lock timeout on lookup")
        try:
            cached = self._entries.get(key)
            if isinstance(cached, str):
                self._incr("hits")
                return cached
            if cached is not None:
                # Something other than a digest got stored; drop it
                del self._entries[key]
                return self._bypass(chunk, kind, "corrupt entry")
        except Exception:
            logger.debug("Hash cache lookup failed", exc_info=True)
            return self._bypass(chunk, kind, "lookup failure")
        finally:
            self._lock.release()

        value = compute_digest(chunk, kind)

        if not self._lock.acquire(timeout=_LOCK_TIMEOUT):
            logger.debug("Hash cache bypassed: lock timeout on insert")
            self._incr("bypasses")
            return value
        try:
            # Concurrent misses on one key compute equal values; first write wins
            stored = self._entries.setdefault(key, value)
            self._incr("misses")
            if len(self._entries) > self.max_entries:
                logger.debug("Hash cache flushed at %d entries", len(self._entries))
                self._entries.clear()
                self._incr("flushes")
            return stored
        except Exception:
            logger.debug("Hash cache insert failed", exc_info=True)
            self._incr("bypasses")
            return value
        finally:
            self._lock.release()

    def clear(self) -> None:
        """Drop every stored digest. Counters are kept."""
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, int]:
        entries = len(self)
        with self._stats_lock:
            return {"entries": entries, **self._counts}

    def _count(self, name: str) -> int:
        with self._stats_lock:
            return self._counts[name]

    def _incr(self, name: str) -> None:
        with self._stats_lock:
            self._counts[name] += 1

    def _bypass(self, chunk: str, kind: HashKind, reason: str) -> str:
        logger.debug("Hash cache bypassed: %s", reason)
        self._incr("bypasses")
        return compute_digest(chunk, kind)

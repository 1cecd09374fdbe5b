from pydantic import BaseModel, Field
from typing import Literal

from domdiff.hashing import DEFAULT_MAX_ENTRIES, HashKind


class CacheConfig(BaseModel):
    enabled: bool = True
    max_entries: int = Field(default=DEFAULT_MAX_ENTRIES, gt=0)


class DomDiffConfig(BaseModel):
    # 0 and 1 both mean one chunk per token
    chunk_size: int = Field(default=1, ge=0)
    hash_kind: HashKind = HashKind.FAST
    parallel: bool = False
    max_workers: int = Field(default=4, gt=0)
    merkle: bool = True
    line_diff: bool = True
    cache: CacheConfig = Field(default_factory=CacheConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"

    @property
    def workers(self) -> int | None:
        """Pool size handed to hashing calls, or None when running sequentially."""
        return self.max_workers if self.parallel else None

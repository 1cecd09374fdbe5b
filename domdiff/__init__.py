"""domdiff - chunk-hash change detection and line diffs for markup documents."""

from domdiff.chunker import CHUNK_DELIMITER, chunk
from domdiff.config import DomDiffConfig, load_config
from domdiff.differ import ChangeType, DiffResult, LineDiffEntry, diff, line_diff
from domdiff.hashing import HashCache, HashKind, compute_digest, digest, digest_all
from domdiff.merkle import MerkleNode, build_merkle_tree, extract_leaves
from domdiff.pipeline import ComparisonResult, compare
from domdiff.tokenizer import Token, TokenKind, tokenize

__version__ = "0.1.0"

__all__ = [
    "CHUNK_DELIMITER",
    "ChangeType",
    "ComparisonResult",
    "DiffResult",
    "DomDiffConfig",
    "HashCache",
    "HashKind",
    "LineDiffEntry",
    "MerkleNode",
    "Token",
    "TokenKind",
    "build_merkle_tree",
    "chunk",
    "compare",
    "compute_digest",
    "diff",
    "digest",
    "digest_all",
    "extract_leaves",
    "line_diff",
    "load_config",
    "tokenize",
]

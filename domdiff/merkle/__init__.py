"""Binary Merkle tree over ordered chunk digests."""

from domdiff.merkle.models import MerkleNode
from domdiff.merkle.tree import (
    build_merkle_tree,
    combine_hashes,
    extract_leaves,
    tree_height,
)

__all__ = [
    "MerkleNode",
    "build_merkle_tree",
    "combine_hashes",
    "extract_leaves",
    "tree_height",
]

"""Data models for the Merkle tree subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MerkleNode:
    """A leaf holding one chunk digest, or a parent of one or two subtrees."""

    hash: str
    left: MerkleNode | None = None
    right: MerkleNode | None = None
    leaf_count: int = 1

    def __post_init__(self) -> None:
        if not self.hash:
            raise ValueError("hash must be a non-empty hex string")
        if self.right is not None and self.left is None:
            raise ValueError("a node with a right child must have a left child")

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

"""Bottom-up Merkle tree construction and traversal.

Adjacent nodes are paired left to right and hashed together; an odd node
at the end of a level is promoted as-is rather than duplicated. Each level
is finished before the next one starts.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from domdiff.hashing import HashKind, compute_digest
from domdiff.merkle.models import MerkleNode

logger = logging.getLogger(__name__)


def combine_hashes(left: str, right: str, kind: HashKind = HashKind.FAST) -> str:
    """Parent hash: the digest of the two child hashes concatenated."""
    return compute_digest(left + right, kind)


def _pair(left: MerkleNode, right: MerkleNode, kind: HashKind) -> MerkleNode:
    return MerkleNode(
        hash=combine_hashes(left.hash, right.hash, kind),
        left=left,
        right=right,
        leaf_count=left.leaf_count + right.leaf_count,
    )


def _next_level(
    level: list[MerkleNode],
    kind: HashKind,
    pool: ThreadPoolExecutor | None,
) -> list[MerkleNode]:
    lefts = level[0::2]
    rights = level[1::2]
    if pool is not None:
        parents = list(pool.map(lambda pair: _pair(*pair, kind), zip(lefts, rights)))
    else:
        parents = [_pair(l, r, kind) for l, r in zip(lefts, rights)]
    if len(level) % 2:
        parents.append(level[-1])
    return parents


def build_merkle_tree(
    digests: Sequence[str],
    kind: HashKind = HashKind.FAST,
    max_workers: int | None = None,
) -> MerkleNode | None:
    """Build a tree whose leaves are *digests* in order; ``None`` when empty.

    With *max_workers* above 1 the parent hashes of one level are computed
    on a thread pool.
    """
    if not digests:
        return None

    level = [MerkleNode(hash=d) for d in digests]
    pool = ThreadPoolExecutor(max_workers=max_workers) if max_workers and max_workers > 1 else None
    try:
        depth = 0
        while len(level) > 1:
            level = _next_level(level, kind, pool)
            depth += 1
    finally:
        if pool is not None:
            pool.shutdown()

    logger.debug("Built Merkle tree over %d leaves, height %d", len(digests), depth)
    return level[0]


def extract_leaves(root: MerkleNode | None) -> list[str]:
    """Leaf hashes in left-to-right order, walked with an explicit stack."""
    if root is None:
        return []
    leaves: list[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            leaves.append(node.hash)
            continue
        # Right is pushed first so the left subtree is visited first
        if node.right is not None:
            stack.append(node.right)
        stack.append(node.left)
    return leaves


def tree_height(root: MerkleNode | None) -> int:
    """Edges on the longest root-to-leaf path; 0 for a lone leaf or no tree."""
    if root is None:
        return 0
    height = 0
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        height = max(height, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return height

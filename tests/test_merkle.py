"""Tests for the Merkle aggregator."""

from __future__ import annotations

import math

import pytest

from domdiff.chunker import chunk
from domdiff.hashing import HashKind, compute_digest, digest_all
from domdiff.merkle import (
    MerkleNode,
    build_merkle_tree,
    combine_hashes,
    extract_leaves,
    tree_height,
)
from domdiff.tokenizer import tokenize


def _leaves(n: int) -> list[str]:
    return [compute_digest(f"chunk-{i}") for i in range(n)]


# ── Node model ───────────────────────────────────────────────────────


def test_node_requires_hash():
    with pytest.raises(ValueError):
        MerkleNode(hash="")


def test_leaf_node():
    node = MerkleNode(hash="ab")
    assert node.is_leaf
    assert node.leaf_count == 1


# ── Build ────────────────────────────────────────────────────────────


def test_empty_input_yields_no_tree():
    assert build_merkle_tree([]) is None
    assert extract_leaves(None) == []
    assert tree_height(None) == 0


def test_single_leaf_is_root():
    root = build_merkle_tree(["abc"])
    assert root == MerkleNode(hash="abc")
    assert tree_height(root) == 0


def test_pair_hash():
    root = build_merkle_tree(["a", "b"])
    assert root.hash == combine_hashes("a", "b") == compute_digest("ab")
    assert root.leaf_count == 2


def test_odd_node_promoted_unchanged():
    root = build_merkle_tree(["a", "b", "c"])
    assert root.right == MerkleNode(hash="c")
    assert root.hash == combine_hashes(combine_hashes("a", "b"), "c")


def test_cryptographic_kind():
    root = build_merkle_tree(["a", "b"], HashKind.CRYPTOGRAPHIC)
    assert root.hash == compute_digest("ab", HashKind.CRYPTOGRAPHIC)


def test_order_matters_for_root():
    assert build_merkle_tree(["a", "b"]).hash != build_merkle_tree(["b", "a"]).hash


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 8, 9, 16, 17, 33])
def test_height_is_ceil_log2(n):
    root = build_merkle_tree(_leaves(n))
    assert tree_height(root) == math.ceil(math.log2(n))
    assert root.leaf_count == n


@pytest.mark.parametrize("n", [1, 2, 5, 64, 101])
def test_parallel_build_matches_sequential(n):
    digests = _leaves(n)
    assert build_merkle_tree(digests, max_workers=4) == build_merkle_tree(digests)


# ── Leaf extraction ──────────────────────────────────────────────────


@pytest.mark.parametrize("n", [1, 2, 3, 6, 11, 32])
def test_leaves_in_original_order(n):
    digests = _leaves(n)
    assert extract_leaves(build_merkle_tree(digests)) == digests


def test_leaves_keep_duplicates():
    digests = ["a", "a", "b"]
    assert extract_leaves(build_merkle_tree(digests)) == digests


def test_leaf_equivalence_with_flat_hashing(multiline_page):
    for size in (1, 2, 3):
        digests = digest_all(chunk(tokenize(multiline_page), size))
        assert set(extract_leaves(build_merkle_tree(digests))) == set(digests)


def test_deep_tree_does_not_recurse():
    digests = _leaves(5000)
    assert extract_leaves(build_merkle_tree(digests)) == digests

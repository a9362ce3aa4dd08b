"""
Merkle Commitments
Root reconstruction, batched range updates and complete-tree helpers.

This module provides:
- compute_root: Fold a leaf and its authentication path into a root
- update_root: Recompute the root after writing a contiguous run of leaves
- empty_subtree_defaults / build_tree_levels / extract_path: Produce the
  per-call inputs the two functions above consume
- CommitmentProof, MerkleProver, MerkleVerifier: Class-based wrappers

Usage:
    from shielded_core.crypto import HashEngine
    from shielded_core.merkle import compute_root, update_root, empty_subtree_defaults

    hasher = HashEngine()
    defaults = empty_subtree_defaults(hasher, height)
    new_root = update_root(hasher, siblings, index, new_leaves, defaults)
"""
from .path_root import (
    AuthenticationPath,
    PathEntry,
    compute_root,
    incomplete_input_error,
    missing_path_levels,
)
from .batch_update import update_root
from .tree import (
    MAX_TREE_HEIGHT,
    build_tree_levels,
    compute_tree_root,
    empty_subtree_defaults,
    extract_path,
    sibling_hashes,
    tree_capacity,
)
from .merkle_proofs import (
    CommitmentProof,
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Core types
    "PathEntry",
    "AuthenticationPath",
    "CommitmentProof",
    # Core functions
    "compute_root",
    "missing_path_levels",
    "incomplete_input_error",
    "update_root",
    # Tree helpers
    "MAX_TREE_HEIGHT",
    "tree_capacity",
    "empty_subtree_defaults",
    "build_tree_levels",
    "compute_tree_root",
    "extract_path",
    "sibling_hashes",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
]

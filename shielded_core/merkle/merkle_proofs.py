"""
Merkle Proofs Convenience Wrappers
Thin class-based wrappers around the tree helpers and path reconstruction.

This module provides:
- CommitmentProof: leaf, index, authentication path and root in one value
- MerkleProver: Generate proofs for leaves or raw values
- MerkleVerifier: Verify proofs against their claimed root, or raise
  RootMismatchException through check()
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from shielded_core.crypto.hasher import HashEngine
from shielded_core.field.bits import FieldLike
from shielded_core.field.element import FieldElement
from shielded_core.merkle.path_root import AuthenticationPath, compute_root
from shielded_core.merkle.tree import build_tree_levels, compute_tree_root, extract_path
from shielded_core.schemas.errors import RootMismatchException


@dataclass(frozen=True)
class CommitmentProof:
    """
    An inclusion proof for a single leaf commitment.

    Attributes:
        leaf: The leaf commitment being proven
        index: The 0-based slot of the leaf
        path: (sibling, sibling_is_left) entries from the leaf level up
        root: The root this proof is against
    """
    leaf: FieldElement
    index: int
    path: tuple[tuple[FieldElement, bool], ...]
    root: FieldElement

    def __post_init__(self) -> None:
        """Validate proof structure."""
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")
        if self.index >= (1 << len(self.path)):
            raise ValueError(
                f"Leaf index {self.index} does not fit a path of length {len(self.path)}"
            )

    @property
    def height(self) -> int:
        return len(self.path) + 1


class MerkleProver:
    """
    Generates inclusion proofs over complete fixed-height trees.

    Example:
        >>> prover = MerkleProver(HashEngine())
        >>> proof = prover.prove(leaves, index=1, height=3)
        >>> proof.leaf == leaves[1]
        True
    """

    def __init__(self, hasher: Optional[HashEngine] = None) -> None:
        self.hasher = hasher or HashEngine.default()

    def prove(
        self,
        leaves: Sequence[FieldElement],
        index: int,
        height: int,
    ) -> CommitmentProof:
        """
        Generate a proof for the leaf at index.

        Raises:
            IndexError: If index is outside the tree's leaf slots
            BatchCapacityException: If leaves do not fit the tree
        """
        levels = build_tree_levels(self.hasher, leaves, height)
        path = extract_path(levels, index)
        return CommitmentProof(
            leaf=levels[0][index],
            index=index,
            path=tuple(path),
            root=levels[-1][0],
        )

    def prove_value(
        self,
        values: Sequence[FieldLike],
        index: int,
        height: int,
    ) -> CommitmentProof:
        """Hash raw values into leaf commitments, then prove the one at index."""
        leaves = [self.hasher.hash(value) for value in values]
        return self.prove(leaves, index, height)

    def compute_root(self, leaves: Sequence[FieldElement], height: int) -> FieldElement:
        return compute_tree_root(self.hasher, leaves, height)


def _first_misplaced_level(proof: CommitmentProof) -> Optional[int]:
    for level, (_, sibling_is_left) in enumerate(proof.path):
        if sibling_is_left != bool((proof.index >> level) & 1):
            return level
    return None


class MerkleVerifier:
    """Verifies inclusion proofs by reconstructing the root."""

    def __init__(self, hasher: Optional[HashEngine] = None) -> None:
        self.hasher = hasher or HashEngine.default()

    def verify(self, proof: CommitmentProof) -> bool:
        """
        Verify a proof.

        The position bits in the path must agree with the claimed index,
        and the reconstructed root must equal the claimed root.
        """
        if _first_misplaced_level(proof) is not None:
            return False
        return self.verify_leaf_in_root(proof.leaf, proof.path, proof.root)

    def check(self, proof: CommitmentProof) -> None:
        """
        Verify a proof, raising instead of returning False.

        Raises:
            RootMismatchException: If a position bit disagrees with the index
                or the reconstructed root differs from the claimed root
        """
        level = _first_misplaced_level(proof)
        if level is not None:
            raise RootMismatchException(
                f"Position bit at level {level} disagrees with index {proof.index}",
                details={"index": proof.index, "level": level},
            )

        computed = compute_root(self.hasher, proof.path, proof.leaf)
        if computed != proof.root:
            raise RootMismatchException(
                "Proof does not reconstruct the claimed root",
                expected=str(proof.root),
                computed=str(computed),
            )

    def verify_leaf_in_root(
        self,
        leaf: Optional[FieldElement],
        path: AuthenticationPath,
        root: FieldElement,
    ) -> bool:
        """
        Verify a leaf reaches root through path.

        An incomplete path or absent leaf never verifies.
        """
        computed = compute_root(self.hasher, path, leaf)
        return computed is not None and computed == root

    def verify_value_in_root(
        self,
        value: FieldLike,
        path: AuthenticationPath,
        root: FieldElement,
    ) -> bool:
        """Hash a raw value into its leaf commitment, then verify it."""
        return self.verify_leaf_in_root(self.hasher.hash(value), path, root)


__all__ = [
    "CommitmentProof",
    "MerkleProver",
    "MerkleVerifier",
]

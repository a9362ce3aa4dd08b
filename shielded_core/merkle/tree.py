"""
Full Tree Helpers

Bottom-up construction of complete fixed-height trees, empty-subtree
defaults, and path extraction. These produce the per-call inputs that
compute_root() and update_root() consume, and serve as the reference the
incremental functions are checked against.

Canonical Tree Rules:
1. A tree of height h has 2^(h-1) leaf slots; unused slots hold zero
2. Parent at height k+1 = compress(left, right, TreeLevel(k))
3. defaults[0] = zero; defaults[k+1] = compress(defaults[k], defaults[k], TreeLevel(k))

Full construction costs 2^(h-1) - 1 compressions; use it for small trees and
verification, and update_root() for everything else.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from shielded_core.crypto.personalization import MAX_TREE_LEVEL, TreeLevel
from shielded_core.field.element import FieldElement
from shielded_core.merkle.path_root import AuthenticationPath
from shielded_core.schemas.errors import (
    BatchCapacityException,
    ConfigurationMismatchException,
)

if TYPE_CHECKING:
    from shielded_core.crypto.hasher import HashEngine


# Heights beyond this would need a TreeLevel past MAX_TREE_LEVEL
MAX_TREE_HEIGHT: int = MAX_TREE_LEVEL + 2


def tree_capacity(height: int) -> int:
    """Number of leaf slots in a tree of the given height."""
    if height < 1:
        raise ConfigurationMismatchException(
            f"Tree height must be at least 1, got {height}", height=height
        )
    return 1 << (height - 1)


def empty_subtree_defaults(hasher: "HashEngine", count: int) -> list[FieldElement]:
    """
    Roots of all-empty subtrees for heights 0 .. count-1.

    Obtained by repeatedly self-compressing zero, one level per entry.

    Args:
        hasher: Engine providing compress()
        count: Number of entries; a tree of height h needs at least h

    Returns:
        List where entry k is the root of an empty subtree of height k
    """
    if count < 0 or count > MAX_TREE_HEIGHT:
        raise ConfigurationMismatchException(
            f"Defaults count must be in 0..{MAX_TREE_HEIGHT}, got {count}",
            details={"count": count},
        )
    defaults: list[FieldElement] = []
    current = hasher.zero()
    for level in range(count):
        defaults.append(current)
        if level + 1 < count:
            current = hasher.compress(current, current, TreeLevel(level))
    return defaults


def build_tree_levels(
    hasher: "HashEngine",
    leaves: Sequence[FieldElement],
    height: int,
) -> list[list[FieldElement]]:
    """
    Build every level of a complete tree of the given height.

    Args:
        hasher: Engine providing compress() and zero()
        leaves: Leaf commitments placed from slot 0; remaining slots are zero
        height: Number of node levels including the leaves

    Returns:
        levels[0] are the (padded) leaves, levels[height - 1] == [root]

    Raises:
        BatchCapacityException: If there are more leaves than slots
    """
    if height > MAX_TREE_HEIGHT:
        raise ConfigurationMismatchException(
            f"Tree height {height} exceeds maximum {MAX_TREE_HEIGHT}", height=height
        )
    capacity = tree_capacity(height)
    if len(leaves) > capacity:
        raise BatchCapacityException(
            f"{len(leaves)} leaves do not fit a height-{height} tree",
            batch_size=len(leaves),
            capacity=capacity,
        )

    zero = hasher.zero()
    current_level: list[FieldElement] = list(leaves)
    current_level.extend(zero for _ in range(capacity - len(leaves)))
    levels = [current_level]

    for level in range(height - 1):
        tag = TreeLevel(level)
        current_level = [
            hasher.compress(current_level[i], current_level[i + 1], tag)
            for i in range(0, len(current_level), 2)
        ]
        levels.append(current_level)

    return levels


def compute_tree_root(
    hasher: "HashEngine",
    leaves: Sequence[FieldElement],
    height: int,
) -> FieldElement:
    """Root of a complete tree of the given height over leaves."""
    return build_tree_levels(hasher, leaves, height)[-1][0]


def _check_index(levels: Sequence[Sequence[FieldElement]], index: int) -> None:
    if not levels:
        raise ValueError("Cannot extract a path from an empty tree")
    if index < 0 or index >= len(levels[0]):
        raise IndexError(
            f"Leaf index {index} out of range for {len(levels[0])} leaves"
        )


def extract_path(
    levels: Sequence[Sequence[FieldElement]],
    index: int,
) -> AuthenticationPath:
    """
    Authentication path of the leaf at index, with position bits.

    Returns:
        List of (sibling, sibling_is_left) from the leaf level up
    """
    _check_index(levels, index)

    path: list[tuple[FieldElement, bool]] = []
    current_index = index
    for level in levels[:-1]:
        sibling_index = current_index ^ 1
        path.append((level[sibling_index], sibling_index < current_index))
        current_index >>= 1
    return path


def sibling_hashes(
    levels: Sequence[Sequence[FieldElement]],
    index: int,
) -> list[FieldElement]:
    """Bare sibling hashes of the leaf at index, as update_root() expects them."""
    return [sibling for sibling, _ in extract_path(levels, index)]


__all__ = [
    "MAX_TREE_HEIGHT",
    "tree_capacity",
    "empty_subtree_defaults",
    "build_tree_levels",
    "compute_tree_root",
    "extract_path",
    "sibling_hashes",
]

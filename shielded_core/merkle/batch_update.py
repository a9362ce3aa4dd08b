"""
Batched Range Update

Recomputes the root after writing a contiguous run of leaves, touching only
the ancestors of that run. Cost is O(height + batch size) compressions
instead of a full rebuild.

Tree Model:
- height counts node levels, leaves included: a tree of height h has
  2^(h-1) leaf slots and h-1 compression levels
- Leaves right of the updated run are empty; their subtrees hash to the
  precomputed defaults (defaults[k] = root of an empty subtree of height k)
- path[k] is the sibling of the run's first node at height k; only the
  left siblings are ever read

Working Frame:
    At height k the frame holds the nodes from the even-aligned position at
    or before (index >> k) up to the last node covering the run. Each level
    builds a brand-new list, so no value outlives the level it was made in.

    height 0:  [path[0]?] new leaves... [defaults[0]?]
    height 1:  [path[1]?] parents...    [defaults[1]?]
    ...
    top:       [root]
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from shielded_core.crypto.personalization import MAX_TREE_LEVEL, TreeLevel
from shielded_core.field.element import FieldElement
from shielded_core.schemas.errors import (
    BatchCapacityException,
    ConfigurationMismatchException,
)

if TYPE_CHECKING:
    from shielded_core.crypto.hasher import HashEngine


logger = logging.getLogger(__name__)


def _check_inputs(
    path: Sequence[FieldElement],
    index: int,
    batch_size: int,
    defaults: Sequence[FieldElement],
) -> int:
    height = len(path) + 1

    if height - 1 > MAX_TREE_LEVEL + 1:
        raise ConfigurationMismatchException(
            f"Path of length {len(path)} exceeds the {MAX_TREE_LEVEL + 1} supported tree levels",
            height=height,
        )
    if len(defaults) < height:
        raise ConfigurationMismatchException(
            f"Defaults table has {len(defaults)} entries, tree of height {height} needs {height}",
            height=height,
            details={"defaults_length": len(defaults)},
        )

    capacity = 1 << (height - 1)
    if index < 0:
        raise BatchCapacityException(
            f"Leaf index must be non-negative, got {index}",
            index=index,
            batch_size=batch_size,
            capacity=capacity,
        )
    if batch_size == 0:
        raise BatchCapacityException(
            "Batch must contain at least one leaf",
            index=index,
            batch_size=batch_size,
            capacity=capacity,
        )
    if index + batch_size > capacity:
        raise BatchCapacityException(
            f"Too many elements: {batch_size} leaves at index {index} "
            f"exceed the {capacity} slots of a height-{height} tree",
            index=index,
            batch_size=batch_size,
            capacity=capacity,
        )
    return height


def update_root(
    hasher: "HashEngine",
    path: Sequence[FieldElement],
    index: int,
    leaves: Sequence[FieldElement],
    defaults: Sequence[FieldElement],
) -> FieldElement:
    """
    Compute the new root after writing leaves at [index, index + len(leaves)).

    Args:
        hasher: Engine providing compress()
        path: Leaf-to-root sibling hashes of leaf `index` (height - 1 entries)
        index: Position of the first updated leaf
        leaves: New leaf commitments, in order
        defaults: Empty-subtree roots by height, at least `height` entries

    Returns:
        The new root

    Raises:
        BatchCapacityException: If the run is empty, starts below zero or
            runs past the last leaf slot
        ConfigurationMismatchException: If defaults are too short for the
            height implied by path, or the tree is deeper than the tag space
    """
    height = _check_inputs(path, index, len(leaves), defaults)

    logger.debug(
        "Batch update: height=%d index=%d batch_size=%d", height, index, len(leaves)
    )

    frame: list[FieldElement] = []
    if index & 1:
        frame.append(path[0])
    frame.extend(leaves)

    for level in range(1, height):
        if len(frame) & 1:
            frame.append(defaults[level - 1])

        next_frame: list[FieldElement] = []
        if (index >> level) & 1:
            next_frame.append(path[level])

        tag = TreeLevel(level - 1)
        for j in range(0, len(frame), 2):
            next_frame.append(hasher.compress(frame[j], frame[j + 1], tag))

        frame = next_frame

    return frame[0]


__all__ = [
    "update_root",
]

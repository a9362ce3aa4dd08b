"""
Root Reconstruction from an Authentication Path

Folds a leaf and its leaf-to-root sibling path into the tree root.

Path Rules:
1. path[i] = (sibling, sibling_is_left) at height i (0 = leaf level)
2. sibling_is_left=True  -> parent = compress(sibling, acc, TreeLevel(i))
   sibling_is_left=False -> parent = compress(acc, sibling, TreeLevel(i))
3. Any absent entry (or an absent leaf) makes the root uncomputable: None
4. An empty path yields the leaf itself
5. Paths deeper than the level tags allow (more than MAX_TREE_LEVEL + 1
   entries) are a configuration error, not incomplete input

No check is made that the path length or position bits describe a real
tree; that is the caller's evidence to supply.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from shielded_core.crypto.personalization import MAX_TREE_LEVEL, TreeLevel
from shielded_core.field.element import FieldElement
from shielded_core.schemas.errors import ConfigurationMismatchException, IncompleteInputError

if TYPE_CHECKING:
    from shielded_core.crypto.hasher import HashEngine


logger = logging.getLogger(__name__)

PathEntry = tuple[FieldElement, bool]

AuthenticationPath = Sequence[Optional[PathEntry]]


def missing_path_levels(path: AuthenticationPath) -> list[int]:
    """Return the levels whose path entry is absent."""
    return [level for level, entry in enumerate(path) if entry is None]


def incomplete_input_error(
    path: AuthenticationPath,
    leaf: Optional[FieldElement],
) -> Optional[IncompleteInputError]:
    """
    Describe why compute_root() would return None, for reporting.

    Returns:
        IncompleteInputError if the root is not computable, else None
    """
    missing = missing_path_levels(path)
    if leaf is not None and not missing:
        return None
    return IncompleteInputError(
        message="Root not computable from supplied evidence",
        missing_levels=missing,
        leaf_missing=leaf is None,
    )


def compute_root(
    hasher: "HashEngine",
    path: AuthenticationPath,
    leaf: Optional[FieldElement],
) -> Optional[FieldElement]:
    """
    Reconstruct the root reached from leaf through path.

    Args:
        hasher: Engine providing compress()
        path: Leaf-to-root (sibling, sibling_is_left) entries
        leaf: Leaf commitment the path starts from

    Returns:
        Root field element, or None if the leaf or any path entry is absent

    Raises:
        ConfigurationMismatchException: If path has more entries than there
            are tree level tags
    """
    if len(path) > MAX_TREE_LEVEL + 1:
        raise ConfigurationMismatchException(
            f"Path of {len(path)} entries exceeds the {MAX_TREE_LEVEL + 1} supported tree levels",
            height=len(path) + 1,
        )

    if leaf is None:
        logger.debug("Root not computable: leaf is absent")
        return None

    missing = missing_path_levels(path)
    if missing:
        logger.debug("Root not computable: path entries absent at levels %s", missing)
        return None

    acc = leaf
    for level, (sibling, sibling_is_left) in enumerate(path):
        if sibling_is_left:
            left, right = sibling, acc
        else:
            left, right = acc, sibling
        acc = hasher.compress(left, right, TreeLevel(level))

    return acc


__all__ = [
    "PathEntry",
    "AuthenticationPath",
    "missing_path_levels",
    "incomplete_input_error",
    "compute_root",
]

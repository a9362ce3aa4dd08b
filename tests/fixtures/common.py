"""
Common test fixtures shared by all modules.

Provides factory functions for the engine's building blocks:
- HashEngine instances
- Leaf commitments for small integers
- Complete trees with their levels and default tables

These are the foundational building blocks used by the unit tests.
"""

from typing import Optional, Sequence

from shielded_core.crypto import Blake2sCompression, HashEngine
from shielded_core.field import FieldElement
from shielded_core.merkle import build_tree_levels, empty_subtree_defaults


def make_hasher(person: str = "Shld_PH_", strict_bit_length: bool = False) -> HashEngine:
    """Create a HashEngine that does not depend on process-wide configuration."""
    return HashEngine(Blake2sCompression(person), strict_bit_length=strict_bit_length)


def int_to_bits_be(value: int) -> list[bool]:
    """Binary digits of value, most significant first (no leading zeros)."""
    return [c == "1" for c in format(value, "b")]


def make_leaf(hasher: HashEngine, i: int) -> FieldElement:
    """Leaf commitment of the big-endian bit string of i."""
    return hasher.hash_bits(int_to_bits_be(i))


def make_leaves(hasher: HashEngine, count: int, start: int = 1) -> list[FieldElement]:
    """Leaf commitments for start, start+1, ..., start+count-1."""
    return [make_leaf(hasher, i) for i in range(start, start + count)]


def make_tree(
    hasher: HashEngine,
    leaves: Sequence[FieldElement],
    height: int,
) -> list[list[FieldElement]]:
    """Complete tree levels over leaves."""
    return build_tree_levels(hasher, leaves, height)


def make_defaults(hasher: HashEngine, height: int, extra: int = 0) -> list[FieldElement]:
    """Empty-subtree defaults for a tree of the given height."""
    return empty_subtree_defaults(hasher, height + extra)


def replace_range(
    leaves: Sequence[FieldElement],
    index: int,
    new_leaves: Sequence[FieldElement],
    zero: Optional[FieldElement] = None,
) -> list[FieldElement]:
    """Copy of leaves with new_leaves written from index, zero-filling any gap."""
    zero = zero if zero is not None else FieldElement.zero()
    result = list(leaves)
    end = index + len(new_leaves)
    if len(result) < end:
        result.extend(zero for _ in range(end - len(result)))
    result[index:end] = list(new_leaves)
    return result

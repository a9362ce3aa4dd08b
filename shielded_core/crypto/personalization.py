"""
Hash Personalization

Domain tags mixed into every compression so that a hash produced in one
context (a leaf commitment, or a node at a given tree level) can never be
mistaken for a hash from another.

Tag Encoding (6 bits, prepended to the hashed bit string):
- LeafCommitment: all six bits set
- TreeLevel(n):   n in 6 little-endian bits, 0 <= n <= MAX_TREE_LEVEL

The all-ones pattern is reserved for leaves, which is why tree levels stop
at 62.
"""
from __future__ import annotations

from dataclasses import dataclass

from shielded_core.schemas.errors import ConfigurationMismatchException


TAG_BITS: int = 6

MAX_TREE_LEVEL: int = (1 << TAG_BITS) - 2


class Personalization:
    """Base of the closed set of domain tags. Do not subclass outside this module."""

    __slots__ = ()

    def get_bits(self) -> list[bool]:
        raise NotImplementedError


@dataclass(frozen=True)
class LeafCommitment(Personalization):
    """Tag for hashing raw leaf data into a commitment."""

    def get_bits(self) -> list[bool]:
        return [True] * TAG_BITS


@dataclass(frozen=True)
class TreeLevel(Personalization):
    """
    Tag for compressing two children into their parent.

    Attributes:
        level: Height of the children being combined (0 = leaves)
    """
    level: int

    def __post_init__(self) -> None:
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise TypeError(f"Tree level must be int, got {type(self.level).__name__}")
        if self.level < 0 or self.level > MAX_TREE_LEVEL:
            raise ConfigurationMismatchException(
                f"Tree level {self.level} outside supported range 0..{MAX_TREE_LEVEL}",
                details={"level": self.level, "max_level": MAX_TREE_LEVEL},
            )

    def get_bits(self) -> list[bool]:
        return [(self.level >> i) & 1 == 1 for i in range(TAG_BITS)]


LEAF_COMMITMENT = LeafCommitment()


def as_personalization(tag: Personalization | int) -> Personalization:
    """Accept a Personalization or a bare tree level."""
    if isinstance(tag, Personalization):
        return tag
    return TreeLevel(tag)


__all__ = [
    "TAG_BITS",
    "MAX_TREE_LEVEL",
    "Personalization",
    "LeafCommitment",
    "TreeLevel",
    "LEAF_COMMITMENT",
    "as_personalization",
]

"""
Core cryptographic building blocks.

Domain tags, the compression primitive protocol with its BLAKE2s
implementation, and the HashEngine that combines them.
"""
from .personalization import (
    LEAF_COMMITMENT,
    MAX_TREE_LEVEL,
    TAG_BITS,
    LeafCommitment,
    Personalization,
    TreeLevel,
    as_personalization,
)
from .primitive import (
    DEFAULT_PERSONALIZATION,
    Blake2sCompression,
    CompressionPrimitive,
)
from .hasher import HashEngine

__all__ = [
    "TAG_BITS",
    "MAX_TREE_LEVEL",
    "Personalization",
    "LeafCommitment",
    "TreeLevel",
    "LEAF_COMMITMENT",
    "as_personalization",
    "DEFAULT_PERSONALIZATION",
    "CompressionPrimitive",
    "Blake2sCompression",
    "HashEngine",
]

"""
Shielded commitment engine.

Leaf commitments, domain-separated node compression, root reconstruction
from authentication paths and batched range updates over fixed-height
Merkle trees of field elements.
"""
from shielded_core.crypto import HashEngine, LeafCommitment, TreeLevel
from shielded_core.field import FieldElement
from shielded_core.merkle import compute_root, empty_subtree_defaults, update_root

root = compute_root

__version__ = "0.1.0"

__all__ = [
    "FieldElement",
    "HashEngine",
    "LeafCommitment",
    "TreeLevel",
    "compute_root",
    "root",
    "update_root",
    "empty_subtree_defaults",
]

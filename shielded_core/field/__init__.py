"""
Field elements and their canonical bit serialization.
"""
from .element import MODULUS, NUM_BITS, REPR_BITS, FieldElement, FieldType
from .bits import FieldLike, get_bits_le_fixed, pack_bits_le

__all__ = [
    "MODULUS",
    "NUM_BITS",
    "REPR_BITS",
    "FieldElement",
    "FieldType",
    "FieldLike",
    "get_bits_le_fixed",
    "pack_bits_le",
]

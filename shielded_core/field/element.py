"""
Field Elements

Immutable elements of the BLS12-381 scalar field, the value type every
leaf commitment, tree node and root in this package is expressed in.

Representation Notes:
- Values are stored as canonical integers in [0, MODULUS)
- NUM_BITS is the capacity used for bit serialization (255)
- REPR_BITS is the width of the canonical representation (4 x 64-bit limbs)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol, runtime_checkable


# BLS12-381 scalar field modulus
MODULUS: int = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

NUM_BITS: int = 255

REPR_BITS: int = 256


@runtime_checkable
class FieldType(Protocol):
    """
    Capabilities the hash engine needs from a prime field.

    Any class exposing an integer value, the two bit widths, zero() and
    from_bytes_le() (reducing into the field) can stand in for FieldElement.
    Instances must compare and hash by value.
    """

    value: int
    NUM_BITS: ClassVar[int]
    REPR_BITS: ClassVar[int]

    @classmethod
    def zero(cls) -> "FieldType":
        ...

    @classmethod
    def from_bytes_le(cls, data: bytes) -> "FieldType":
        ...


@dataclass(frozen=True)
class FieldElement:
    """
    An element of the scalar field.

    Instances are hashable and compared by value. Use from_int() to reduce
    an arbitrary integer into the field; the constructor only accepts
    canonical values.

    Attributes:
        value: Canonical integer representative in [0, MODULUS)
    """
    value: int

    MODULUS: ClassVar[int] = MODULUS
    NUM_BITS: ClassVar[int] = NUM_BITS
    REPR_BITS: ClassVar[int] = REPR_BITS

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Field element value must be int, got {type(self.value).__name__}")
        if self.value < 0 or self.value >= type(self).MODULUS:
            raise ValueError(f"Field element value out of range: {self.value}")

    @classmethod
    def zero(cls) -> "FieldElement":
        return cls(0)

    @classmethod
    def from_int(cls, value: int) -> "FieldElement":
        """Reduce an arbitrary integer (including negatives) into the field."""
        return cls(value % cls.MODULUS)

    @classmethod
    def from_bytes_le(cls, data: bytes) -> "FieldElement":
        """Interpret little-endian bytes as an integer and reduce it."""
        return cls.from_int(int.from_bytes(data, byteorder="little"))

    @classmethod
    def from_hex(cls, hex_string: str) -> "FieldElement":
        """
        Parse a 0x-prefixed big-endian hex string.

        Accepts the Fr(0x...) form produced by str() as well.

        Raises:
            ValueError: If the prefix is missing or the value is not canonical
        """
        text = hex_string.strip()
        if text.startswith("Fr(") and text.endswith(")"):
            text = text[3:-1]
        if not text.startswith("0x"):
            raise ValueError(
                f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
            )
        return cls(int(text[2:], 16))

    def is_zero(self) -> bool:
        return self.value == 0

    def to_bytes_le(self) -> bytes:
        return self.value.to_bytes(type(self).REPR_BITS // 8, byteorder="little")

    def to_hex(self) -> str:
        """Big-endian hex with 0x prefix, padded to the representation width."""
        return "0x" + self.value.to_bytes(type(self).REPR_BITS // 8, byteorder="big").hex()

    def __str__(self) -> str:
        return f"Fr({self.to_hex()})"


__all__ = [
    "MODULUS",
    "NUM_BITS",
    "REPR_BITS",
    "FieldType",
    "FieldElement",
]

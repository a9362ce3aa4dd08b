"""
Hash Engine

Leaf hashing and node compression built from a CompressionPrimitive and the
canonical bit serialization of field elements.

Commitment Rules:
1. Leaf from raw bits:   hash_bits(bits) = H(LeafCommitment, bits)
2. Leaf from a value:    hash(v) = hash_bits(le_bits(v, NUM_BITS))
3. Internal node:        compress(l, r, p) = H(p, le_bits(l, NUM_BITS) ++ le_bits(r, NUM_BITS))

The engine holds no mutable state; one instance can serve any number of
threads and trees of any height.
"""
from __future__ import annotations

from typing import Iterable, Optional

from shielded_core.config.runtime import RuntimeConfig, get_default_config
from shielded_core.crypto.personalization import (
    LEAF_COMMITMENT,
    Personalization,
    as_personalization,
)
from shielded_core.crypto.primitive import Blake2sCompression, CompressionPrimitive
from shielded_core.field.bits import FieldLike, get_bits_le_fixed
from shielded_core.field.element import FieldElement, FieldType


class HashEngine:
    """
    Domain-separated leaf hashing and node compression.

    Args:
        primitive: Compression primitive (defaults to Blake2sCompression over field)
        field: Field class supplying zero(), NUM_BITS and, for the default
            primitive, the reduction of digests
        num_bits: Width each operand is serialized to (defaults to field.NUM_BITS)
        strict_bit_length: Reject bit expansions that would drop set high bits

    Example:
        >>> engine = HashEngine()
        >>> leaf = engine.hash(FieldElement(6))
        >>> parent = engine.compress(leaf, leaf, 0)
    """

    __slots__ = ("_primitive", "_field", "_num_bits", "_strict")

    def __init__(
        self,
        primitive: Optional[CompressionPrimitive] = None,
        *,
        field: type[FieldType] = FieldElement,
        num_bits: Optional[int] = None,
        strict_bit_length: bool = False,
    ) -> None:
        self._primitive = primitive if primitive is not None else Blake2sCompression(field=field)
        self._field = field
        self._num_bits = num_bits if num_bits is not None else field.NUM_BITS
        self._strict = strict_bit_length

    @classmethod
    def from_config(
        cls,
        config: RuntimeConfig,
        field: type[FieldType] = FieldElement,
    ) -> "HashEngine":
        """Build an engine with the Blake2s primitive described by config."""
        return cls(
            Blake2sCompression(config.hasher.personalization, field=field),
            field=field,
            num_bits=config.hasher.num_bits,
            strict_bit_length=config.hasher.strict_bit_length,
        )

    @classmethod
    def default(cls) -> "HashEngine":
        """Engine built from the process-wide default configuration."""
        return cls.from_config(get_default_config())

    @property
    def primitive(self) -> CompressionPrimitive:
        return self._primitive

    @property
    def num_bits(self) -> int:
        return self._num_bits

    @property
    def strict_bit_length(self) -> bool:
        return self._strict

    @property
    def field(self) -> type[FieldType]:
        return self._field

    def zero(self) -> FieldType:
        return self._field.zero()

    def get_bits_le_fixed(self, value: FieldLike, n: int) -> list[bool]:
        """Little-endian expansion to exactly n bits (see field.bits)."""
        return get_bits_le_fixed(value, n, strict=self._strict)

    def hash_bits(self, bits: Iterable[bool]) -> FieldType:
        """Commit to an arbitrary finite bit sequence as a leaf."""
        return self._primitive.hash(LEAF_COMMITMENT, bits)

    def hash(self, value: FieldLike) -> FieldType:
        """Canonical leaf commitment of a field value."""
        return self.hash_bits(self.get_bits_le_fixed(value, self._num_bits))

    def compress(
        self,
        left: FieldLike,
        right: FieldLike,
        personalization: Personalization | int,
    ) -> FieldType:
        """
        Compress two children into their parent.

        Args:
            left: Left child (its bits come first)
            right: Right child
            personalization: Domain tag, or a bare int meaning TreeLevel(int)

        Returns:
            Parent node as a field element
        """
        tag = as_personalization(personalization)
        bits = self.get_bits_le_fixed(left, self._num_bits)
        bits.extend(self.get_bits_le_fixed(right, self._num_bits))
        return self._primitive.hash(tag, bits)

    def __repr__(self) -> str:
        return (
            f"HashEngine(primitive={self._primitive!r}, num_bits={self._num_bits}, "
            f"strict_bit_length={self._strict})"
        )


__all__ = [
    "HashEngine",
]

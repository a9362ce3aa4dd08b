"""
Bit Serialization

Canonical little-endian bit expansion of field elements, plus the byte
packing used when a bit string is fed to a byte-oriented digest.

Truncation Rule:
    get_bits_le_fixed() walks the value's REPR_BITS-wide representation
    (taken from the value's own field class; plain integers use 256) and
    keeps the first n bits. When n is smaller than the representation, high
    bits are dropped without complaint unless strict=True is passed.
"""
from __future__ import annotations

import logging
from typing import Iterable, Union

from shielded_core.field.element import REPR_BITS, FieldType
from shielded_core.schemas.errors import BitLengthException


logger = logging.getLogger(__name__)

FieldLike = Union[FieldType, int]


def _as_int(value: FieldLike) -> tuple[int, int]:
    """Integer representative of value and the width of its representation."""
    if isinstance(value, bool):
        raise TypeError("Expected a field element or int, got bool")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Cannot bit-expand a negative integer: {value}")
        return value, REPR_BITS
    raw = getattr(value, "value", None)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"Expected a field element or int, got {type(value).__name__}")
    return raw, getattr(type(value), "REPR_BITS", REPR_BITS)


def get_bits_le_fixed(value: FieldLike, n: int, *, strict: bool = False) -> list[bool]:
    """
    Expand a value into exactly n little-endian bits.

    Bits come from the canonical REPR_BITS-wide representation. Short
    expansions are zero-extended; expansions narrower than the value are
    truncated.

    Args:
        value: Field element or non-negative integer
        n: Requested bit length
        strict: Raise instead of silently dropping set high bits

    Returns:
        List of n booleans, least-significant bit first

    Raises:
        BitLengthException: In strict mode, if a set bit lies at position >= n
        ValueError: If n is negative

    Example:
        >>> get_bits_le_fixed(6, 4)
        [False, True, True, False]
    """
    if n < 0:
        raise ValueError(f"Bit length must be non-negative, got {n}")

    raw, width = _as_int(value)
    take = min(n, width)

    if raw >> n:
        if strict:
            raise BitLengthException(
                f"Value needs {raw.bit_length()} bits but only {n} were requested",
                requested_bits=n,
                value_bits=raw.bit_length(),
            )
        logger.debug(
            "Truncating %d-bit value to %d bits", raw.bit_length(), n
        )

    bits = [(raw >> i) & 1 == 1 for i in range(take)]
    bits.extend(False for _ in range(n - take))
    return bits


def pack_bits_le(bits: Iterable[bool]) -> bytes:
    """
    Pack bits into bytes, least-significant bit of each byte first.

    The final byte is zero-padded; callers that need an unambiguous
    encoding must commit to the bit length separately.
    """
    out = bytearray()
    current = 0
    count = 0
    for bit in bits:
        if bit:
            current |= 1 << count
        count += 1
        if count == 8:
            out.append(current)
            current = 0
            count = 0
    if count:
        out.append(current)
    return bytes(out)


__all__ = [
    "FieldLike",
    "get_bits_le_fixed",
    "pack_bits_le",
]

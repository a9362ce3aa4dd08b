"""
Compression Primitives

The two-input, domain-separated hash that every leaf commitment and tree
node is built from. The engine only depends on the CompressionPrimitive
protocol; Blake2sCompression is the implementation shipped here.

Blake2sCompression Rules:
1. Input bit string = personalization tag bits ++ data bits
2. Encoded as: bit length (8 bytes, little-endian) || bits packed LSB-first
3. Digest: BLAKE2s-256 keyed by an 8-byte person string
4. Output: digest read as a little-endian integer, reduced into the
   primitive's field class
"""
from __future__ import annotations

import hashlib
from typing import Iterable, Protocol, runtime_checkable

from shielded_core.crypto.personalization import Personalization
from shielded_core.field.bits import pack_bits_le
from shielded_core.field.element import FieldElement, FieldType
from shielded_core.schemas.errors import ConfigurationMismatchException


DEFAULT_PERSONALIZATION: bytes = b"Shld_PH_"

BLAKE2S_PERSON_SIZE: int = 8


@runtime_checkable
class CompressionPrimitive(Protocol):
    """
    Deterministic, collision-resistant hash from a tagged bit string to a field element.

    Implementations must be stateless (or immutable after construction) so
    that a single instance can be shared across threads.
    """

    def hash(self, personalization: Personalization, bits: Iterable[bool]) -> FieldType:
        ...


class Blake2sCompression:
    """
    BLAKE2s-based compression primitive.

    Args:
        person: BLAKE2s personalization, at most 8 bytes
        field: Field class the digest is reduced into

    Example:
        >>> from shielded_core.crypto.personalization import LEAF_COMMITMENT
        >>> primitive = Blake2sCompression()
        >>> primitive.hash(LEAF_COMMITMENT, [True, False]) == primitive.hash(LEAF_COMMITMENT, [True, False])
        True
    """

    __slots__ = ("_person", "_field")

    def __init__(
        self,
        person: bytes | str = DEFAULT_PERSONALIZATION,
        field: type[FieldType] = FieldElement,
    ) -> None:
        if isinstance(person, str):
            person = person.encode("ascii")
        if len(person) > BLAKE2S_PERSON_SIZE:
            raise ConfigurationMismatchException(
                f"BLAKE2s personalization must be at most {BLAKE2S_PERSON_SIZE} bytes, "
                f"got {len(person)}",
                details={"person": person.hex()},
            )
        self._person = person
        self._field = field

    @property
    def person(self) -> bytes:
        return self._person

    @property
    def field(self) -> type[FieldType]:
        return self._field

    def hash(self, personalization: Personalization, bits: Iterable[bool]) -> FieldType:
        stream = personalization.get_bits()
        stream.extend(bool(b) for b in bits)

        h = hashlib.blake2s(digest_size=32, person=self._person)
        h.update(len(stream).to_bytes(8, byteorder="little"))
        h.update(pack_bits_le(stream))
        return self._field.from_bytes_le(h.digest())

    def __repr__(self) -> str:
        return f"Blake2sCompression(person={self._person!r})"


__all__ = [
    "DEFAULT_PERSONALIZATION",
    "CompressionPrimitive",
    "Blake2sCompression",
]

'''
# Chunk type

Four ASCII letters naming a chunk. The case of each letter (bit 5 of the byte)
encodes a property of the chunk:

 1. ancillary bit (first byte): uppercase means critical
 2. private bit (second byte): uppercase means public
 3. reserved bit (third byte): must be uppercase in conforming files
 4. safe-to-copy bit (fourth byte): lowercase means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
import functools
import logging

from bitstring import BitArray

from .enum import ChunkTypeProperty
from .exceptions import InvalidChunkType


logger = logging.getLogger(__name__)

# position of the 0x20 bit inside a byte, counting from the most significant
PROPERTY_BIT = 2

PROPERTIES = (
    ChunkTypeProperty.ANCILLARY,
    ChunkTypeProperty.PRIVATE,
    ChunkTypeProperty.RESERVED,
    ChunkTypeProperty.SAFE_TO_COPY,
)


@functools.total_ordering
class ChunkType(object):
    """Immutable value for the type field of a chunk."""

    __slots__ = ('_raw', '_bits')

    def __init__(self, raw: bytes):
        raw = bytes(raw)
        if len(raw) != 4 or not raw.isalpha():
            raise InvalidChunkType(raw)

        object.__setattr__(self, '_raw', raw)
        object.__setattr__(self, '_bits', BitArray(raw))

    @classmethod
    def parse(cls, raw: bytes) -> "ChunkType":
        return cls(raw)

    @classmethod
    def parse_str(cls, value: str) -> "ChunkType":
        if not isinstance(value, str) or not value.isascii():
            raise InvalidChunkType(value)

        return cls(value.encode('ascii'))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return (self.__class__, (self._raw,))

    def bytes(self) -> bytes:
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return f'<{self.__class__.__name__}({self})>'

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __lt__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw < other._raw

    def __hash__(self):
        return hash(self._raw)

    def _property_bit(self, index: int) -> bool:
        return self._bits[index * 8 + PROPERTY_BIT]

    @property
    def flags(self) -> ChunkTypeProperty:
        value = ChunkTypeProperty.NONE
        for index, prop in enumerate(PROPERTIES):
            if self._property_bit(index):
                value |= prop

        return value

    def is_critical(self) -> bool:
        return not self._property_bit(0)

    def is_public(self) -> bool:
        return not self._property_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._property_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._property_bit(3)

    def is_valid(self) -> bool:
        # the alphabetic part is already enforced by the constructor
        return self._raw.isalpha() and self.is_reserved_bit_valid()

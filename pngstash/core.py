"""
Core module for the chunk record.

A chunk is the main data structure of the format: four fields, each
integer intended big-endian

    length | type | data | crc

where length counts only the bytes of data and crc is the network-byte-order
CRC-32 computed over the chunk type and chunk data, but not the length.
"""
import logging

from .chunk_type import ChunkType
from .common.crc import crc32
from .exceptions import PNGStashException, InvalidCrc
from .streams import Stream


logger = logging.getLogger(__name__)

LENGTH_FORMAT = '>I'
CRC_FORMAT = '>I'
MAX_LENGTH = 0xffffffff


class Chunk(object):
    """
    The length and the crc are never stored independently: they are derived
    from the type and the data, so a Chunk is always consistent.
    """

    def __init__(self, chunk_type: ChunkType, data: bytes):
        data = bytes(data)
        if len(data) > MAX_LENGTH:
            raise ValueError(f'chunk data of {len(data)} bytes does not fit a 32 bit length')

        self._chunk_type = chunk_type
        self._data = data
        self._crc = crc32(chunk_type.bytes(), data)

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        '''the size of the record once packed'''
        return 4 + 4 + self.length + 4

    def data_as_string(self) -> str:
        '''Each byte becomes the character with the same code point.'''
        return self._data.decode('latin-1')

    @classmethod
    def unpack(cls, stream: Stream) -> "Chunk":
        '''Read exactly one record from the stream.

        The fields are read in order and each read is bounds-checked, so that
        a short buffer raises TruncatedInput instead of returning less data.
        '''
        offset = stream.tell()
        try:
            layer = 'length'
            length = stream.read_struct(LENGTH_FORMAT)
            layer = 'type'
            raw_type = stream.read_exact(4)
            layer = 'data'
            data = stream.read_exact(length)
            layer = 'crc'
            stored_crc = stream.read_struct(CRC_FORMAT)
            layer = 'type'
            chunk_type = ChunkType.parse(raw_type)
        except PNGStashException as e:
            e.chain.append(layer)
            raise

        chunk = cls(chunk_type, data)
        logger.debug('unpacked chunk %s of length %d at offset %d', chunk_type, length, offset)

        if chunk.crc != stored_crc:
            logger.debug('crc mismatch for chunk %s: stored %08x computed %08x', chunk_type, stored_crc, chunk.crc)
            raise InvalidCrc(expected=chunk.crc, actual=stored_crc, chain=['crc'])

        return chunk

    @classmethod
    def parse(cls, buffer: bytes) -> "Chunk":
        return cls.unpack(Stream(buffer))

    def pack(self, stream: Stream = None) -> bytes:
        stream = Stream(b'') if stream is None else stream

        stream.write(self.length.to_bytes(4, 'big'))
        stream.write(self._chunk_type.bytes())
        stream.write(self._data)
        stream.write(self._crc.to_bytes(4, 'big'))

        return stream.obj.getvalue()

    def as_bytes(self) -> bytes:
        return self.pack()

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return self._chunk_type == other._chunk_type and self._data == other._data

    __hash__ = None

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._chunk_type,
            self.length,
            self._crc,
        )

    def __str__(self):
        return (
            'Chunk:\n'
            f'    length: {self.length}\n'
            f'    chunk_type: {self._chunk_type}\n'
            f'    chunk_data: {list(self._data)}\n'
            f'    crc: {self._crc}\n'
        )

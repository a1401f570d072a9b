'''
# Portable Network Graphics

The file is a fixed signature followed by chunks back to back until the
end of the data; there is no count of the chunks anywhere.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

Only the chunk layer is handled here: the content of the chunks is opaque.
'''
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .core import Chunk
from .exceptions import PNGStashException, InvalidSignature, ChunkNotFound
from .streams import Stream


logger = logging.getLogger(__name__)

TERMINATOR = 'IEND'


class PNGFile(object):
    '''Ordered list of chunks prefixed by the PNG signature.

    No ordering rule is enforced: in particular append_chunk() doesn't care
    about the IEND chunk, it's up to the caller to put things in the right place.
    '''
    SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

    def __init__(self, chunks: Optional[Iterable[Chunk]] = None):
        self._chunks: List[Chunk] = list(chunks) if chunks is not None else []

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> "PNGFile":
        return cls(chunks)

    @classmethod
    def unpack(cls, stream: Stream) -> "PNGFile":
        magic = stream.read(len(cls.SIGNATURE))
        if magic != cls.SIGNATURE:
            raise InvalidSignature(magic, chain=['header'])

        png = cls()
        seen_terminator = False
        while not stream.at_end():
            index = len(png._chunks)
            try:
                chunk = Chunk.unpack(stream)
            except PNGStashException as e:
                e.chain.append(index)
                e.chain.append('chunks')
                raise

            if seen_terminator:
                logger.debug('chunk %s at index %d follows %s', chunk.chunk_type, index, TERMINATOR)
            seen_terminator = seen_terminator or str(chunk.chunk_type) == TERMINATOR

            png._chunks.append(chunk)

        logger.debug('unpacked %d chunks', len(png._chunks))

        return png

    @classmethod
    def parse(cls, buffer: bytes) -> "PNGFile":
        return cls.unpack(Stream(buffer))

    def header(self) -> bytes:
        return self.SIGNATURE

    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(tuple(self._chunks))

    def _index_of(self, chunk_type: str) -> Optional[int]:
        for index, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return index

        return None

    def append_chunk(self, chunk: Chunk) -> None:
        logger.debug('appending chunk %s at index %d', chunk.chunk_type, len(self._chunks))
        self._chunks.append(chunk)

    def remove_chunk(self, chunk_type: str) -> Chunk:
        index = self._index_of(chunk_type)
        if index is None:
            raise ChunkNotFound(chunk_type)

        logger.debug('removing chunk %s at index %d', chunk_type, index)

        return self._chunks.pop(index)

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        index = self._index_of(chunk_type)

        return self._chunks[index] if index is not None else None

    def chunks_by_type(self, chunk_type: str) -> List[Chunk]:
        return [_ for _ in self._chunks if str(_.chunk_type) == chunk_type]

    def pack(self, stream: Stream = None) -> bytes:
        stream = Stream(b'') if stream is None else stream

        stream.write(self.SIGNATURE)
        for chunk in self._chunks:
            chunk.pack(stream)

        return stream.obj.getvalue()

    def as_bytes(self) -> bytes:
        return self.pack()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))

    def __str__(self):
        msg = 'PNGFile:\n'
        for chunk in self._chunks:
            msg += str(chunk)

        return msg

import io
import logging
import struct

from .exceptions import TruncatedInput


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around an in-memory buffer to
    uniform its properties: mainly we need reads that never
    return less than what was asked for.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to stream from' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.size = len(self.obj)
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.size = len(self.obj)
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        raw = self.obj.tobytes()
        self.size = len(raw)
        self.obj = io.BytesIO(raw)

    def remaining(self) -> int:
        return self.size - self.obj.tell()

    def at_end(self) -> bool:
        return self.remaining() == 0

    def read_exact(self, n: int) -> bytes:
        '''Read exactly n bytes or raise TruncatedInput without moving the cursor.'''
        available = self.remaining()
        if n > available:
            logger.debug('asked for %d bytes at offset %d but only %d are left', n, self.obj.tell(), available)
            raise TruncatedInput(needed=n, available=available)

        return self.obj.read(n)

    def read_struct(self, format: str):
        '''Read a single value described by a struct format.'''
        return struct.unpack(format, self.read_exact(struct.calcsize(format)))[0]

    def write(self, data):
        written = self.obj.write(data)
        self.size = max(self.size, self.obj.tell())

        return written

class PNGStashException(Exception):
    '''Base class to extend in order to throw exception in pngstash.

    Other than the message it takes an optional argument that represents the
    chain of the layers that caused the exception, innermost first.
    '''

    def __init__(self, message='', chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(message)


class InvalidChunkType(PNGStashException):
    '''The type bytes are not exactly four ASCII letters.'''

    def __init__(self, raw, chain=None):
        self.raw = raw
        super().__init__(f'invalid chunk type {raw!r}', chain=chain)


class InvalidCrc(PNGStashException):

    def __init__(self, expected, actual, chain=None):
        self.expected = expected
        self.actual = actual
        super().__init__(f'invalid chunk CRC: stored 0x{actual:08x}, computed 0x{expected:08x}', chain=chain)


class TruncatedInput(PNGStashException):
    '''The buffer ends before the record it declares.'''

    def __init__(self, needed, available, chain=None):
        self.needed = needed
        self.available = available
        super().__init__(f'truncated input: needed {needed} bytes, {available} available', chain=chain)


class InvalidSignature(PNGStashException):

    def __init__(self, found, chain=None):
        self.found = found
        super().__init__(f'invalid signature {found!r}', chain=chain)


class ChunkNotFound(PNGStashException):

    def __init__(self, chunk_type, chain=None):
        self.chunk_type = chunk_type
        super().__init__(f'chunk {chunk_type!r} not found', chain=chain)

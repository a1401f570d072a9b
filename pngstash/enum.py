from enum import Flag


class ChunkTypeProperty(Flag):
    '''Property bits encoded by the case of each byte of a chunk type.

    A member is present when the corresponding letter is lowercase.'''
    NONE         = 0
    ANCILLARY    = 1 << 0
    PRIVATE      = 1 << 1
    RESERVED     = 1 << 2
    SAFE_TO_COPY = 1 << 3

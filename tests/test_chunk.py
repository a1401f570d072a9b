import copy

import pytest

from pngstash.chunk_type import ChunkType
from pngstash.core import Chunk
from pngstash.exceptions import InvalidChunkType, InvalidCrc, TruncatedInput

from conftest import MESSAGE, MESSAGE_CRC


def test_new_chunk():
    chunk = Chunk(ChunkType.parse_str('RuSt'), MESSAGE)

    assert chunk.length == 42
    assert chunk.crc == MESSAGE_CRC
    assert chunk.data == MESSAGE
    assert chunk.size == 42 + 12


def test_chunk_from_bytes(message_chunk_raw):
    chunk = Chunk.parse(message_chunk_raw)

    assert chunk.length == 42
    assert str(chunk.chunk_type) == 'RuSt'
    assert chunk.data_as_string() == MESSAGE.decode()
    assert chunk.crc == MESSAGE_CRC


def test_chunk_as_bytes(message_chunk_raw):
    chunk = Chunk(ChunkType.parse_str('RuSt'), MESSAGE)

    assert chunk.as_bytes() == message_chunk_raw
    assert Chunk.parse(chunk.as_bytes()) == chunk


@pytest.mark.parametrize('type_name,data', [
    ('IEND', b''),
    ('tEXt', b'Comment\x00hello'),
    ('ruSt', bytes(range(256))),
    ('IDAT', b'\x00' * 0x10000),
])
def test_chunk_round_trip(type_name, data):
    original = Chunk(ChunkType.parse_str(type_name), data)

    chunk = Chunk.parse(original.as_bytes())

    assert chunk.length == original.length
    assert chunk.chunk_type == original.chunk_type
    assert chunk.data == original.data
    assert chunk.crc == original.crc


def test_chunk_empty_crc():
    """The crc of an empty chunk depends only on the type."""
    chunk = Chunk(ChunkType.parse_str('IEND'), b'')

    assert chunk.as_bytes() == b'\x00\x00\x00\x00IEND\xae\x42\x60\x82'


def test_chunk_with_wrong_crc(message_chunk_raw):
    raw = message_chunk_raw[:-4] + (MESSAGE_CRC - 1).to_bytes(4, 'big')

    with pytest.raises(InvalidCrc) as exc_info:
        Chunk.parse(raw)

    assert exc_info.value.expected == MESSAGE_CRC
    assert exc_info.value.actual == MESSAGE_CRC - 1


@pytest.mark.parametrize('bit', range(32))
def test_chunk_crc_bit_flip(message_chunk_raw, bit):
    crc = MESSAGE_CRC ^ (1 << bit)
    raw = message_chunk_raw[:-4] + crc.to_bytes(4, 'big')

    with pytest.raises(InvalidCrc):
        Chunk.parse(raw)


def test_chunk_with_corrupted_data(message_chunk_raw):
    raw = bytearray(message_chunk_raw)
    raw[10] ^= 0x01

    with pytest.raises(InvalidCrc):
        Chunk.parse(raw)


@pytest.mark.parametrize('size,layer', [
    (0, 'length'),
    (3, 'length'),
    (6, 'type'),
    (8, 'data'),
    (8 + 41, 'data'),
    (8 + 42, 'crc'),
    (8 + 42 + 3, 'crc'),
])
def test_chunk_truncated(message_chunk_raw, size, layer):
    with pytest.raises(TruncatedInput) as exc_info:
        Chunk.parse(message_chunk_raw[:size])

    assert exc_info.value.chain == [layer]


def test_chunk_length_bigger_than_buffer(message_chunk_raw):
    """A length field declaring more data than available must not be trusted."""
    raw = (0xffffffff).to_bytes(4, 'big') + message_chunk_raw[4:]

    with pytest.raises(TruncatedInput) as exc_info:
        Chunk.parse(raw)

    assert exc_info.value.needed == 0xffffffff
    assert exc_info.value.available == len(MESSAGE) + 4


def test_chunk_invalid_type(message_chunk_raw):
    raw = message_chunk_raw[:4] + b'RU1T' + message_chunk_raw[8:]

    with pytest.raises(InvalidChunkType) as exc_info:
        Chunk.parse(raw)

    assert exc_info.value.chain == ['type']


def test_chunk_ignores_trailing_bytes(message_chunk_raw):
    chunk = Chunk.parse(message_chunk_raw + b'garbage')

    assert chunk.data == MESSAGE


def test_chunk_data_as_string_is_byte_per_char():
    """Bytes over 0x7f are not UTF-8 decoded but mapped one to one."""
    data = bytes(range(256))
    chunk = Chunk(ChunkType.parse_str('ruSt'), data)

    string = chunk.data_as_string()

    assert len(string) == 256
    assert [ord(_) for _ in string] == list(data)

    chunk = Chunk(ChunkType.parse_str('ruSt'), 'ł'.encode('utf-8'))

    assert chunk.data_as_string() == '\xc5\x82'


def test_chunk_display(message_chunk_raw):
    chunk = Chunk.parse(message_chunk_raw)

    lines = str(chunk).splitlines()

    assert lines[0] == 'Chunk:'
    assert lines[1] == '    length: 42'
    assert lines[2] == '    chunk_type: RuSt'
    assert lines[3] == '    chunk_data: %s' % list(MESSAGE)
    assert lines[4] == '    crc: %d' % MESSAGE_CRC


def test_chunk_attributes_are_derived():
    chunk = Chunk(ChunkType.parse_str('RuSt'), MESSAGE)

    with pytest.raises(AttributeError):
        chunk.length = 3

    with pytest.raises(AttributeError):
        chunk.crc = 0


def test_chunk_deepcopy(message_chunk_raw):
    chunk = Chunk.parse(message_chunk_raw)

    duplicate = copy.deepcopy(chunk)

    assert duplicate == chunk
    assert duplicate.as_bytes() == message_chunk_raw

import io

import pytest
from PIL import Image


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


@pytest.fixture
def message_chunk_raw():
    """The serialized RuSt chunk carrying the test message."""
    return (
        len(MESSAGE).to_bytes(4, 'big') +
        b'RuSt' +
        MESSAGE +
        MESSAGE_CRC.to_bytes(4, 'big')
    )


@pytest.fixture
def png_raw():
    """A real 5x5 red image as produced by Pillow."""
    buffer = io.BytesIO()
    Image.new('RGB', (5, 5), 'red').save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, png_raw):
    path = tmp_path / 'red.png'
    path.write_bytes(png_raw)

    return path

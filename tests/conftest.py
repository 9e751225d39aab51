import io

import numpy as np
import pytest
from PIL import Image

from pngmsg.chunk import Chunk
from pngmsg.chunk_type import ChunkType
from pngmsg.PNG import Png, PngSignature

MESSAGE = "This is where your secret message will be!"
MESSAGE_CRC = 2882656334


def make_chunk(chunk_type, data):
    return Chunk(ChunkType.from_string(chunk_type), data)


def raw_chunk(chunk_type=b"RuSt", data=MESSAGE.encode(), crc=MESSAGE_CRC, length=None):
    if length is None:
        length = len(data)
    return length.to_bytes(4, 'big') + chunk_type + data + crc.to_bytes(4, 'big')


@pytest.fixture
def pixels():
    return np.arange(6 * 5 * 3, dtype=np.uint8).reshape((6, 5, 3))


@pytest.fixture
def image_bytes(pixels):
    buf = io.BytesIO()
    Image.fromarray(pixels).save(buf, format='PNG')
    return buf.getvalue()


@pytest.fixture
def image_file(tmp_path, image_bytes):
    path = tmp_path / 'image.png'
    path.write_bytes(image_bytes)
    return path


@pytest.fixture
def testing_png():
    return Png.from_chunks([
        make_chunk("FrSt", b"I am the first chunk"),
        make_chunk("miDl", b"I am another chunk"),
        make_chunk("LASt", b"I am the last chunk"),
    ])


@pytest.fixture
def empty_png_bytes():
    return PngSignature

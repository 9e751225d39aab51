import os
import tempfile
from contextlib import contextmanager

from pngmsg.chunk import Chunk
from pngmsg.chunk_type import ChunkType
from pngmsg.errors import ChunkNotFoundError
from pngmsg.PNG import Png
from pngmsg.print_chunks import formatChunks


#1 operacje na buforze, bez żadnego I/O
def encode(buffer, chunk_type: str, payload: str) -> bytes:
    png = Png.parse(buffer)
    chunk = Chunk(ChunkType.from_string(chunk_type), payload.encode('utf-8', 'surrogateescape'))
    png.append_chunk(chunk)
    return png.serialize()


def decode(buffer, chunk_type: str) -> str:
    png = Png.parse(buffer)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise ChunkNotFoundError(chunk_type)
    return chunk.data_as_text()


def remove(buffer, chunk_type: str) -> bytes:
    png = Png.parse(buffer)
    png.remove_chunk(chunk_type)
    return png.serialize()


def print_chunks(buffer) -> str:
    return formatChunks(Png.parse(buffer))


#2 zapis pliku przez plik tymczasowy + rename, oryginał nietknięty przy błędzie
@contextmanager
def temporary_sibling(path):
    directory = os.path.dirname(os.path.abspath(path))
    fd, temp_path = tempfile.mkstemp(prefix=os.path.basename(path) + '.', suffix='.temp', dir=directory)
    os.close(fd)
    try:
        yield temp_path
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise


def _current_umask():
    umask = os.umask(0)
    os.umask(umask)
    return umask


def atomic_write(path, data: bytes):
    with temporary_sibling(path) as temp_path:
        with open(temp_path, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if os.path.exists(path):
            os.chmod(temp_path, os.stat(path).st_mode & 0o7777)
        else:
            # mkstemp daje 0600, nowy plik dostaje prawa jak przy zwykłym open()
            os.chmod(temp_path, 0o666 & ~_current_umask())
        os.replace(temp_path, path)


def read_file(path) -> bytes:
    with open(path, 'rb') as f:
        return f.read()


#3 operacje na plikach wywoływane z CLI
def encode_file(file_path, chunk_type, payload, out_path=None):
    data = encode(read_file(file_path), chunk_type, payload)
    atomic_write(out_path or file_path, data)
    return out_path or file_path


def decode_file(file_path, chunk_type) -> str:
    return decode(read_file(file_path), chunk_type)


def remove_file(file_path, chunk_type, out_path=None):
    data = remove(read_file(file_path), chunk_type)
    atomic_write(out_path or file_path, data)
    return out_path or file_path


def print_file(file_path) -> str:
    return print_chunks(read_file(file_path))

import struct
import zlib

from pngmsg.chunk_type import ChunkType
from pngmsg.errors import ChecksumMismatchError, TextDecodeError, UnexpectedEofError

#chunk = [4B length][4B type][payload][4B CRC], wszystko big-endian
HEADER_FORMAT = '>I4s'
CRC_FORMAT = '>I'
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
CRC_SIZE = struct.calcsize(CRC_FORMAT)


def crc32(chunk_type: bytes, data: bytes) -> int:
    # CRC liczony po type + data bez sklejania buforów
    return zlib.crc32(data, zlib.crc32(chunk_type))


class Chunk:
    """Single PNG chunk. The crc is always computed here, never passed in."""

    __slots__ = ('length', 'chunk_type', 'data', 'crc')

    def __init__(self, chunk_type: ChunkType, data: bytes):
        self.chunk_type = chunk_type
        self.data = bytes(data)
        self.length = len(self.data)
        self.crc = crc32(chunk_type.bytes(), self.data)

    @classmethod
    def read_from(cls, buffer, offset=0):
        """Parse one chunk starting at ``offset``.

        Returns ``(chunk, next_offset)``. Raises UnexpectedEofError when the
        buffer is shorter than the declared length and ChecksumMismatchError
        when the stored crc disagrees with type + data.
        """
        buffer = memoryview(buffer)
        available = len(buffer) - offset
        if available < HEADER_SIZE:
            raise UnexpectedEofError(HEADER_SIZE, available, offset)
        length, chunk_type = struct.unpack_from(HEADER_FORMAT, buffer, offset)

        needed = HEADER_SIZE + length + CRC_SIZE
        if available < needed:
            raise UnexpectedEofError(needed, available, offset)

        data_start = offset + HEADER_SIZE
        data = bytes(buffer[data_start:data_start + length])
        stored_crc, = struct.unpack_from(CRC_FORMAT, buffer, data_start + length)

        computed_crc = crc32(chunk_type, data)
        if stored_crc != computed_crc:
            raise ChecksumMismatchError(chunk_type, stored_crc, computed_crc, offset)

        chunk = cls(ChunkType(chunk_type), data)
        return chunk, offset + needed

    @classmethod
    def parse(cls, buffer) -> 'Chunk':
        chunk, _ = cls.read_from(buffer)
        return chunk

    def serialize(self) -> bytes:
        return b''.join((
            struct.pack(HEADER_FORMAT, self.length, self.chunk_type.bytes()),
            self.data,
            struct.pack(CRC_FORMAT, self.crc),
        ))

    def data_as_text(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise TextDecodeError(f'Chunk {self.chunk_type!r} data is not valid UTF-8: {e}') from e

    def __len__(self):
        # długość całego chunka na dysku, nie samego payloadu
        return HEADER_SIZE + self.length + CRC_SIZE

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented
        return (self.length, self.chunk_type, self.data, self.crc) == \
            (other.length, other.chunk_type, other.data, other.crc)

    __hash__ = None

    def __str__(self):
        return f"Type:{self.chunk_type.bytes().decode('ascii', 'replace')} Length:{self.length} CRC:0x{self.crc:08x}"

    def __repr__(self):
        return f'Chunk({self.chunk_type!r}, length={self.length}, crc=0x{self.crc:08x})'

from pngmsg.chunk import Chunk
from pngmsg.chunk_type import ChunkType
from pngmsg.commands import decode, encode, print_chunks, remove
from pngmsg.errors import (
    ChecksumMismatchError,
    ChunkError,
    ChunkNotFoundError,
    ChunkTypeError,
    InvalidAsciiError,
    InvalidLengthError,
    InvalidReservedCharError,
    InvalidSignatureError,
    PngError,
    TextDecodeError,
    UnexpectedEofError,
)
from pngmsg.PNG import Png, PngSignature

__version__ = '0.1.0'

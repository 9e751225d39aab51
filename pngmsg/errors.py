# wszystkie błędy rzucane przez parser i model PNG dziedziczą po PngError
# każda klasa ma atrybut kind, wywołujący może rozróżnić przypadki bez isinstance

INVALID_ASCII = 'InvalidAscii'
INVALID_LENGTH = 'InvalidLength'
INVALID_RESERVED_CHAR = 'InvalidReservedChar'
UNEXPECTED_EOF = 'UnexpectedEof'
CHECKSUM_MISMATCH = 'ChecksumMismatch'
INVALID_SIGNATURE = 'InvalidSignature'
CHUNK_NOT_FOUND = 'ChunkNotFound'
TEXT_DECODE_ERROR = 'TextDecodeError'


class PngError(Exception):
    kind = None


#1 błędy typu chunka (4 znaki ASCII)
class ChunkTypeError(PngError):
    pass


class InvalidAsciiError(ChunkTypeError):
    kind = INVALID_ASCII

    def __init__(self, value=None):
        self.value = value
        super().__init__(f'Invalid ASCII code in chunk type: {value!r}')


class InvalidLengthError(ChunkTypeError):
    kind = INVALID_LENGTH

    def __init__(self, value=None):
        self.value = value
        super().__init__(f'Chunk type must be exactly 4 ASCII characters, got {value!r}')


class InvalidReservedCharError(ChunkTypeError):
    kind = INVALID_RESERVED_CHAR

    def __init__(self, value=None):
        self.value = value
        super().__init__(f'Digit found in 3rd character of chunk type {value!r}')


#2 błędy pojedynczego chunka
class ChunkError(PngError):
    pass


class UnexpectedEofError(ChunkError, EOFError):
    kind = UNEXPECTED_EOF

    def __init__(self, needed, available, offset=0):
        self.needed = needed
        self.available = available
        self.offset = offset
        super().__init__(f'Unexpected end of data at offset {offset}: '
                         f'need {needed} bytes, {available} available')


class ChecksumMismatchError(ChunkError):
    kind = CHECKSUM_MISMATCH

    def __init__(self, chunk_type, stored, computed, offset=0):
        self.chunk_type = chunk_type
        self.stored = stored
        self.computed = computed
        self.offset = offset
        super().__init__(f'Chunk {chunk_type!r} at offset {offset}: crc 0x{stored:08x} '
                         f'does not match computed 0x{computed:08x}, data may be corrupted')


class TextDecodeError(ChunkError):
    kind = TEXT_DECODE_ERROR


#3 błędy kontenera PNG
class InvalidSignatureError(PngError):
    kind = INVALID_SIGNATURE

    def __init__(self, found=b''):
        self.found = found
        super().__init__(f'Invalid PNG signature: {found!r}')


class ChunkNotFoundError(PngError, LookupError):
    kind = CHUNK_NOT_FOUND

    def __init__(self, chunk_type):
        self.chunk_type = chunk_type
        super().__init__(f'Chunk with type {chunk_type!r} not found')

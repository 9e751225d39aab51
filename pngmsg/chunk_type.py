from pngmsg.errors import InvalidAsciiError, InvalidLengthError, InvalidReservedCharError

# typ chunka to 4 bajty ASCII, wielkość litery na każdej pozycji koduje jedną flagę
#   [0] duża = critical,  mała = ancillary
#   [1] duża = public,    mała = private
#   [2] duża = poprawny bit zarezerwowany
#   [3] mała = safe to copy
CHUNK_TYPE_LENGTH = 4


class ChunkType:
    __slots__ = ('_chunk_type',)

    def __init__(self, chunk_type: bytes):
        # bez walidacji ASCII, poprawność sprawdza się osobno przez is_valid()
        chunk_type = bytes(chunk_type)
        if len(chunk_type) != CHUNK_TYPE_LENGTH:
            raise InvalidLengthError(chunk_type)
        self._chunk_type = chunk_type

    @classmethod
    def from_ascii_bytes(cls, chunk_type: bytes) -> 'ChunkType':
        chunk_type = bytes(chunk_type)
        if not chunk_type.isascii():
            raise InvalidAsciiError(chunk_type)
        return cls(chunk_type)

    @classmethod
    def from_string(cls, s: str) -> 'ChunkType':
        if not s.isascii():
            raise InvalidAsciiError(s)
        if len(s) != CHUNK_TYPE_LENGTH:
            raise InvalidLengthError(s)
        # cyfra na 3 pozycji nigdy nie spełni reguły bitu zarezerwowanego
        if s[2].isdigit():
            raise InvalidReservedCharError(s)
        return cls(s.encode('ascii'))

    def bytes(self) -> bytes:
        return self._chunk_type

    def is_critical(self) -> bool:
        return self._chunk_type[0:1].isupper()

    def is_public(self) -> bool:
        return self._chunk_type[1:2].isupper()

    def is_reserved_bit_valid(self) -> bool:
        return self._chunk_type[2:3].isupper()

    def is_safe_to_copy(self) -> bool:
        return self._chunk_type[3:4].islower()

    def is_valid(self) -> bool:
        return self._chunk_type.isascii() and self.is_reserved_bit_valid()

    def to_str(self) -> str:
        try:
            return self._chunk_type.decode('ascii')
        except UnicodeDecodeError as e:
            raise InvalidAsciiError(self._chunk_type) from e

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return f'ChunkType({self._chunk_type!r})'

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._chunk_type == other._chunk_type

    def __hash__(self):
        return hash(self._chunk_type)

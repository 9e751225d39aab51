from pngmsg.chunk import Chunk
from pngmsg.errors import ChunkNotFoundError, InvalidSignatureError

#1 stałe specyficzne dla formatu PNG
PngSignature: bytes = b'\x89PNG\r\n\x1a\n'   #8 bajtowy nagłówek PNG
critical = {b'IHDR', b'PLTE', b'IDAT', b'IEND'}   #4 krytyczne chunki wg RFC 2083


class Png:
    """Ordered chunk sequence of a PNG file, without the signature."""

    def __init__(self, chunks=None):
        self.chunks = list(chunks) if chunks else []

    @classmethod
    def from_chunks(cls, chunks):
        return cls(chunks)

    #2 parser - cały bufor w pamięci, chunki czytane aż do końca danych
    @classmethod
    def parse(cls, buffer) -> 'Png':
        buffer = memoryview(buffer)
        if bytes(buffer[:len(PngSignature)]) != PngSignature:
            raise InvalidSignatureError(bytes(buffer[:len(PngSignature)]))

        chunks = []
        offset = len(PngSignature)
        # pierwszy błąd (EOF albo CRC) przerywa parsowanie, nie ma częściowego wyniku
        while offset < len(buffer):
            chunk, offset = Chunk.read_from(buffer, offset)
            chunks.append(chunk)
        return cls(chunks)

    def serialize(self) -> bytes:
        return PngSignature + b''.join(chunk.serialize() for chunk in self.chunks)

    def header(self) -> bytes:
        return PngSignature

    def append_chunk(self, chunk: Chunk):
        self.chunks.append(chunk)

    def chunk_by_type(self, chunk_type: str):
        return next((c for c in self.chunks if _type_matches(c, chunk_type)), None)

    def chunks_by_type(self, chunk_type: str):
        return [c for c in self.chunks if _type_matches(c, chunk_type)]

    def remove_chunk(self, chunk_type: str) -> Chunk:
        # usuwany jest tylko pierwszy pasujący chunk, duplikaty zostają
        for i, c in enumerate(self.chunks):
            if _type_matches(c, chunk_type):
                return self.chunks.pop(i)
        raise ChunkNotFoundError(chunk_type)

    def offsets(self):
        #pozycje chunków w zserializowanym pliku (pierwszy zaraz za nagłówkiem)
        offset = len(PngSignature)
        for c in self.chunks:
            yield offset, c
            offset += len(c)

    def __len__(self):
        return len(self.chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __eq__(self, other):
        if not isinstance(other, Png):
            return NotImplemented
        return self.chunks == other.chunks

    __hash__ = None

    def __repr__(self):
        return f'Png({len(self.chunks)} chunks)'


def _type_matches(chunk, chunk_type):
    # porównanie po bajtach, typ spoza ASCII nigdy nie pasuje
    if not chunk_type.isascii():
        return False
    return chunk.chunk_type.bytes() == chunk_type.encode('ascii')

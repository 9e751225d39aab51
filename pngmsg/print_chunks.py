import struct
import zlib

from pngmsg.PNG import critical


def _flags(chunk_type):
    #flagi z wielkości liter typu
    return ', '.join((
        'critical' if chunk_type.is_critical() else 'ancillary',
        'public' if chunk_type.is_public() else 'private',
        'reserved ok' if chunk_type.is_reserved_bit_valid() else 'reserved bad',
        'safe to copy' if chunk_type.is_safe_to_copy() else 'unsafe to copy',
    ))


def _describe(typ, d):
    # krótki opis zawartości wybranych chunków, zwraca listę linii
    if typ == 'IHDR' and len(d) == 13:
        w, h, bitd, colort, compm, filterm, interlacem = struct.unpack('>IIBBBBB', d)
        return [f"  width={w}, height={h}, bit_depth={bitd}, color_type={colort}, "
                f"compression={compm}, filter={filterm}, interlace={interlacem}"]

    if typ == 'PLTE':
        # PLTE to paleta: lista 3 bajtowych kolorów RGB
        n_colors = len(d) // 3
        return [f"  Color {i}: R={r} G={g} B={b}"
                for i, (r, g, b) in enumerate(struct.iter_unpack('BBB', d[:n_colors * 3]))]

    if typ == 'gAMA' and len(d) == 4:
        gamma, = struct.unpack('>I', d)
        return [f"  gamma={gamma/100000.0}"]

    if typ == 'sBIT':
        return [f"  significant bits per channel = {list(d)}"]

    if typ == 'tIME' and len(d) == 7:
        y, mo, day, h, mi, s = struct.unpack('>HBBBBB', d)
        return [f"  {y:04}-{mo:02}-{day:02} {h:02}:{mi:02}:{s:02}"]

    if typ == 'bKGD':
        #zależnie od color-type: 1, 2 lub 6 bajtów
        if len(d) == 6:
            r, g, b = struct.unpack('>HHH', d)
            return [f"  background RGB (16-bit) = ({r}, {g}, {b})"]
        return [f"  bKGD raw data (length={len(d)})"]

    if typ == 'pHYs' and len(d) == 9:
        x_ppu, y_ppu, unit = struct.unpack('>IIB', d)
        unit_descr = 'meter' if unit == 1 else 'unknown'
        return [f"  x_ppu={x_ppu}", f"  y_ppu={y_ppu}", f"  unit={unit} ({unit_descr})"]

    if typ == 'tEXt':
        #niekompresowany tekst: key\0value
        try:
            key, val = d.split(b'\x00', 1)
        except ValueError:
            return ["  [Malformed tEXt]"]
        return [f"  key='{key.decode('latin-1')}', text='{val.decode('latin-1')}'"]

    if typ == 'zTXt':
        #tekst skompresowany zlib, trzeba rozpakować
        try:
            key, rest = d.split(b'\x00', 1)
            text = zlib.decompress(rest[1:]).decode('latin-1')
        except (ValueError, zlib.error):
            return ["  zTXt raw data (parse error)"]
        return [f"  key='{key.decode('latin-1')}', text='{text}'"]

    #pozostałe chunki: jeśli payload jest tekstem UTF-8 to go pokazujemy
    try:
        return [f"  text='{d.decode('utf-8')}'"] if d else []
    except UnicodeDecodeError:
        return [f"  raw data (length={len(d)})"]


#4 opis dowolnego chunka: typ, długość, offset w pliku i flagi
def formatChunk(chunk, offset):
    typ = chunk.chunk_type.bytes().decode('ascii', 'replace')
    lines = [f"{typ} length: {chunk.length}, offset: {offset}, crc: 0x{chunk.crc:08x}"]
    if chunk.chunk_type.is_valid():
        lines.append(f"  [{_flags(chunk.chunk_type)}]")
    else:
        lines.append("  [invalid chunk type]")
    # dekodery odrzucają plik z nieznanym chunkiem krytycznym
    if chunk.chunk_type.is_critical() and chunk.chunk_type.bytes() not in critical:
        lines.append("  [Warning] unknown critical chunk")
    if typ == 'IDAT' or typ == 'IEND':
        return lines
    return lines + _describe(typ, chunk.data)


def formatChunks(png):
    lines = []
    for offset, chunk in png.offsets():
        lines.extend(formatChunk(chunk, offset))
    return '\n'.join(lines)


def printChunks(png):
    print(formatChunks(png))

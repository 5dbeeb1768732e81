"""Reader for X11 PCF bitmap fonts."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import BinaryIO, Optional

PCF_MAGIC = b"\x01fcp"

PCF_DEFAULT_FORMAT = 0x00000000
PCF_INKBOUNDS = 0x00000200
PCF_ACCEL_W_INKBOUNDS = 0x00000100
PCF_COMPRESSED_METRICS = 0x00000100

PCF_GLYPH_PAD_MASK = 3 << 0
PCF_BYTE_MASK = 1 << 2
PCF_BIT_MASK = 1 << 3
PCF_SCAN_UNIT_MASK = 3 << 4

MISSING_GLYPH = 0xFFFF

_REVERSED_BITS = bytes(int(f"{b:08b}"[::-1], 2) for b in range(256))


class TableType(enum.IntFlag):
    """Table types found in the table of contents."""

    PROPERTIES = 1 << 0
    ACCELERATORS = 1 << 1
    METRICS = 1 << 2
    BITMAPS = 1 << 3
    INK_METRICS = 1 << 4
    BDF_ENCODINGS = 1 << 5
    SWIDTHS = 1 << 6
    GLYPH_NAMES = 1 << 7
    BDF_ACCELERATORS = 1 << 8


@dataclass(frozen=True)
class TocEntry:
    """One entry of the font's table of contents."""

    type: int
    format: int
    size: int
    offset: int


@dataclass(frozen=True)
class CompressedMetrics:
    """Metrics of one glyph."""

    left_bearing: int
    right_bearing: int
    width: int
    ascent: int
    descent: int
    attributes: int = 0


@dataclass(frozen=True)
class _Metrics:
    format: int
    count: int
    position: int
    compressed: bool


@dataclass(frozen=True)
class _Bitmaps:
    format: int
    count: int
    offsets_position: int
    sizes: tuple[int, int, int, int]
    data_position: int


@dataclass(frozen=True)
class _Encodings:
    format: int
    min_char_or_byte2: int
    max_char_or_byte2: int
    min_byte1: int
    max_byte1: int
    default_char: int
    position: int


@dataclass(frozen=True)
class _GlyphNames:
    format: int
    count: int
    offsets_position: int
    data_size: int
    data_position: int


def msbyte4(data: bytes) -> int:
    """Return the first four bytes of *data* as a big-endian unsigned integer."""
    if len(data) < 4:
        raise ValueError("need at least four bytes")
    return int.from_bytes(data[:4], "big")


def _int(data: bytes, fmt: int, signed: bool = False) -> int:
    order = "big" if fmt & PCF_BYTE_MASK else "little"
    return int.from_bytes(data, order, signed=signed)


def _cstr(data: bytes, offset: int) -> str:
    if not 0 <= offset <= len(data):
        raise ValueError(f"string offset {offset} out of range")
    end = data.find(b"\0", offset)
    if end < 0:
        end = len(data)
    return data[offset:end].decode("latin-1")


class PcfFont:
    """A PCF font read from a seekable binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.toc: list[TocEntry] = []
        self.properties: dict[str, str | int] = {}
        self.warnings: list[str] = []
        self._lines: list[str] = []
        self._metrics: Optional[_Metrics] = None
        self._bitmaps: Optional[_Bitmaps] = None
        self._encodings: Optional[_Encodings] = None
        self._names: Optional[_GlyphNames] = None

        header = self._read(0, 8)
        if header[:4] != PCF_MAGIC:
            raise ValueError("not a PCF font")
        count = int.from_bytes(header[4:8], "little")
        self._lines.append(f"toc total:{count}")
        raw = self._read(8, 16 * count)
        for start in range(0, len(raw), 16):
            fields = [int.from_bytes(raw[start + k:start + k + 4], "little") for k in range(0, 16, 4)]
            self.toc.append(TocEntry(*fields))

        handlers = {
            TableType.PROPERTIES: self._load_properties,
            TableType.METRICS: self._load_metrics,
            TableType.BITMAPS: self._load_bitmaps,
            TableType.BDF_ENCODINGS: self._load_encodings,
            TableType.GLYPH_NAMES: self._load_glyph_names,
        }
        for entry in self.toc:
            for seq, table in enumerate(TableType):
                if entry.type == table:
                    self._begin(entry, seq, table)
                    handler = handlers.get(table)
                    if handler is not None:
                        handler(entry)

    def _read(self, offset: int, size: int) -> bytes:
        self._stream.seek(offset)
        data = self._stream.read(size)
        if len(data) < size:
            raise ValueError(f"truncated font data at offset 0x{offset:x}")
        return data

    def _begin(self, entry: TocEntry, seq: int, table: TableType) -> None:
        self._lines.append(
            f"{seq:2d}::type:{'PCF_' + (table.name or ''):<21}format:0x{entry.format:04x}, "
            f"size:{entry.size:8d}, offset:0x{entry.offset:06x}"
        )
        actual = int.from_bytes(self._read(entry.offset, 4), "little")
        if actual != entry.format:
            message = f"warning : different TOC format:{entry.format:x},actual: {actual:x}"
            self.warnings.append(message)
            self._lines.append(message)

    def _load_properties(self, entry: TocEntry) -> None:
        data = self._read(entry.offset, entry.size)
        fmt = entry.format
        nprops = _int(data[4:8], fmt)
        props_end = 8 + nprops * 9
        str_offset = (props_end + 3) // 4 * 4
        if str_offset + 4 > len(data):
            raise ValueError("truncated properties table")
        str_size = _int(data[str_offset:str_offset + 4], fmt)
        strings = data[str_offset + 4:str_offset + 4 + str_size]
        self._lines.append(f"\t{nprops} properties, strings take {str_size} bytes")
        for start in range(8, props_end, 9):
            name = _cstr(strings, _int(data[start:start + 4], fmt))
            is_string = data[start + 4]
            raw = data[start + 5:start + 9]
            if is_string:
                value: str | int = _cstr(strings, _int(raw, fmt))
                self._lines.append(f"\t{name}={value}")
            else:
                value = _int(raw, fmt, signed=True)
                self._lines.append(f"\t{name}={value}(integer)")
            self.properties[name] = value

    def _load_metrics(self, entry: TocEntry) -> None:
        fmt = entry.format
        if fmt & PCF_COMPRESSED_METRICS:
            count = _int(self._read(entry.offset + 4, 2), fmt)
            self._metrics = _Metrics(fmt, count, entry.offset + 6, True)
        else:
            count = _int(self._read(entry.offset + 4, 4), fmt, signed=True)
            self._metrics = _Metrics(fmt, count, entry.offset + 8, False)
        self._lines.append(f"\tmetrics count:{count}")

    def _load_bitmaps(self, entry: TocEntry) -> None:
        fmt = entry.format
        count = _int(self._read(entry.offset + 4, 4), fmt, signed=True)
        if count < 0:
            raise ValueError("negative glyph count")
        sizes_pos = entry.offset + 8 + count * 4
        raw = self._read(sizes_pos, 16)
        sizes = tuple(_int(raw[k:k + 4], fmt) for k in range(0, 16, 4))
        self._bitmaps = _Bitmaps(fmt, count, entry.offset + 8, sizes, sizes_pos + 16)  # type: ignore[arg-type]
        self._lines.append(f"\tglyph count:{count} format: {fmt:2x}")
        for seq, size in enumerate(sizes):
            self._lines.append(f"\t\tbitmapSizes{seq}:{size:06x}")

    def _load_encodings(self, entry: TocEntry) -> None:
        fmt = entry.format
        raw = self._read(entry.offset + 4, 10)
        values = [_int(raw[k:k + 2], fmt, signed=True) for k in range(0, 10, 2)]
        self._encodings = _Encodings(fmt, *values, position=entry.offset + 14)
        labels = ("min_char_or_byte2", "max_char_or_byte2", "min_byte1", "max_byte1", "default_char")
        for label, value in zip(labels, values):
            self._lines.append(f"\t{label + ':':<18}{value:4x}")

    def _load_glyph_names(self, entry: TocEntry) -> None:
        fmt = entry.format
        count = _int(self._read(entry.offset + 4, 4), fmt)
        data_pos = entry.offset + 8 + count * 4
        data_size = _int(self._read(data_pos, 4), fmt)
        self._names = _GlyphNames(fmt, count, entry.offset + 8, data_size, data_pos + 4)
        self._lines.append(f"\tglyph name:count {count},data size:{data_size}")

    def encoding_index(self, ucs: int) -> Optional[int]:
        """Return the glyph index for character code *ucs*, or None if it has no glyph."""
        enc = self._encodings
        if enc is None:
            raise ValueError("font has no encodings table")
        if ucs < 0:
            raise ValueError("character code must not be negative")
        row, col = ucs >> 8, ucs & 0xFF
        if not (enc.min_byte1 <= row <= enc.max_byte1
                and enc.min_char_or_byte2 <= col <= enc.max_char_or_byte2):
            return None
        cols = enc.max_char_or_byte2 - enc.min_char_or_byte2 + 1
        slot = (row - enc.min_byte1) * cols + (col - enc.min_char_or_byte2)
        value = _int(self._read(enc.position + slot * 2, 2), enc.format)
        return None if value == MISSING_GLYPH else value

    def bitmap(self, index: int) -> list[int]:
        """Return the rows of glyph *index* as 32-bit integers, leftmost pixel in the top bit."""
        bm = self._bitmaps
        if bm is None:
            raise ValueError("font has no bitmaps table")
        if not 0 <= index < bm.count:
            raise IndexError(f"glyph index {index} out of range")
        fmt = bm.format
        start = _int(self._read(bm.offsets_position + index * 4, 4), fmt)
        if index + 1 < bm.count:
            end = _int(self._read(bm.offsets_position + (index + 1) * 4, 4), fmt)
        else:
            end = bm.sizes[fmt & PCF_GLYPH_PAD_MASK]
        if end < start:
            raise ValueError("corrupt bitmap offsets")
        raw = self._read(bm.data_position + start, end - start)
        pad = 1 << (fmt & PCF_GLYPH_PAD_MASK)
        unit = 1 << ((fmt & PCF_SCAN_UNIT_MASK) >> 4)
        bits = pad * 8
        rows = []
        for pos in range(0, len(raw) - pad + 1, pad):
            row = raw[pos:pos + pad]
            if not fmt & PCF_BYTE_MASK and unit > 1:
                row = b"".join(row[k:k + unit][::-1] for k in range(0, pad, unit))
            if not fmt & PCF_BIT_MASK:
                row = row.translate(_REVERSED_BITS)
            value = int.from_bytes(row, "big")
            rows.append(value << (32 - bits) if bits < 32 else value >> (bits - 32))
        return rows

    def metrics(self, index: int) -> CompressedMetrics:
        """Return the metrics of glyph *index*."""
        m = self._metrics
        if m is None:
            raise ValueError("font has no metrics table")
        if not 0 <= index < m.count:
            raise IndexError(f"glyph index {index} out of range")
        if m.compressed:
            raw = self._read(m.position + index * 5, 5)
            return CompressedMetrics(*(b - 0x80 for b in raw))
        raw = self._read(m.position + index * 12, 12)
        fields = [_int(raw[k:k + 2], m.format, signed=True) for k in range(0, 10, 2)]
        return CompressedMetrics(*fields, attributes=_int(raw[10:12], m.format))

    def glyph_name(self, index: int) -> str:
        """Return the name of glyph *index*."""
        names = self._names
        if names is None:
            raise ValueError("font has no glyph names table")
        if not 0 <= index < names.count:
            raise IndexError(f"glyph index {index} out of range")
        offset = _int(self._read(names.offsets_position + index * 4, 4), names.format)
        if offset >= names.data_size:
            raise ValueError("glyph name offset out of range")
        data = self._read(names.data_position + offset, names.data_size - offset)
        return _cstr(data, 0)

    def describe(self) -> str:
        """Return a text summary of the tables read from the font."""
        return "\n".join(self._lines)

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()

    def __enter__(self) -> "PcfFont":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def open_font(path: str) -> PcfFont:
    """Open the PCF font file at *path*."""
    stream = open(path, "rb")
    try:
        return PcfFont(stream)
    except BaseException:
        stream.close()
        raise
"""Compress or decompress a stream with zlib, chunk by chunk."""

from __future__ import annotations

import sys
import zlib
from typing import BinaryIO, Optional, Sequence

CHUNK = 16384
DEFAULT_COMPRESSION = zlib.Z_DEFAULT_COMPRESSION

USAGE = "zpipe usage: zpipe [-d] < source > dest\n"
_DATA_ERROR = "invalid or incomplete deflate data"


class ZpipeError(Exception):
    """Raised for a bad compression level or bad compressed data."""


def compress_stream(src: BinaryIO, dst: BinaryIO, level: int = DEFAULT_COMPRESSION) -> None:
    """Read *src* to its end and write the zlib stream to *dst*."""
    try:
        compressor = zlib.compressobj(level)
    except (ValueError, zlib.error) as exc:
        raise ZpipeError("invalid compression level") from exc
    while chunk := src.read(CHUNK):
        dst.write(compressor.compress(chunk))
    dst.write(compressor.flush())


def decompress_stream(src: BinaryIO, dst: BinaryIO) -> None:
    """Decompress one zlib stream from *src* into *dst*."""
    decompressor = zlib.decompressobj()
    while not decompressor.eof:
        chunk = src.read(CHUNK)
        if not chunk:
            break
        try:
            dst.write(decompressor.decompress(chunk))
        except zlib.error as exc:
            raise ZpipeError(_DATA_ERROR) from exc
    if not decompressor.eof:
        raise ZpipeError(_DATA_ERROR)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compress stdin to stdout, or decompress with ``-d``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if not args:
            compress_stream(sys.stdin.buffer, sys.stdout.buffer)
        elif args == ["-d"]:
            decompress_stream(sys.stdin.buffer, sys.stdout.buffer)
        else:
            sys.stderr.write(USAGE)
            return 1
        sys.stdout.buffer.flush()
    except ZpipeError as exc:
        sys.stderr.write(f"zpipe: {exc}\n")
        return 1
    except OSError as exc:
        sys.stderr.write(f"zpipe: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
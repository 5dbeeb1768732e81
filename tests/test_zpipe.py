import io
import os
import sys
import zlib

import pytest

from kitbag.zpipe import CHUNK, ZpipeError, compress_stream, decompress_stream, main


def _compress(data, level=-1):
    out = io.BytesIO()
    compress_stream(io.BytesIO(data), out, level)
    return out.getvalue()


def _decompress(data):
    out = io.BytesIO()
    decompress_stream(io.BytesIO(data), out)
    return out.getvalue()


@pytest.mark.parametrize("data", [b"", b"hello world", os.urandom(CHUNK * 3 + 17), b"ab" * CHUNK * 4])
def test_round_trip(data):
    assert _decompress(_compress(data)) == data


def test_output_is_zlib_format():
    data = b"some text " * 100
    assert zlib.decompress(_compress(data, 9)) == data


def test_reads_zlib_output():
    data = b"payload" * 50
    assert _decompress(zlib.compress(data)) == data


def test_invalid_level():
    with pytest.raises(ZpipeError):
        _compress(b"x", 42)


def test_garbage_input():
    with pytest.raises(ZpipeError):
        _decompress(b"this is not deflate data")


def test_truncated_input():
    packed = _compress(b"abcdef" * 1000)
    with pytest.raises(ZpipeError):
        _decompress(packed[: len(packed) // 2])


def _run(monkeypatch, argv, data):
    out = io.BytesIO()
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(out))
    status = main(argv)
    return status, out.getvalue()


def test_main_compress_then_decompress(monkeypatch):
    data = b"round trip through main" * 20
    status, packed = _run(monkeypatch, [], data)
    assert status == 0
    status, unpacked = _run(monkeypatch, ["-d"], packed)
    assert status == 0
    assert unpacked == data


def test_main_bad_data(monkeypatch, capsys):
    status, _ = _run(monkeypatch, ["-d"], b"junk")
    assert status == 1
    assert "zpipe:" in capsys.readouterr().err


def test_main_usage(capsys):
    assert main(["-x"]) == 1
    assert "usage" in capsys.readouterr().err
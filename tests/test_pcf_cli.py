import getopt

import pytest

from kitbag.pcf_cli import FONT_NAMES, Options, main, parse_args, parse_number, render_bitmap


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0x41", 0x41),
        ("0X1f", 0x1F),
        ("  123", 123),
        ("12 34", 12),
        ("12a", 0),
        ("0xzz", 0),
        ("", 0),
        ("0x", 0),
        ("007", 7),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_args_defaults():
    assert parse_args([]) == Options("/usr/share/fonts/wenquanyi/wenquanyi_13px.pcf", 0)


def test_parse_args_values():
    opts = parse_args(["-f", "1", "-U", "0x33e0"])
    assert opts.fontname == "/usr/share/fonts/wenquanyi/wenquanyi_10pt.pcf"
    assert opts.charcode == 0x33E0


def test_parse_args_clamps_font_number():
    assert parse_args(["-f", "9"]).fontname == FONT_NAMES[-1]


def test_parse_args_negative_font_number():
    with pytest.raises(ValueError):
        parse_args(["-f", "-1"])


def test_parse_args_unknown_option():
    with pytest.raises(getopt.GetoptError):
        parse_args(["-z"])


def test_render_bitmap():
    lines = render_bitmap([0x80000000, 0]).split("\n")
    assert len(lines) == 2
    assert all(len(line) == 32 for line in lines)
    assert lines[0][0] == "\U0001f520"
    assert lines[0].count("\U0001f520") == 1
    assert set(lines[1]) == {"\uff3f"}


def test_render_bitmap_last_pixel():
    line = render_bitmap([1])
    assert line[-1] == "\U0001f520"
    assert line[:-1] == "\uff3f" * 31


def test_main_rejects_unknown_option():
    assert main(["-z"]) == 2
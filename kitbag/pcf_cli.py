"""Show one character of a PCF font: table summary, bitmap, metrics and name."""

from __future__ import annotations

import getopt
import re
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from kitbag.pcf_font import PcfFont, open_font

FONT_NAMES = (
    "/usr/share/fonts/wenquanyi/wenquanyi_9pt.pcf",
    "/usr/share/fonts/wenquanyi/wenquanyi_10pt.pcf",
    "/usr/share/fonts/wenquanyi/wenquanyi_11pt.pcf",
    "/usr/share/fonts/wenquanyi/wenquanyi_12pt.pcf",
    "/usr/share/fonts/wenquanyi/wenquanyi_13px.pcf",
)

PIXEL_SET = "\U0001f520"
PIXEL_CLEAR = "\uff3f"

_HEX_DIGITS = "0123456789abcdef"


@dataclass(frozen=True)
class Options:
    """Font file and character code chosen on the command line."""

    fontname: str
    charcode: int


def parse_number(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal number; 0 if malformed.

    Leading spaces are skipped and parsing stops at the first space.
    """
    text = text.lstrip(" ")
    word = text.split(" ", 1)[0]
    if word[:2] in ("0x", "0X"):
        digits, base = word[2:].lower(), 16
        if any(ch not in _HEX_DIGITS for ch in digits):
            return 0
    else:
        digits, base = word, 10
        if any(ch not in "0123456789" for ch in digits):
            return 0
    return int(digits, base) if digits else 0


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> Options:
    """Parse ``-f <font number>`` and ``-U <character code>``."""
    opts, _ = getopt.getopt(list(argv), "f:U:")
    num = 4
    charcode = 0
    for flag, value in opts:
        if flag == "-f":
            num = _atoi(value)
        elif flag == "-U":
            charcode = parse_number(value)
    if num < 0:
        raise ValueError("font number must not be negative")
    num = min(num, len(FONT_NAMES) - 1)
    return Options(FONT_NAMES[num], charcode)


def render_bitmap(rows: Sequence[int]) -> str:
    """Draw 32-bit rows, top bit first, one line per row."""
    return "\n".join(
        "".join(PIXEL_SET if row & (1 << (31 - bit)) else PIXEL_CLEAR for bit in range(32))
        for row in rows
    )


def _char(code: int) -> str:
    try:
        return chr(code)
    except (ValueError, OverflowError):
        return "?"


def _show_char(font: PcfFont, code: int) -> bool:
    index = font.encoding_index(code)
    if index is None:
        print(f"not available for character [{_char(code)}]")
        return False
    print(render_bitmap(font.bitmap(index)))
    print()
    m = font.metrics(index)
    print(f"left_sided_bearing:{m.left_bearing}\nright_side_bearing:{m.right_bearing}")
    print(f"width:{m.width},ascent:{m.ascent},descent:{m.descent}")
    try:
        name = font.glyph_name(index)
    except ValueError:
        name = ""
    print(f"font index:{index:04x}->>{name}({_char(code)})")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        opts = parse_args(args)
    except (getopt.GetoptError, ValueError) as exc:
        print(f"pcfont: {exc}", file=sys.stderr)
        return 2
    code = opts.charcode
    print(f"load char 0x{code:04x}/{code} on font {opts.fontname}")
    try:
        font = open_font(opts.fontname)
    except OSError:
        print(f"open {opts.fontname} error")
        return 1
    except ValueError as exc:
        print(f"{opts.fontname}: {exc}")
        return 1
    with font:
        print(font.describe())
        try:
            found = _show_char(font, code)
        except (ValueError, IndexError) as exc:
            print(f"{opts.fontname}: {exc}")
            return 1
    return 0 if found else 1


if __name__ == "__main__":
    sys.exit(main())
"""A growable text buffer and a field splitter."""

from __future__ import annotations

from typing import Any


class StringBuffer:
    """Accumulates text piece by piece."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def _push(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def append_char(self, char: str | int) -> None:
        """Append one character, given as a string or a code point."""
        if isinstance(char, int):
            char = chr(char)
        if len(char) != 1:
            raise ValueError("expected a single character")
        self._push(char)

    def append(self, text: str) -> None:
        """Append *text*."""
        self._push(text)

    def printf(self, fmt: str, *args: Any) -> None:
        """Append ``fmt % args``."""
        self._push(fmt % args if args else fmt)

    def reset(self) -> None:
        """Empty the buffer."""
        self._parts.clear()
        self._length = 0

    def dup(self, text: str) -> str:
        """Replace the contents with *text* and return a copy of it."""
        self.reset()
        self.append(text)
        return str(self)

    def __str__(self) -> str:
        if len(self._parts) > 1:
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        return self._length


def split_fields(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, keeping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return text.split(sep)
"""Command-line parsing that gathers options and free arguments in any order."""

from __future__ import annotations

import getopt
from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass
class ParsedCommand:
    """Options as ``(letter, value)`` pairs in order, and the free arguments."""

    options: list[tuple[str, str]] = field(default_factory=list)
    args: list[str] = field(default_factory=list)

    def value(self, letter: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the last occurrence of option *letter*."""
        for flag, value in reversed(self.options):
            if flag == letter:
                return value
        return default


class CommandParser:
    """Parses arguments against a getopt-style option string such as ``"c:s:"``."""

    def __init__(self, options: str) -> None:
        self._options = options

    def parse(self, argv: Sequence[str]) -> ParsedCommand:
        """Parse *argv* (without the program name); raise getopt.GetoptError on bad options."""
        opts, rest = getopt.gnu_getopt(list(argv), self._options)
        return ParsedCommand([(flag.lstrip("-"), value) for flag, value in opts], rest)
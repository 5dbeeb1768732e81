"""Weighted directed paths between named nodes: parsing and generation."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Optional, TextIO

MAX_WEIGHT = 100000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Path:
    """A numbered path from *src* to *dst* with a weight."""

    seq: int
    src: str
    dst: str
    weight: int


class FormatError(ValueError):
    """Raised when path data is malformed; keeps what was read before the error."""

    def __init__(self, message: str, paths: Iterable[Path] = (), nodes: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.paths = list(paths)
        self.nodes = list(nodes)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse(stream: TextIO) -> tuple[list[Path], list[str]]:
    """Read ``M<seq> <src> <dst> <weight>`` records from *stream*.

    Returns the paths and the distinct node names in order of first
    appearance. Raises FormatError on a malformed record.
    """
    tokens = iter(stream.read().split())
    paths: list[Path] = []
    nodes: dict[str, None] = {}

    def fail(message: str) -> FormatError:
        return FormatError(message, paths, nodes)

    for head in tokens:
        seq = _atoi(head[1:])
        if seq == 0:
            raise fail(f"bad sequence number {head!r}")
        rest = list(islice(tokens, 3))
        for name in rest[:2]:
            nodes.setdefault(name, None)
        if len(rest) < 3:
            raise fail(f"incomplete record {head!r}")
        src, dst, weight = rest
        if not _INTEGER.fullmatch(weight):
            raise fail(f"bad weight {weight!r} in record {head!r}")
        paths.append(Path(seq, src, dst, int(weight)))
    return paths, list(nodes)


def generate(dim: int, rng: Optional[random.Random] = None) -> list[str]:
    """Return records of a complete graph on nodes ``C1`` .. ``C<dim>`` with random weights."""
    rng = rng or random.Random()
    lines = []
    seq = 0
    for i in range(1, dim + 1):
        for j in range(1, dim + 1):
            if i == j:
                continue
            seq += 1
            lines.append(format_path(Path(seq, f"C{i}", f"C{j}", rng.randrange(MAX_WEIGHT))))
    return lines


def format_path(path: Path) -> str:
    """Format *path* as one tab-separated record."""
    return f"M{path.seq}\t{path.src}\t{path.dst}\t{path.weight}"
"""Find the largest regular files under a directory."""

from __future__ import annotations

import bisect
import os
import stat
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

K = 1024
M = K * K
DEFAULT_COUNT = 10

USAGE = "usage:\n\tlarge <path>\nfind large file on folder\n"

Action = Callable[[str], object]
ErrorHandler = Callable[[OSError], object]


@dataclass(frozen=True)
class _Slot:
    size: int
    name: Optional[str]


class LargestFiles:
    """Keeps the names of the *size* largest files seen so far."""

    def __init__(self, size: int = DEFAULT_COUNT) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        # Ascending by size; slot 0 holds the smallest kept entry.
        self._slots = [_Slot(0, None)] * size

    def add(self, name: str, size: int) -> bool:
        """Offer a file; return True if it is now among the largest."""
        if size <= self._slots[0].size:
            return False
        rest = self._slots[1:]
        position = bisect.bisect_left([slot.size for slot in rest], size)
        rest.insert(position, _Slot(size, name))
        self._slots = rest
        return True

    @property
    def entries(self) -> list[tuple[str, int]]:
        """The kept files as ``(name, size)``, largest first."""
        return [(slot.name, slot.size) for slot in reversed(self._slots) if slot.name is not None]

    def report(self) -> list[str]:
        """Return one numbered line per slot, largest first."""
        lines = []
        for rank, slot in enumerate(reversed(self._slots)):
            if slot.name is None:
                lines.append(f"{rank:2d}:")
            else:
                lines.append(f"{rank:2d}: {format_size(slot.size)} {slot.name}")
        return lines


def format_size(size: int) -> str:
    """Format a byte count in a six-character column with a K or M unit."""
    unit = " "
    if size > M:
        size, unit = size // M, "M"
    elif size > K:
        size, unit = size // K, "K"
    return f"{size:5d}{unit}"


def _skipped(name: str) -> bool:
    return name == "." or name.startswith("..")


def _walk_dir(path: str, action: Action, on_error: ErrorHandler) -> bool:
    try:
        entries = os.scandir(path)
    except OSError as exc:
        # A directory that cannot be opened stops the walk.
        on_error(exc)
        return False
    with entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as exc:
                if on_error(exc):
                    return False
                break
            if _skipped(entry.name):
                continue
            full = os.path.join(path, entry.name)
            if entry.is_dir(follow_symlinks=False):
                if not _walk_dir(full, action, on_error):
                    return False
            elif entry.is_symlink() or entry.is_file(follow_symlinks=False):
                if action(full):
                    return False
    return True


def walk(top: str, action: Action, on_error: ErrorHandler) -> bool:
    """Call *action* on every regular file and symlink under *top*.

    A truthy result from *action*, or from *on_error* for a read error,
    stops the walk. Returns True when the walk ran to the end.
    """
    try:
        st = os.stat(top)
    except OSError as exc:
        on_error(exc)
        return False
    if stat.S_ISDIR(st.st_mode):
        return _walk_dir(top, action, on_error)
    if stat.S_ISREG(st.st_mode):
        return not action(top)
    return True


def list_dir(path: str) -> list[tuple[str, str]]:
    """List a directory as ``(kind, full path)``; kind is D, R, L or ?."""
    result = []
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_symlink():
                kind = "L"
            elif entry.is_dir(follow_symlinks=False):
                kind = "D"
            elif entry.is_file(follow_symlinks=False):
                kind = "R"
            else:
                kind = "?"
            result.append((kind, os.path.join(path, entry.name)))
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the largest files under the directory given as argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE, end="")
        return 0
    largest = LargestFiles(DEFAULT_COUNT)

    def report_error(exc: OSError) -> bool:
        print(f"error: {exc.strerror or exc}")
        return True

    def one_file(name: str) -> bool:
        try:
            st = os.stat(name)
        except OSError as exc:
            print(f"stat error on '{name}'")
            return report_error(exc)
        if stat.S_ISREG(st.st_mode):
            largest.add(name, st.st_size)
        return False

    walk(args[0], one_file, report_error)
    for line in largest.report():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Upper-case each command-line argument in its own thread."""

from __future__ import annotations

import getopt
import locale
import string
import sys
import threading
from typing import Iterable, Optional, Sequence

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def upcase_in_threads(strings: Iterable[str], stack_size: Optional[int] = None) -> list[str]:
    """Upper-case ASCII letters of every string, one thread per string.

    A positive *stack_size* sets the stack size of the worker threads.
    """
    items = list(strings)
    results: list[str] = [""] * len(items)

    def work(position: int, text: str) -> None:
        results[position] = text.translate(_UPPER)

    old_size = threading.stack_size(stack_size) if stack_size and stack_size > 0 else None
    threads = []
    try:
        for position, text in enumerate(items):
            thread = threading.Thread(target=work, args=(position, text))
            thread.start()
            threads.append(thread)
    finally:
        if old_size is not None:
            threading.stack_size(old_size)
    for thread in threads:
        thread.join()
    return results


def _parse_size(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        locale_name = locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        locale_name = locale.setlocale(locale.LC_ALL)
    print(f"Locale name:{locale_name}")
    try:
        opts, rest = getopt.getopt(args, "s:")
    except getopt.GetoptError:
        print("Usage: upcase [-s stack-size] arg...")
        return 1
    stack_size = -1
    for _, value in opts:
        stack_size = _parse_size(value)
        print(f"stack_size {stack_size}b")
    try:
        results = upcase_in_threads(rest, stack_size)
    except (ValueError, RuntimeError) as exc:
        print(f"thread stack size: {exc}", file=sys.stderr)
        return 1
    for number, value in enumerate(results, start=1):
        print(f"Joined with thread {number:2d}; returned value was {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Pick a set of cheap paths that should connect every node, and check it."""

from __future__ import annotations

import getopt
import re
import sys
from collections import defaultdict, deque
from typing import Optional, Sequence

from kitbag.paths import FormatError, Path, format_path, generate, parse

USAGE = "usage: chemical [-G <dimension>] <path file>"
RULE = "====================================="


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def add_left(paths: Sequence[Path], nodes: Sequence[str]) -> list[Path]:
    """Take the first path leaving each source node, until every node is a source."""
    seen: set[str] = set()
    chosen = []
    for path in paths:
        if len(seen) == len(nodes):
            break
        if path.src not in seen:
            seen.add(path.src)
            chosen.append(path)
    return chosen


def add_right(paths: Sequence[Path], nodes: Sequence[str], target: Sequence[Path]) -> list[Path]:
    """Return *target* extended by the first path reaching each destination it lacks."""
    result = list(target)
    seen = {path.dst for path in target}
    for path in paths:
        if len(seen) == len(nodes):
            break
        if path.dst not in seen:
            seen.add(path.dst)
            result.append(path)
    return result


def incomplete_node(paths: Sequence[Path], nodes: Sequence[str]) -> Optional[str]:
    """Return the first node that cannot reach every other node, or None."""
    edges: dict[str, list[str]] = defaultdict(list)
    for path in paths:
        edges[path.src].append(path.dst)
    wanted = set(nodes)
    for node in nodes:
        reached = {node}
        queue = deque([node])
        while queue:
            for nxt in edges[queue.popleft()]:
                if nxt not in reached:
                    reached.add(nxt)
                    queue.append(nxt)
        if not wanted <= reached:
            return node
    return None


def solution(paths: Sequence[Path], nodes: Sequence[str]) -> tuple[list[Path], int, Optional[str]]:
    """Choose paths; return them, their total weight and the first incomplete node."""
    chosen = add_right(paths, nodes, add_left(paths, nodes))
    total = sum(path.weight for path in chosen)
    return chosen, total, incomplete_node(chosen, nodes)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE)
        return 0
    try:
        opts, rest = getopt.getopt(args, "G:h")
    except getopt.GetoptError:
        print(USAGE)
        return 0
    for flag, value in opts:
        if flag == "-G":
            for line in generate(_atoi(value)):
                print(line)
            return 0
        print(USAGE)
        return 0
    if not rest:
        print(USAGE)
        return 0

    try:
        with open(rest[0], encoding="utf-8") as stream:
            try:
                paths, nodes = parse(stream)
            except FormatError as exc:
                print(f"wrong file format: {exc}", file=sys.stderr)
                paths, nodes = exc.paths, exc.nodes
    except OSError as exc:
        print(f"cannot open file: {exc}", file=sys.stderr)
        return 1

    paths = sorted(paths, key=lambda path: path.weight)
    for path in paths:
        print(format_path(path))
    print(RULE)
    chosen, total, missing = solution(paths, nodes)
    for path in chosen:
        print(format_path(path))
    print(total)
    print("Test completely...")
    if missing is None:
        print("OK")
    else:
        print(f"{missing} is not complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
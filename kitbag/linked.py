"""A singly linked stack: push and pop at the head."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class _Node:
    obj: Any
    next: Optional["_Node"]


class LinkedStack:
    """Last-in first-out collection; iteration runs from the newest item."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, obj: Any) -> None:
        """Put *obj* at the head."""
        self._head = _Node(obj, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the head object; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.obj

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.obj
            node = node.next
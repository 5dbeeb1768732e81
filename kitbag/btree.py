"""An unbalanced binary search tree ordered by a three-way comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]


@dataclass
class _Node:
    obj: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinaryTree:
    """Binary search tree; equal objects go to the left subtree."""

    def __init__(self, cmp: Compare) -> None:
        if cmp is None:
            raise ValueError("a comparison function is required")
        self._cmp = cmp
        self._root: Optional[_Node] = None
        self._size = 0

    def add(self, obj: Any) -> None:
        """Insert *obj*."""
        new = _Node(obj)
        if self._root is None:
            self._root = new
        else:
            node = self._root
            while True:
                if self._cmp(obj, node.obj) <= 0:
                    if node.left is None:
                        node.left = new
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new
                        break
                    node = node.right
        self._size += 1

    def delete(self, obj: Any) -> Any:
        """Remove the object equal to *obj* and return it; raise KeyError if absent."""
        self._root, deleted = self._delete(self._root, obj)
        self._size -= 1
        return deleted

    def _delete(self, node: Optional[_Node], obj: Any) -> tuple[Optional[_Node], Any]:
        if node is None:
            raise KeyError(obj)
        result = self._cmp(obj, node.obj)
        if result < 0:
            node.left, deleted = self._delete(node.left, obj)
            return node, deleted
        if result > 0:
            node.right, deleted = self._delete(node.right, obj)
            return node, deleted
        deleted = node.obj
        if node.left is None:
            return node.right, deleted
        if node.right is None:
            return node.left, deleted
        # Replace with the largest object of the left subtree.
        parent, pred = node, node.left
        while pred.right is not None:
            parent, pred = pred, pred.right
        if parent is node:
            parent.left = pred.left
        else:
            parent.right = pred.left
        node.obj = pred.obj
        return node, deleted

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.obj
            node = node.right

    def __len__(self) -> int:
        return self._size
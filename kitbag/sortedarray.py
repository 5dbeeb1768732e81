"""A growable array that can switch into sorted mode with binary search."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]


class Array:
    """Sequence of objects; once sorted, additions keep the order."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._cmp: Optional[Compare] = None

    @property
    def is_sorted(self) -> bool:
        """True once :meth:`sort` has been called."""
        return self._cmp is not None

    def add(self, obj: Any) -> None:
        """Append *obj*, or insert it in order when the array is sorted."""
        if self._cmp is None:
            self._items.append(obj)
            return
        _, position = self.locate(obj)
        self._items.insert(position, obj)

    def get(self, index: int) -> Any:
        """Return the object at *index*; raise IndexError when out of range."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def set(self, index: int, obj: Any) -> None:
        """Replace the object at *index*; not allowed on a sorted array."""
        if self._cmp is not None:
            raise ValueError("cannot set items of a sorted array")
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        self._items[index] = obj

    def sort(self, cmp: Compare) -> None:
        """Sort with the three-way comparison *cmp* and keep the array sorted."""
        self._items.sort(key=cmp_to_key(cmp))
        self._cmp = cmp

    def _require_sorted(self) -> Compare:
        if self._cmp is None:
            raise ValueError("current array is not sorted")
        return self._cmp

    def locate(self, key: Any) -> tuple[bool, int]:
        """Binary search for *key*.

        Returns ``(found, index)``: the index of a matching object, or the
        position where *key* would be inserted to keep the order.
        """
        cmp = self._require_sorted()
        start, end = 0, len(self._items)
        if end == 0:
            return False, 0
        while end - start > 1:
            mid = (start + end) // 2
            result = cmp(key, self._items[mid])
            if result < 0:
                end = mid
            elif result > 0:
                start = mid
            else:
                return True, mid
        result = cmp(key, self._items[start])
        if result == 0:
            return True, start
        return False, start if result < 0 else start + 1

    def find(self, key: Any) -> Any:
        """Return the stored object equal to *key*; raise KeyError if absent."""
        found, index = self.locate(key)
        if not found:
            raise KeyError(key)
        return self._items[index]

    def resize(self, size: int, callback: Optional[Callable[[Any], Any]] = None) -> None:
        """Grow with ``None`` padding, or shrink, passing dropped objects to *callback*."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > len(self._items):
            self._items.extend([None] * (size - len(self._items)))
            return
        if callback is not None:
            for obj in self._items[size:]:
                callback(obj)
        del self._items[size:]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]
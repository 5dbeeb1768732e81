"""Conway's game of life on a square board."""

from __future__ import annotations

import random
from typing import Optional

PIXEL = 5
MARGIN = 10
DEFAULT_SIZE = 80
_ALIVE_ABOVE = 80


class LifePattern:
    """A square board of cells; the world ends at the board edges."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._cells = [[False] * size for _ in range(size)]

    def init(self, rng: Optional[random.Random] = None) -> None:
        """Fill the board at random, about one cell in five alive."""
        rng = rng or random.Random()
        self._cells = [
            [rng.randrange(100) > _ALIVE_ABOVE for _ in range(self.size)]
            for _ in range(self.size)
        ]

    def has_life(self, x: int, y: int) -> bool:
        """True if the cell at column *x*, row *y* is alive; False off the board."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            return False
        return self._cells[y][x]

    def _neighbours(self, x: int, y: int) -> int:
        return sum(
            self.has_life(x + dx, y + dy)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if dx or dy
        )

    def next(self) -> None:
        """Advance one generation."""
        self._cells = [
            [
                count == 3 or (count == 2 and alive)
                for x, alive in enumerate(row)
                for count in (self._neighbours(x, y),)
            ]
            for y, row in enumerate(self._cells)
        ]

    def new_life(self, x: int, y: int) -> bool:
        """Bring to life the cell under screen point (*x*, *y*).

        Returns False when the point is outside the board.
        """
        col = int((x - MARGIN) / PIXEL)
        row = int((y - MARGIN) / PIXEL)
        if not (0 <= col < self.size and 0 <= row < self.size):
            return False
        self._cells[row][col] = True
        return True

    def render(self) -> str:
        """Draw the board, one line per row, ``#`` for a live cell."""
        return "\n".join("".join("#" if alive else "." for alive in row) for row in self._cells)
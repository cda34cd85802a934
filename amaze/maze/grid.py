"""Fixed-size cell storage for a maze.

Cells are stored column-major (``cells[x][y]``). Coordinates with ``x < 1``,
``y < 1``, ``x >= width`` or ``y >= height`` are out of bounds and read as
wall for every caller, which keeps carving and movement from leaving the grid.
"""

from __future__ import annotations

from typing import Iterator, List

from .config import Coord
from .tiles import ROOM, WALL


class Grid:
    def __init__(self, width: int, height: int):
        # Odd width/height >= 3 is a caller precondition (MazeConfig.validate)
        self.width = width
        self.height = height
        self.cells: List[List[str]] = [[WALL for _ in range(height)] for _ in range(width)]

    @classmethod
    def allocate(cls, width: int, height: int) -> "Grid":
        return cls(width, height)

    def clear(self) -> None:
        """Reset every cell to wall in place."""
        for column in self.cells:
            for y in range(self.height):
                column[y] = WALL

    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 1 <= x < self.width and 1 <= y < self.height

    def get(self, c: Coord) -> str:
        if not self.in_bounds(c):
            return WALL
        x, y = c
        return self.cells[x][y]

    def is_wall(self, c: Coord) -> bool:
        return self.get(c) == WALL

    def is_visited(self, c: Coord) -> bool:
        """True when carving must not enter ``c``: out of bounds or already opened."""
        return not self.in_bounds(c) or not self.is_wall(c)

    def set(self, c: Coord, state: str) -> None:
        if not self.in_bounds(c):
            raise IndexError(f"cell {c} outside {self.width}x{self.height} grid")
        x, y = c
        self.cells[x][y] = state

    def count(self, state: str) -> int:
        return sum(column.count(state) for column in self.cells)

    def open_cells(self) -> Iterator[Coord]:
        for x in range(self.width):
            for y in range(self.height):
                if self.cells[x][y] != WALL:
                    yield x, y

    def rows(self) -> Iterator[List[str]]:
        """Yield cell states row by row (top to bottom) for rendering."""
        for y in range(self.height):
            yield [self.cells[x][y] for x in range(self.width)]

    def snapshot(self) -> List[List[str]]:
        return [list(column) for column in self.cells]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, rooms={self.count(ROOM)})"

"""A wrapping two-dimensional grid and helpers to walk over index ranges."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Matrix(Generic[T]):
    """A grid of ``size_x`` by ``size_y`` cells whose indices wrap around.

    A ``y`` size below one makes the grid square.
    """

    def __init__(self, x: int = 0, y: int = 0, fill: T | None = None) -> None:
        self._rows: list[list[T | None]] = []
        self._size_x = 0
        self._size_y = 0
        self.resize(x, y, fill)

    def resize(self, x: int = 0, y: int = 0, fill: T | None = None) -> None:
        """Change the size; kept cells keep their values, new ones get ``fill``."""
        if x < 0 or y < 0:
            raise ValueError("matrix sizes must not be negative")
        y = y if y >= 1 else x
        rows = self._rows[:x]
        for row in rows:
            del row[y:]
            row.extend([fill] * (y - len(row)))
        rows.extend([[fill] * y for _ in range(x - len(rows))])
        self._rows = rows
        self._size_x = x
        self._size_y = y

    def size_x(self) -> int:
        """Return the number of columns."""
        return self._size_x

    def size_y(self) -> int:
        """Return the number of rows."""
        return self._size_y

    def _cell(self, key: tuple[int, int]) -> tuple[int, int]:
        if not self._size_x or not self._size_y:
            raise IndexError("matrix is empty")
        x, y = key
        return x % self._size_x, y % self._size_y

    def __getitem__(self, key: tuple[int, int]) -> T | None:
        x, y = self._cell(key)
        return self._rows[x][y]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        x, y = self._cell(key)
        self._rows[x][y] = value


def matrix_iterate(xmin: int, xmax: int, ymin: int, ymax: int) -> Iterator[tuple[int, int]]:
    """Yield every ``(x, y)`` of the ranges, x running fastest."""
    for y in range(ymin, ymax):
        for x in range(xmin, xmax):
            yield x, y


def _anti_diagonals(xmin: int, xmax: int, ymin: int, ymax: int) -> Iterator[tuple[int, int]]:
    starts = [(x, ymin) for x in range(xmin, xmax)]
    starts += [(xmax - 1, y) for y in range(ymin + 1, ymax)]
    for x, y in starts:
        while x >= xmin and y < ymax:
            yield x, y
            x -= 1
            y += 1


def matrix_traverse(
    xmin: int,
    xmax: int,
    ymin: int,
    ymax: int,
    fn: Callable[[int, int], bool],
) -> bool:
    """Call ``fn(x, y)`` for every cell along anti-diagonals.

    Stops and returns False as soon as ``fn`` returns a false value.
    """
    return all(fn(x, y) for x, y in _anti_diagonals(xmin, xmax, ymin, ymax))
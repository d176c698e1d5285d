"""Two-dimensional matrices with rotation, flipping, slicing and flood fills."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from wayfind.cells import bfs_reachable as _bfs_reachable
from wayfind.cells import cell_neighbours
from wayfind.cells import dfs_reachable as _dfs_reachable
from wayfind.utils import in_direction as _in_direction
from wayfind.utils import move_in_direction as _move_in_direction
from wayfind.utils import uint_sqrt

C = TypeVar("C")
O = TypeVar("O")
Position = tuple[int, int]
Direction = tuple[int, int]

# Directions usable with Matrix.in_direction() and Matrix.move_in_direction().
E: Direction = (0, 1)
S: Direction = (1, 0)
W: Direction = (0, -1)
N: Direction = (-1, 0)
NE: Direction = (-1, 1)
SE: Direction = (1, 1)
NW: Direction = (-1, -1)
SW: Direction = (1, -1)
DIRECTIONS_4: tuple[Direction, ...] = (E, S, W, N)
DIRECTIONS_8: tuple[Direction, ...] = (NE, E, SE, S, SW, W, NW, N)

_EMPTY_ROW = "matrix rows cannot be empty"
_WRONG_INDEX = "index does not point to data inside the matrix"
_WRONG_LENGTH = "provided data does not correspond to the expected length"

_MISSING = object()


class MatrixFormatError(ValueError):
    """Raised when a matrix cannot be built or sliced from the given data."""


class Matrix(Generic[C]):
    """A matrix of arbitrary values stored row by row.

    Positions are ``(row, column)`` tuples. Iterating over a matrix yields its
    rows as lists, and ``len()`` gives the number of rows.
    """

    def __init__(self, rows: int, columns: int, value: C) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions cannot be negative")
        if rows != 0 and columns == 0:
            raise ValueError("unable to create a matrix with empty rows")
        self.rows = rows
        self.columns = columns
        self._data: list[C] = [value] * (rows * columns)

    @classmethod
    def _raw(cls, rows: int, columns: int, data: list[Any]) -> Matrix[Any]:
        matrix = cls.__new__(cls)
        matrix.rows = rows
        matrix.columns = columns
        matrix._data = data
        return matrix

    @classmethod
    def new_square(cls, size: int, value: C) -> Matrix[C]:
        """Create a square matrix filled with ``value``."""
        return cls(size, size, value)

    @classmethod
    def from_vec(cls, rows: int, columns: int, values: Iterable[C]) -> Matrix[C]:
        """Create a matrix from values given row by row."""
        data = list(values)
        if rows * columns != len(data):
            raise MatrixFormatError(_WRONG_LENGTH)
        if rows != 0 and columns == 0:
            raise MatrixFormatError(_EMPTY_ROW)
        return cls._raw(rows, columns, data)

    @classmethod
    def square_from_vec(cls, values: Iterable[C]) -> Matrix[C]:
        """Create a square matrix; the number of values must be a square."""
        data = list(values)
        size = uint_sqrt(len(data))
        if size is None:
            raise MatrixFormatError(_WRONG_LENGTH)
        return cls.from_vec(size, size, data)

    @classmethod
    def new_empty(cls, columns: int) -> Matrix[Any]:
        """Create a matrix with no rows, to be grown with :meth:`extend`."""
        return cls._raw(0, columns, [])

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[C]]) -> Matrix[C]:
        """Create a matrix from an iterable of rows of equal length."""
        iterator = iter(rows)
        first = next(iterator, _MISSING)
        if first is _MISSING:
            return cls.new_empty(0)
        data = list(first)
        number_of_columns = len(data)
        number_of_rows = 1
        for row in iterator:
            number_of_rows += 1
            data.extend(row)
            if number_of_rows * number_of_columns != len(data):
                raise MatrixFormatError(_WRONG_LENGTH)
        return cls.from_vec(number_of_rows, number_of_columns, data)

    def fill(self, value: C) -> None:
        """Set every cell to ``value``."""
        self._data = [value] * len(self._data)

    def slice(self, rows: range, columns: range) -> Matrix[C]:
        """Return a copy of the sub-matrix covering ``rows`` and ``columns``."""
        if (
            rows.stop > self.rows
            or columns.stop > self.columns
            or rows.start < 0
            or columns.start < 0
            or rows.start > rows.stop
            or columns.start > columns.stop
        ):
            raise MatrixFormatError(_WRONG_INDEX)
        data = [
            value
            for r in range(rows.start, rows.stop)
            for value in self._data[
                r * self.columns + columns.start : r * self.columns + columns.stop
            ]
        ]
        return type(self).from_vec(
            rows.stop - rows.start, columns.stop - columns.start, data
        )

    def _copy(self) -> Matrix[C]:
        return self._raw(self.rows, self.columns, list(self._data))

    def rotated_cw(self, times: int) -> Matrix[C]:
        """Return a copy rotated clockwise ``times`` quarter turns."""
        if self.is_square():
            copy = self._copy()
            copy.rotate_cw(times)
            return copy
        turns = times % 4
        if turns == 0:
            return self._copy()
        if turns == 1:
            copy = self.transposed()
            copy.flip_lr()
            return copy
        if turns == 2:
            copy = self._copy()
            copy._data.reverse()
            return copy
        copy = self.transposed()
        copy.flip_ud()
        return copy

    def rotated_ccw(self, times: int) -> Matrix[C]:
        """Return a copy rotated counter-clockwise ``times`` quarter turns."""
        return self.rotated_cw(4 - times % 4)

    def flipped_lr(self) -> Matrix[C]:
        """Return a copy flipped around the vertical axis."""
        copy = self._copy()
        copy.flip_lr()
        return copy

    def flipped_ud(self) -> Matrix[C]:
        """Return a copy flipped around the horizontal axis."""
        copy = self._copy()
        copy.flip_ud()
        return copy

    def transposed(self) -> Matrix[C]:
        """Return the transposed matrix."""
        if self.rows == 0 and self.columns != 0:
            raise ValueError("this operation would create a matrix with empty rows")
        data = [
            self._data[r * self.columns + c]
            for c in range(self.columns)
            for r in range(self.rows)
        ]
        return self._raw(self.columns, self.rows, data)

    def extend(self, row: Iterable[C]) -> None:
        """Append one full row."""
        values = list(row)
        if not values:
            raise MatrixFormatError(_EMPTY_ROW)
        if len(values) != self.columns:
            raise MatrixFormatError(_WRONG_LENGTH)
        self.rows += 1
        self._data.extend(values)

    def map(self, transform: Callable[[C], O]) -> Matrix[O]:
        """Return a matrix of the same shape with ``transform`` applied to each cell."""
        return self._raw(self.rows, self.columns, [transform(v) for v in self._data])

    def set_slice(self, pos: Position, slice: Matrix[C]) -> None:
        """Copy ``slice`` into this matrix at ``pos``, clipping what falls outside."""
        row, column = pos
        if not (0 <= row <= self.rows and 0 <= column <= self.columns):
            raise IndexError("slice position is outside the matrix")
        height = min(self.rows - row, slice.rows)
        width = min(self.columns - column, slice.columns)
        for r in range(height):
            start = (row + r) * self.columns + column
            self._data[start : start + width] = slice._data[
                r * slice.columns : r * slice.columns + width
            ]

    def __neg__(self) -> Matrix[C]:
        return self.map(lambda value: -value)

    def is_empty(self) -> bool:
        """Return ``True`` if the matrix has no rows."""
        return self.rows == 0

    def is_square(self) -> bool:
        """Return ``True`` if the matrix has as many rows as columns."""
        return self.rows == self.columns

    def idx(self, index: Position) -> int:
        """Return the offset of ``index`` in row-major order."""
        row, column = index
        if not 0 <= row < self.rows:
            raise IndexError(f"trying to access row {row} (max {self.rows - 1})")
        if not 0 <= column < self.columns:
            raise IndexError(
                f"trying to access column {column} (max {self.columns - 1})"
            )
        return row * self.columns + column

    def within_bounds(self, index: Position) -> bool:
        """Return ``True`` if ``index`` designates a cell."""
        row, column = index
        return 0 <= row < self.rows and 0 <= column < self.columns

    def get(self, index: Position) -> C | None:
        """Return the value at ``index``, or ``None`` outside the matrix."""
        if not self.within_bounds(index):
            return None
        return self._data[index[0] * self.columns + index[1]]

    def __getitem__(self, index: Position) -> C:
        return self._data[self.idx(index)]

    def __setitem__(self, index: Position, value: C) -> None:
        self._data[self.idx(index)] = value

    def __len__(self) -> int:
        return self.rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({list(self)!r})"

    def __iter__(self) -> Iterator[list[C]]:
        for r in range(self.rows):
            yield self._data[r * self.columns : (r + 1) * self.columns]

    def flip_lr(self) -> None:
        """Flip the matrix in place around the vertical axis."""
        self._data = [value for row in self for value in reversed(row)]

    def flip_ud(self) -> None:
        """Flip the matrix in place around the horizontal axis."""
        self._data = [value for row in reversed(list(self)) for value in row]

    def rotate_cw(self, times: int) -> None:
        """Rotate a square matrix clockwise ``times`` quarter turns in place."""
        if self.rows != self.columns:
            raise ValueError("attempt to rotate a non-square matrix")
        n = self.rows
        turns = times % 4
        old = self._data
        if turns == 0:
            return
        if turns == 2:
            old.reverse()
        elif turns == 1:
            self._data = [old[(n - 1 - c) * n + r] for r in range(n) for c in range(n)]
        else:
            self._data = [old[c * n + n - 1 - r] for r in range(n) for c in range(n)]

    def rotate_ccw(self, times: int) -> None:
        """Rotate a square matrix counter-clockwise ``times`` quarter turns in place."""
        self.rotate_cw(4 - times % 4)

    def neighbours(self, index: Position, diagonals: bool) -> Iterator[Position]:
        """Yield the neighbouring cells of ``index``, with or without diagonals."""
        return iter(list(cell_neighbours(index, (self.rows, self.columns), diagonals)))

    def move_in_direction(self, start: Position, direction: Direction) -> Position | None:
        """Return the cell one step from ``start`` along ``direction``, if any."""
        return _move_in_direction(start, direction, (self.rows, self.columns))

    def in_direction(self, start: Position, direction: Direction) -> Iterator[Position]:
        """Yield the cells along ``direction`` from ``start``, excluding it."""
        return _in_direction(start, direction, (self.rows, self.columns))

    def keys(self) -> Iterator[Position]:
        """Yield every position, first row first."""
        rows, columns = self.rows, self.columns
        return ((r, c) for r in range(rows) for c in range(columns))

    def values(self) -> Iterator[C]:
        """Yield every value, first row first."""
        return iter(self._data)

    def items(self) -> Iterator[tuple[Position, C]]:
        """Yield ``(position, value)`` pairs, first row first."""
        return zip(self.keys(), self.values())

    def bfs_reachable(
        self, start: Position, diagonals: bool, predicate: Callable[[Position], bool]
    ) -> set[Position]:
        """Return ``start`` and the cells reachable through cells satisfying
        ``predicate``, searching breadth first."""
        return _bfs_reachable(
            start, lambda n: self.neighbours(n, diagonals), predicate
        )

    def dfs_reachable(
        self, start: Position, diagonals: bool, predicate: Callable[[Position], bool]
    ) -> set[Position]:
        """Return ``start`` and the cells reachable through cells satisfying
        ``predicate``, searching depth first."""
        return _dfs_reachable(
            start, lambda n: self.neighbours(n, diagonals), predicate
        )
"""Small helpers for integer roots and stepping across two-dimensional boards."""

from __future__ import annotations

import math
from collections.abc import Iterator

Position = tuple[int, int]
Direction = tuple[int, int]


def uint_sqrt(n: int) -> int | None:
    """Return the square root of ``n`` if ``n`` is a perfect square, else ``None``.

    Raises ``ValueError`` for negative numbers.
    """
    if n < 0:
        raise ValueError("uint_sqrt() requires a non-negative integer")
    root = math.isqrt(n)
    return root if root * root == n else None


def move_in_direction(
    start: Position, direction: Direction, dimensions: tuple[int, int]
) -> Position | None:
    """Move ``start`` one step along ``direction`` within ``dimensions``.

    Return ``None`` if the start lies outside the board, if the direction is
    ``(0, 0)``, or if the target lies outside the board.
    """
    row, col = start
    rows, columns = dimensions
    if not (0 <= row < rows and 0 <= col < columns) or direction == (0, 0):
        return None
    new_row, new_col = row + direction[0], col + direction[1]
    if 0 <= new_row < rows and 0 <= new_col < columns:
        return new_row, new_col
    return None


def in_direction(
    start: Position, direction: Direction, dimensions: tuple[int, int]
) -> Iterator[Position]:
    """Yield successive positions along ``direction``, excluding ``start``."""
    current = move_in_direction(start, direction, dimensions)
    while current is not None:
        yield current
        current = move_in_direction(current, direction, dimensions)
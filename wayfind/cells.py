"""Neighbourhoods of board cells and reachability searches over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TypeVar

N = TypeVar("N", bound=Hashable)
Position = tuple[int, int]


def cell_neighbours(
    position: Position, dimensions: tuple[int, int], diagonals: bool
) -> Iterator[Position]:
    """Yield the ``(row, column)`` neighbours of a cell on a board of ``dimensions``.

    Nothing is yielded when ``position`` lies outside the board.
    """
    r, c = position
    rows, columns = dimensions
    if not (0 <= r < rows and 0 <= c < columns):
        return
    for rr in range(max(r - 1, 0), min(rows, r + 2)):
        for cc in range(max(c - 1, 0), min(columns, c + 2)):
            if (rr, cc) != (r, c) and (diagonals or rr == r or cc == c):
                yield rr, cc


def bfs_reachable(
    start: N,
    neighbours: Callable[[N], Iterable[N]],
    predicate: Callable[[N], bool],
) -> set[N]:
    """Return ``start`` and every node reachable through neighbours satisfying
    ``predicate``, searching breadth first."""
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for n in neighbours(node):
            if n not in seen and predicate(n):
                seen.add(n)
                queue.append(n)
    return seen


def dfs_reachable(
    start: N,
    neighbours: Callable[[N], Iterable[N]],
    predicate: Callable[[N], bool],
) -> set[N]:
    """Return ``start`` and every node reachable through neighbours satisfying
    ``predicate``, searching depth first."""
    seen: set[N] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        stack.extend(
            n for n in reversed(list(neighbours(node))) if n not in seen and predicate(n)
        )
    return seen
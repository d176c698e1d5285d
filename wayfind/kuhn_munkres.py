"""Maximum or minimum weight matchings in bipartite graphs (Hungarian algorithm)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from wayfind.matrix import Matrix


def _rows_of(weights: Matrix[Any] | Iterable[Iterable[Any]]) -> tuple[list[list[Any]], int]:
    matrix = weights if isinstance(weights, Matrix) else Matrix.from_rows(weights)
    return list(matrix), matrix.columns


def kuhn_munkres(weights: Matrix[Any] | Iterable[Iterable[Any]]) -> tuple[Any, list[int]]:
    """Compute a maximum weight matching between rows and columns.

    ``weights`` is a :class:`Matrix` or an iterable of equally long rows.
    Return the total weight and, for every row, the column assigned to it.
    Raises ``ValueError`` if there are more rows than columns.
    """
    rows, ny = _rows_of(weights)
    nx = len(rows)
    if nx > ny:
        raise ValueError("number of rows must not be larger than number of columns")
    xy: list[int | None] = [None] * nx
    yx: list[int | None] = [None] * ny
    lx = [max(row) for row in rows]
    ly = [0] * ny
    for root in range(nx):
        alternating: list[int | None] = [None] * ny
        s = {root}
        slack = [lx[root] + ly[y] - rows[root][y] for y in range(ny)]
        slackx = [root] * ny
        while True:
            delta: Any = float("inf")
            x = y = 0
            for yy in range(ny):
                if alternating[yy] is None and slack[yy] < delta:
                    delta = slack[yy]
                    x = slackx[yy]
                    y = yy
            if delta > 0:
                for sx in s:
                    lx[sx] -= delta
                for yy in range(ny):
                    if alternating[yy] is not None:
                        ly[yy] += delta
                    else:
                        slack[yy] -= delta
            alternating[y] = x
            matched = yx[y]
            if matched is None:
                break
            s.add(matched)
            for yy in range(ny):
                if alternating[yy] is None:
                    alternate = lx[matched] + ly[yy] - rows[matched][yy]
                    if slack[yy] > alternate:
                        slack[yy] = alternate
                        slackx[yy] = matched
        current: int | None = y
        while current is not None:
            x = alternating[current]
            previous = xy[x]
            yx[current] = x
            xy[x] = current
            current = previous
    total = sum(lx, 0) + sum(ly, 0)
    return total, [column for column in xy if column is not None]


def kuhn_munkres_min(
    weights: Matrix[Any] | Iterable[Iterable[Any]],
) -> tuple[Any, list[int]]:
    """Compute a minimum weight matching between rows and columns.

    Same arguments, result and errors as :func:`kuhn_munkres`.
    """
    rows, _ = _rows_of(weights)
    negated = [[-value for value in row] for row in rows]
    if not negated:
        total, assignments = kuhn_munkres(weights)
        return -total, assignments
    total, assignments = kuhn_munkres(negated)
    return -total, assignments
"""Rectangular grids whose vertices can be added or removed, with optional diagonal links."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from wayfind.cells import bfs_reachable as _bfs_reachable
from wayfind.cells import dfs_reachable as _dfs_reachable
from wayfind.matrix import Matrix

Vertex = tuple[int, int]


class Grid:
    """A ``width`` × ``height`` grid of ``(x, y)`` vertices, ``(0, 0)`` being top-left.

    Edges link adjacent vertices horizontally and vertically, and diagonally
    too when diagonal mode is enabled. Internally the grid stores either the
    present vertices or the absent ones, whichever is smaller.

    ``str(grid)`` draws present vertices as ``#`` and absent ones as ``.``.
    The format spec ``#`` selects block characters instead, and ``-`` draws
    the rows bottom to top.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions cannot be negative")
        self.width = width
        self.height = height
        self._diagonal_mode = False
        # When dense, the grid is full except for the vertices in _exclusions;
        # otherwise _exclusions holds the present vertices.
        self._dense = False
        self._exclusions: dict[Vertex, None] = {}

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> Grid:
        """Build the smallest grid holding the given ``(x, y)`` vertices."""
        grid = cls(0, 0)
        ordered: dict[Vertex, None] = dict.fromkeys(
            (int(x), int(y)) for x, y in vertices
        )
        for x, y in ordered:
            if x < 0 or y < 0:
                raise ValueError(f"vertex {(x, y)!r} has a negative coordinate")
        grid.width = max((x + 1 for x, _ in ordered), default=0)
        grid.height = max((y + 1 for _, y in ordered), default=0)
        grid._exclusions = ordered
        grid._rebalance()
        return grid

    @classmethod
    def from_coordinates(cls, points: Iterable[tuple[int, int]]) -> Grid:
        """Build a grid from arbitrary integer points, shifted so that the
        smallest coordinate on each axis becomes zero."""
        points = list(points)
        min_x = min((x for x, _ in points), default=0)
        min_y = min((y for _, y in points), default=0)
        return cls.from_vertices((x - min_x, y - min_y) for x, y in points)

    @classmethod
    def from_matrix(cls, matrix: Matrix[Any]) -> Grid:
        """Build a grid from a boolean matrix: a true cell at ``(row, column)``
        becomes the vertex ``(column, row)``."""
        grid = cls(matrix.columns, matrix.rows)
        for (r, c), value in matrix.items():
            if value:
                grid.add_vertex((c, r))
        return grid

    def is_inside(self, vertex: Vertex) -> bool:
        """Return ``True`` if ``vertex`` lies within the grid bounds."""
        x, y = vertex
        return 0 <= x < self.width and 0 <= y < self.height

    def enable_diagonal_mode(self) -> None:
        """Link adjacent vertices diagonally as well."""
        self._diagonal_mode = True

    def disable_diagonal_mode(self) -> None:
        """Link adjacent vertices only horizontally and vertically."""
        self._diagonal_mode = False

    def resize(self, width: int, height: int) -> bool:
        """Resize the grid; return ``True`` if any existing vertex was discarded."""
        if width < 0 or height < 0:
            raise ValueError("grid dimensions cannot be negative")
        truncated = False
        if width < self.width:
            truncated |= any(
                self.has_vertex((c, r))
                for c in range(width, self.width)
                for r in range(self.height)
            )
        if height < self.height:
            truncated |= any(
                self.has_vertex((c, r))
                for c in range(self.width)
                for r in range(height, self.height)
            )
        self._exclusions = {
            (x, y): None for (x, y) in self._exclusions if x < width and y < height
        }
        if self._dense:
            for c in range(self.width, width):
                for r in range(height):
                    self._exclusions[(c, r)] = None
            for c in range(min(self.width, width)):
                for r in range(self.height, height):
                    self._exclusions[(c, r)] = None
        self.width = width
        self.height = height
        self._rebalance()
        return truncated

    def size(self) -> int:
        """Return the number of positions in the grid."""
        return self.width * self.height

    def vertices_len(self) -> int:
        """Return the number of present vertices."""
        if self._dense:
            return self.size() - len(self._exclusions)
        return len(self._exclusions)

    def _insert(self, vertex: Vertex) -> bool:
        if vertex in self._exclusions:
            return False
        self._exclusions[vertex] = None
        return True

    def _discard(self, vertex: Vertex) -> bool:
        return self._exclusions.pop(vertex, False) is None

    def add_vertex(self, vertex: Vertex) -> bool:
        """Add a vertex; return ``True`` if it was absent and inside the grid."""
        if not self.is_inside(vertex):
            return False
        vertex = tuple(vertex)
        added = self._discard(vertex) if self._dense else self._insert(vertex)
        self._rebalance()
        return added

    def remove_vertex(self, vertex: Vertex) -> bool:
        """Remove a vertex; return ``True`` if it was present."""
        if not self.is_inside(vertex):
            return False
        vertex = tuple(vertex)
        removed = self._insert(vertex) if self._dense else self._discard(vertex)
        self._rebalance()
        return removed

    def _borders(self) -> Iterator[Vertex]:
        width, height = self.width, self.height
        for x in range(width):
            yield x, 0
            yield x, height - 1
        for y in range(1, height - 1):
            yield 0, y
            yield width - 1, y

    def add_borders(self) -> int:
        """Add every border vertex; return how many were added."""
        if self.width == 0 or self.height == 0:
            return 0
        change = self._discard if self._dense else self._insert
        count = sum(1 for v in self._borders() if change(v))
        self._rebalance()
        return count

    def remove_borders(self) -> int:
        """Remove every border vertex; return how many were removed."""
        if self.width == 0 or self.height == 0:
            return 0
        change = self._insert if self._dense else self._discard
        count = sum(1 for v in self._borders() if change(v))
        self._rebalance()
        return count

    def _rebalance(self) -> None:
        if len(self._exclusions) > self.width * self.height // 2:
            self._exclusions = {
                (c, r): None
                for c in range(self.width)
                for r in range(self.height)
                if (c, r) not in self._exclusions
            }
            self._dense = not self._dense

    def clear(self) -> bool:
        """Remove every vertex; return ``True`` if the grid held any."""
        had_vertices = not self.is_empty()
        self._dense = False
        self._exclusions = {}
        return had_vertices

    def fill(self) -> bool:
        """Add every possible vertex; return ``True`` if any was added."""
        was_missing = not self.is_full()
        self.clear()
        self.invert()
        return was_missing

    def is_empty(self) -> bool:
        """Return ``True`` if the grid holds no vertex."""
        if self._dense:
            return len(self._exclusions) == self.size()
        return not self._exclusions

    def is_full(self) -> bool:
        """Return ``True`` if every position holds a vertex."""
        if self._dense:
            return not self._exclusions
        return len(self._exclusions) == self.size()

    def invert(self) -> None:
        """Swap present and absent vertices."""
        self._dense = not self._dense

    def has_vertex(self, vertex: Vertex) -> bool:
        """Return ``True`` if ``vertex`` is present."""
        return self.is_inside(vertex) and ((tuple(vertex) in self._exclusions) != self._dense)

    def __contains__(self, vertex: object) -> bool:
        return self.has_vertex(vertex)  # type: ignore[arg-type]

    def has_edge(self, v1: Vertex, v2: Vertex) -> bool:
        """Return ``True`` if both vertices are present and adjacent."""
        if not self.has_vertex(v1) or not self.has_vertex(v2):
            return False
        dx = abs(v1[0] - v2[0])
        dy = abs(v1[1] - v2[1])
        return dx + dy == 1 or (dx == 1 and dy == 1 and self._diagonal_mode)

    def edges(self) -> Iterator[tuple[Vertex, Vertex]]:
        """Yield every edge once, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                others = [(x + 1, y), (x, y + 1), (x + 1, y + 1)]
                if x > 0:
                    others.append((x - 1, y + 1))
                for other in others:
                    if self.has_edge((x, y), other):
                        yield (x, y), other

    def neighbours(self, vertex: Vertex) -> list[Vertex]:
        """Return the present vertices linked to ``vertex``; empty if it is absent."""
        if not self.has_vertex(vertex):
            return []
        x, y = vertex
        diagonal = self._diagonal_mode
        candidates: list[Vertex] = []
        for nx in (x - 1, x + 1):
            if 0 <= nx < self.width:
                candidates.append((nx, y))
                if diagonal:
                    if y > 0:
                        candidates.append((nx, y - 1))
                    if y + 1 < self.height:
                        candidates.append((nx, y + 1))
        if y > 0:
            candidates.append((x, y - 1))
        if y + 1 < self.height:
            candidates.append((x, y + 1))
        return [v for v in candidates if self.has_vertex(v)]

    def bfs_reachable(
        self, start: Vertex, predicate: Callable[[Vertex], bool]
    ) -> set[Vertex]:
        """Return ``start`` and the vertices reachable through vertices
        satisfying ``predicate``, searching breadth first."""
        return _bfs_reachable(tuple(start), self.neighbours, predicate)

    def dfs_reachable(
        self, start: Vertex, predicate: Callable[[Vertex], bool]
    ) -> set[Vertex]:
        """Return ``start`` and the vertices reachable through vertices
        satisfying ``predicate``, searching depth first."""
        return _dfs_reachable(tuple(start), self.neighbours, predicate)

    def distance(self, a: Vertex, b: Vertex) -> int:
        """Chebyshev distance in diagonal mode, Manhattan distance otherwise."""
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        return max(dx, dy) if self._diagonal_mode else dx + dy

    def __iter__(self) -> Iterator[Vertex]:
        if self._dense:
            return (
                (x, y)
                for y in range(self.height)
                for x in range(self.width)
                if self.has_vertex((x, y))
            )
        return iter(list(self._exclusions))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.vertices_len() == other.vertices_len() and set(self) == set(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid.from_vertices({list(self)!r})"

    def _render(self, alternate: bool, reverse: bool) -> str:
        present, absent = ("▓", "░") if alternate else ("#", ".")
        rows = range(self.height - 1, -1, -1) if reverse else range(self.height)
        return "\n".join(
            "".join(
                present if self.has_vertex((x, y)) else absent
                for x in range(self.width)
            )
            for y in rows
        )

    def __str__(self) -> str:
        return self._render(False, False)

    def __format__(self, spec: str) -> str:
        unknown = set(spec) - {"#", "-"}
        if unknown:
            raise ValueError(f"invalid format specifier {spec!r} for Grid")
        return self._render("#" in spec, "-" in spec)
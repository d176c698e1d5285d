# wayfind

Graph, grid and matrix algorithms in pure Python, with no dependencies
beyond the standard library.

## Modules

- `wayfind.matrix`
  - `Matrix`: a rectangular matrix indexed by `(row, column)` and stored
    row by row. Build one with `Matrix(rows, columns, value)`,
    `Matrix.new_square`, `Matrix.from_vec`, `Matrix.square_from_vec`,
    `Matrix.new_empty` or `Matrix.from_rows`, and grow it with `extend`.
    It offers `rotate_cw`/`rotate_ccw`, `flip_lr`/`flip_ud` (in place) and
    their copying forms `rotated_cw`, `rotated_ccw`, `flipped_lr`,
    `flipped_ud`, plus `transposed`, `slice`, `set_slice`, `map`, `fill`,
    unary minus, `get`, `idx`, `within_bounds`, `keys`, `values`, `items`,
    `neighbours`, `move_in_direction`, `in_direction`, `bfs_reachable` and
    `dfs_reachable`. Iterating yields the rows as lists and `len()` gives
    the number of rows.
  - `MatrixFormatError` (a `ValueError`): raised when the data has the wrong
    length, a row is empty, or a slice lies outside the matrix.
  - Direction constants `N`, `S`, `E`, `W`, `NE`, `NW`, `SE`, `SW`,
    `DIRECTIONS_4` and `DIRECTIONS_8`, as `(row, column)` steps.
- `wayfind.grid`
  - `Grid`: a `width` × `height` grid of `(x, y)` vertices, `(0, 0)` at the
    top left, where vertices can be added or removed. Edges link adjacent
    vertices horizontally and vertically, and diagonally too after
    `enable_diagonal_mode()`. Build one with `Grid(width, height)`,
    `Grid.from_vertices`, `Grid.from_coordinates` (shifts arbitrary integer
    points so the smallest coordinates become zero) or `Grid.from_matrix`
    (from a boolean `Matrix`). `str(grid)` draws present vertices as `#` and
    absent ones as `.`; `format(grid, "#")` uses `▓` and `░`, and a `-` in
    the format spec draws the rows bottom to top.
- `wayfind.cells`: `cell_neighbours`, plus `bfs_reachable` and
  `dfs_reachable` for any node type given a neighbour function and a
  predicate.
- `wayfind.kruskal`: `kruskal` and `kruskal_indices` yield the edges of a
  minimum spanning tree (or forest).
- `wayfind.connected_components`: `separate_components`, `components`,
  `connected_components` and `component_index`.
- `wayfind.topological_sort`: `topological_sort` raises `CycleError` (with
  `.node`) when a cycle is found; `topological_sort_into_groups` raises
  `GroupingError` (with `.groups` and `.remaining`).
- `wayfind.kuhn_munkres`: `kuhn_munkres` and `kuhn_munkres_min` compute
  maximum and minimum weight assignments from a `Matrix` or a list of rows;
  more rows than columns raises `ValueError`.
- `wayfind.yen`: `yen` returns up to `k` shortest paths as `(path, cost)`
  pairs.
- `wayfind.utils`: `uint_sqrt`, `move_in_direction` and `in_direction`.

## Examples

```python
from wayfind.matrix import Matrix
from wayfind.kuhn_munkres import kuhn_munkres

weights = Matrix.from_rows([
    [100, 110, 90],
    [95, 130, 75],
    [95, 140, 65],
])
total, assignments = kuhn_munkres(weights)
assert total == 325
assert assignments == [2, 0, 1]
```

```python
from wayfind.grid import Grid

g = Grid(3, 4)
g.add_borders()
print(g)
# ###
# #.#
# #.#
# ###
```

```python
from wayfind.yen import yen

graph = {
    "c": [("d", 3), ("e", 2)],
    "d": [("f", 4)],
    "e": [("d", 1), ("f", 2), ("g", 3)],
    "f": [("g", 2), ("h", 1)],
    "g": [("h", 2)],
    "h": [],
}
paths = yen("c", lambda n: graph[n], lambda n: n == "h", 3)
assert paths[0] == (["c", "e", "f", "h"], 5)
```

## What it does not do

The package has no general single-path search functions (such as A*,
Dijkstra or breadth-first search returning a path), no maximum-flow
solver, and no command-line tool. Reachability on matrices and grids is
available only as the sets returned by `bfs_reachable` and
`dfs_reachable`.

## Tests

```
pip install -e ".[test]"
pytest
```
import pytest

from wayfind.cells import bfs_reachable, cell_neighbours, dfs_reachable

LAYOUT = [
    "aa#bb",
    "a##b.",
    "aa#bb",
]
DIMS = (len(LAYOUT), len(LAYOUT[0]))


def _free(pos):
    r, c = pos
    return LAYOUT[r][c] != "#"


def _cells_marked(*marks):
    return {
        (r, c)
        for r, line in enumerate(LAYOUT)
        for c, ch in enumerate(line)
        if ch in marks
    }


def _orthogonal(pos):
    return cell_neighbours(pos, DIMS, False)


def test_corner_neighbours():
    assert set(cell_neighbours((0, 0), (3, 3), False)) == {(0, 1), (1, 0)}


def test_outside_has_no_neighbours():
    assert list(cell_neighbours((3, 0), (3, 3), True)) == []
    assert list(cell_neighbours((0, 3), (3, 3), False)) == []


@pytest.mark.parametrize("position", [(r, c) for r in range(4) for c in range(5)])
def test_neighbours_properties(position):
    dims = (4, 5)
    straight = set(cell_neighbours(position, dims, False))
    diagonal = set(cell_neighbours(position, dims, True))
    assert straight <= diagonal
    assert position not in diagonal
    for r, c in diagonal:
        assert 0 <= r < dims[0] and 0 <= c < dims[1]
        assert max(abs(r - position[0]), abs(c - position[1])) == 1
    for r, c in straight:
        assert abs(r - position[0]) + abs(c - position[1]) == 1


def test_neighbourhood_is_symmetric():
    dims = (3, 4)
    cells = [(r, c) for r in range(dims[0]) for c in range(dims[1])]
    for a in cells:
        for b in cell_neighbours(a, dims, True):
            assert a in set(cell_neighbours(b, dims, True))


def test_bfs_flood_fill():
    assert bfs_reachable((0, 0), _orthogonal, _free) == _cells_marked("a")
    assert bfs_reachable((0, 4), _orthogonal, _free) == _cells_marked("b", ".")


def test_dfs_matches_bfs():
    for start in [(0, 0), (2, 3), (1, 4)]:
        assert dfs_reachable(start, _orthogonal, _free) == bfs_reachable(
            start, _orthogonal, _free
        )


def test_start_is_always_included():
    assert bfs_reachable((1, 1), _orthogonal, lambda _: False) == {(1, 1)}
    assert dfs_reachable((1, 1), _orthogonal, lambda _: False) == {(1, 1)}


def test_reachable_on_abstract_graph():
    graph = {1: [2, 3], 2: [4], 3: [], 4: [1], 5: [1]}
    assert bfs_reachable(1, graph.__getitem__, lambda n: n != 3) == {1, 2, 4}
    assert dfs_reachable(5, graph.__getitem__, lambda n: True) == set(graph)
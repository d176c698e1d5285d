import pytest

from wayfind.grid import Grid
from wayfind.matrix import Matrix


def test_add_borders_render():
    g = Grid(3, 4)
    count = g.add_borders()
    assert str(g) == "###\n#.#\n#.#\n###"
    assert f"{g:#}" == "▓▓▓\n▓░▓\n▓░▓\n▓▓▓"
    assert count == g.vertices_len()


def test_from_vertices_render():
    g = Grid.from_vertices([(0, 0), (2, 2), (3, 2)])
    assert str(g) == "#...\n....\n..##"
    assert g.width == 4
    assert g.height == 3


def test_from_coordinates_render():
    g = Grid.from_coordinates([(-16, -15), (-16, -16), (-15, -16)])
    assert f"{g:#}" == "▓▓\n▓░"
    assert f"{g:-#}" == "▓░\n▓▓"


def test_invalid_format_spec():
    with pytest.raises(ValueError):
        format(Grid(2, 2), "x")


def test_add_remove_round_trip():
    g = Grid(5, 5)
    assert g.add_vertex((1, 2))
    assert not g.add_vertex((1, 2))
    assert (1, 2) in g
    assert g.remove_vertex((1, 2))
    assert not g.remove_vertex((1, 2))
    assert g.is_empty()


def test_outside_vertices_ignored():
    g = Grid(2, 2)
    assert not g.add_vertex((2, 0))
    assert not g.add_vertex((-1, 0))
    assert not g.has_vertex((5, 5))
    assert g.is_empty()


def test_dense_and_sparse_consistency():
    g = Grid(4, 4)
    added = [(x, y) for x in range(4) for y in range(4) if (x + 2 * y) % 3 != 0]
    for v in added:
        g.add_vertex(v)
    assert set(g) == set(added)
    assert g.vertices_len() == len(added)
    for v in added[:5]:
        g.remove_vertex(v)
    assert set(g) == set(added[5:])
    assert g.vertices_len() == len(added) - 5


def test_invert_twice_is_identity():
    g = Grid.from_vertices([(0, 0), (1, 1), (2, 0)])
    before = set(g)
    g.invert()
    inverted = set(g)
    assert inverted.isdisjoint(before)
    assert len(inverted) + len(before) == g.size()
    g.invert()
    assert set(g) == before


def test_clear_and_fill():
    g = Grid(3, 3)
    assert g.fill()
    assert g.is_full()
    assert not g.fill()
    assert g.clear()
    assert g.is_empty()
    assert not g.clear()


def test_resize_truncation():
    g = Grid(3, 3)
    g.add_vertex((2, 2))
    assert not g.resize(4, 4)
    assert g.has_vertex((2, 2))
    assert g.resize(2, 2)
    assert g.is_empty()


def test_resize_dense_grid_leaves_new_cells_absent():
    g = Grid(2, 2)
    g.fill()
    g.resize(3, 3)
    assert set(g) == {(0, 0), (1, 0), (0, 1), (1, 1)}
    assert not g.has_vertex((2, 2))


def test_remove_borders():
    g = Grid(4, 4)
    g.fill()
    removed = g.remove_borders()
    assert set(g) == {(1, 1), (2, 1), (1, 2), (2, 2)}
    assert removed + g.vertices_len() == g.size()


def test_neighbours_match_distance():
    g = Grid(3, 3)
    g.fill()
    everything = set(g)
    assert set(g.neighbours((1, 1))) == {v for v in everything if g.distance(v, (1, 1)) == 1}
    g.enable_diagonal_mode()
    assert set(g.neighbours((1, 1))) == {v for v in everything if g.distance(v, (1, 1)) == 1}
    assert len(g.neighbours((1, 1))) == 8


def test_neighbours_of_absent_vertex():
    g = Grid(3, 3)
    g.add_vertex((0, 0))
    assert g.neighbours((1, 1)) == []
    assert g.neighbours((0, 0)) == []


def test_distance():
    g = Grid(10, 10)
    assert g.distance((0, 0), (3, 4)) == 7
    g.enable_diagonal_mode()
    assert g.distance((0, 0), (3, 4)) == 4
    g.disable_diagonal_mode()
    assert g.distance((3, 4), (0, 0)) == 7


def test_edges_consistent_with_neighbours():
    for diagonal in (False, True):
        g = Grid(4, 3)
        g.fill()
        g.remove_vertex((1, 1))
        if diagonal:
            g.enable_diagonal_mode()
        edges = list(g.edges())
        assert all(g.has_edge(a, b) for a, b in edges)
        assert len(set(edges)) == len(edges)
        assert 2 * len(edges) == sum(len(g.neighbours(v)) for v in g)


def test_has_edge():
    g = Grid(3, 3)
    g.fill()
    assert g.has_edge((0, 0), (1, 0))
    assert not g.has_edge((0, 0), (1, 1))
    g.enable_diagonal_mode()
    assert g.has_edge((0, 0), (1, 1))
    g.remove_vertex((1, 1))
    assert not g.has_edge((0, 0), (1, 1))


def test_reachable_flood_fill():
    g = Grid(5, 5)
    g.add_borders()
    g.invert()
    interior = set(g)
    assert g.bfs_reachable((2, 2), lambda _: True) == interior
    assert g.dfs_reachable((2, 2), lambda _: True) == interior
    assert g.bfs_reachable((2, 2), lambda v: v[0] == 2) == {
        v for v in interior if v[0] == 2
    }


def test_from_matrix():
    m = Matrix.from_rows([[True, True, False], [False, False, True]])
    g = Grid.from_matrix(m)
    assert g.width == 3
    assert g.height == 2
    assert set(g) == {(0, 0), (1, 0), (2, 1)}


def test_equality_ignores_insertion_order():
    a = Grid.from_vertices([(0, 0), (1, 1), (2, 2)])
    b = Grid.from_vertices([(2, 2), (0, 0), (1, 1)])
    assert a == b
    b.remove_vertex((1, 1))
    assert not (a == b)


def test_iteration_of_dense_grid_is_row_major():
    g = Grid(2, 2)
    g.fill()
    assert list(g) == [(0, 0), (1, 0), (0, 1), (1, 1)]
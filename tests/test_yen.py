import pytest

from wayfind.yen import yen

WIKI = {
    "c": [("d", 3), ("e", 2)],
    "d": [("f", 4)],
    "e": [("d", 1), ("f", 2), ("g", 3)],
    "f": [("g", 2), ("h", 1)],
    "g": [("h", 2)],
    "h": [],
}


def wiki_successors(node):
    return WIKI[node]


def edge_sum(graph, path):
    weights = {(a, b): w for a, edges in graph.items() for b, w in edges}
    return sum(weights[(a, b)] for a, b in zip(path, path[1:]))


def test_documented_example():
    paths = yen("c", wiki_successors, lambda n: n == "h", 3)
    assert len(paths) == 3
    assert paths[0] == (["c", "e", "f", "h"], 5)
    assert paths[1] == (["c", "e", "g", "h"], 7)
    assert paths[2] == (["c", "d", "f", "h"], 8)


def test_no_path_returns_empty():
    graph = {"c": [("d", 3)], "d": []}
    assert yen("c", lambda n: graph[n], lambda n: n == "h", 2) == []


def test_k_one_gives_shortest_only():
    paths = yen("c", wiki_successors, lambda n: n == "h", 1)
    assert paths == [(["c", "e", "f", "h"], 5)]


def test_start_is_goal():
    paths = yen("c", wiki_successors, lambda n: n == "c", 4)
    assert paths == [(["c"], 0)]


def test_invalid_k():
    with pytest.raises(ValueError):
        yen("c", wiki_successors, lambda n: n == "h", 0)


def test_fewer_paths_than_requested():
    graph = {"a": [("b", 1), ("c", 1)], "b": [("d", 1)], "c": [("d", 2)], "d": []}
    paths = yen("a", lambda n: graph[n], lambda n: n == "d", 10)
    assert [p for p, _ in paths] == [["a", "b", "d"], ["a", "c", "d"]]
    for path, cost in paths:
        assert cost == edge_sum(graph, path)


def test_many_paths_invariants():
    paths = yen("c", wiki_successors, lambda n: n == "h", 20)
    costs = [cost for _, cost in paths]
    assert costs == sorted(costs)
    assert len({tuple(p) for p, _ in paths}) == len(paths)
    for path, cost in paths:
        assert path[0] == "c"
        assert path[-1] == "h"
        assert len(set(path)) == len(path)
        assert cost == edge_sum(WIKI, path)


def test_more_paths_extend_fewer():
    three = yen("c", wiki_successors, lambda n: n == "h", 3)
    many = yen("c", wiki_successors, lambda n: n == "h", 20)
    assert many[:3] == three
    assert len(many) > len(three)
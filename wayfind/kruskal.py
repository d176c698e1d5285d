"""Minimum spanning trees of undirected graphs with Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any, TypeVar

N = TypeVar("N", bound=Hashable)


def _find(parents: list[int], node: int) -> int:
    """Return the root of ``node``, halving the path in ``parents``."""
    while parents[node] != node:
        parents[node] = parents[parents[node]]
        node = parents[node]
    return node


def _union(parents: list[int], ranks: list[int], a: int, b: int) -> None:
    if ranks[a] < ranks[b]:
        a, b = b, a
    parents[b] = a
    if ranks[a] == ranks[b]:
        ranks[a] += 1


def kruskal_indices(
    number_of_nodes: int, edges: Iterable[tuple[int, int, Any]]
) -> Iterator[tuple[int, int, Any]]:
    """Yield the edges of a minimum spanning tree over nodes ``0..number_of_nodes-1``.

    Edges are ``(a, b, weight)`` triples; a node outside the range raises
    ``IndexError`` when reached.
    """
    ordered = sorted(edges, key=lambda edge: edge[2])
    return _spanning_edges(number_of_nodes, ordered)


def _spanning_edges(
    number_of_nodes: int, ordered: list[tuple[int, int, Any]]
) -> Iterator[tuple[int, int, Any]]:
    parents = list(range(number_of_nodes))
    ranks = [1] * number_of_nodes
    for a, b, weight in ordered:
        if a < 0 or b < 0:
            raise IndexError("node index out of range")
        ra = _find(parents, a)
        rb = _find(parents, b)
        if ra != rb:
            _union(parents, ranks, ra, rb)
            yield a, b, weight


def kruskal(edges: Iterable[tuple[N, N, Any]]) -> Iterator[tuple[N, N, Any]]:
    """Yield the edges of a minimum spanning tree (or forest) of weighted edges."""
    nodes: dict[N, int] = {}
    indexed = [
        (nodes.setdefault(a, len(nodes)), nodes.setdefault(b, len(nodes)), weight)
        for a, b, weight in edges
    ]
    by_index = list(nodes)
    return (
        (by_index[ia], by_index[ib], weight)
        for ia, ib, weight in kruskal_indices(len(by_index), indexed)
    )
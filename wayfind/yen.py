"""The k shortest loopless paths in a weighted directed graph (Yen's algorithm)."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Hashable, Iterable
from itertools import count
from typing import Any, TypeVar

N = TypeVar("N", bound=Hashable)

Successors = Callable[[N], Iterable[tuple[N, Any]]]


def _dijkstra(
    start: N, successors: Successors, success: Callable[[N], bool]
) -> tuple[list[N], Any] | None:
    """Return the cheapest path from ``start`` to a node accepted by ``success``."""
    tie = count()
    best: dict[N, tuple[Any, N | None]] = {start: (0, None)}
    done: set[N] = set()
    heap: list[tuple[Any, int, N]] = [(0, next(tie), start)]
    while heap:
        cost, _, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        if success(node):
            path = [node]
            parent = best[node][1]
            while parent is not None or (path[-1] != start):
                if parent is None:
                    break
                path.append(parent)
                parent = best[parent][1]
            path.reverse()
            return path, cost
        for successor, move_cost in successors(node):
            if successor in done:
                continue
            new_cost = cost + move_cost
            known = best.get(successor)
            if known is None or new_cost < known[0]:
                best[successor] = (new_cost, node)
                heapq.heappush(heap, (new_cost, next(tie), successor))
    return None


def _path_cost(nodes: list[N], successors: Successors) -> Any:
    """Add up the cost of every edge taken along ``nodes``."""
    cost: Any = 0
    for here, there in zip(nodes, nodes[1:]):
        for successor, move_cost in successors(here):
            if successor == there:
                cost = cost + move_cost
    return cost


def yen(
    start: N,
    successors: Successors,
    success: Callable[[N], bool],
    k: int,
) -> list[tuple[list[N], Any]]:
    """Return up to ``k`` shortest paths from ``start`` to a node accepted by ``success``.

    ``successors`` gives ``(node, cost)`` pairs with positive costs. Each result
    is a ``(path, cost)`` pair, the path including both ends, ordered by cost.
    Fewer than ``k`` paths are returned when fewer exist. Raises ``ValueError``
    if ``k`` is smaller than one.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    found = _dijkstra(start, successors, success)
    if found is None:
        return []

    routes: list[tuple[list[N], Any]] = [found]
    visited: set[tuple[N, ...]] = set()
    tie = count()
    candidates: list[tuple[Any, int, int, list[N]]] = []

    for ki in range(k - 1):
        if len(routes) <= ki or len(routes) == k:
            break
        previous = routes[ki][0]
        for i in range(len(previous) - 1):
            spur_node = previous[i]
            root_path = previous[:i]
            filtered_edges = {
                (nodes[i], nodes[i + 1])
                for nodes, _ in routes
                if len(nodes) > i + 1 and nodes[:i] == root_path
            }
            filtered_nodes = set(root_path)

            def filtered_successors(
                node: N,
                _edges: set[tuple[N, N]] = filtered_edges,
                _nodes: set[N] = filtered_nodes,
            ) -> list[tuple[N, Any]]:
                return [
                    (other, move_cost)
                    for other, move_cost in successors(node)
                    if other not in _nodes and (node, other) not in _edges
                ]

            spur = _dijkstra(spur_node, filtered_successors, success)
            if spur is None:
                continue
            nodes = root_path + spur[0]
            key = tuple(nodes)
            if key in visited:
                continue
            visited.add(key)
            cost = _path_cost(nodes, successors)
            heapq.heappush(candidates, (cost, len(nodes), next(tie), nodes))

        if candidates:
            cost, _, _, nodes = heapq.heappop(candidates)
            routes.append((nodes, cost))
            # Candidates with the same cost cannot be beaten later on.
            while len(routes) < k and candidates and candidates[0][0] == cost:
                _, _, _, nodes = heapq.heappop(candidates)
                routes.append((nodes, cost))

    return routes
"""Topological ordering of directed graphs, as a single order or by groups."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Generic, TypeVar

N = TypeVar("N", bound=Hashable)

_DONE = object()


class CycleError(ValueError, Generic[N]):
    """Raised when a graph cannot be sorted because it contains a cycle.

    ``node`` is one node taking part in a cycle.
    """

    def __init__(self, node: N) -> None:
        super().__init__(f"cycle detected involving node {node!r}")
        self.node = node


class GroupingError(ValueError, Generic[N]):
    """Raised when a graph cannot be fully split into groups because of cycles.

    ``groups`` holds the groups found so far and ``remaining`` the nodes that
    could not be placed in any group.
    """

    def __init__(self, groups: list[list[N]], remaining: list[N]) -> None:
        super().__init__(f"{len(remaining)} node(s) could not be grouped due to cycles")
        self.groups = groups
        self.remaining = remaining


def topological_sort(
    roots: Iterable[N], successors: Callable[[N], Iterable[N]]
) -> list[N]:
    """Return a topological order of ``roots`` and every node reachable from them.

    Raises :class:`CycleError` carrying a node of a cycle if one is found.
    """
    unmarked: dict[N, None] = dict.fromkeys(roots)
    marked: set[N] = set()
    ordered: deque[N] = deque()
    while unmarked:
        root = next(iter(unmarked))
        _visit(root, successors, unmarked, marked, ordered)
    return list(ordered)


def _visit(
    root: N,
    successors: Callable[[N], Iterable[N]],
    unmarked: dict[N, None],
    marked: set[N],
    ordered: deque[N],
) -> None:
    temp: set[N] = set()
    stack: list[tuple[N, Iterator[N]]] = []

    def enter(node: N) -> None:
        unmarked.pop(node, None)
        if node in marked:
            return
        if node in temp:
            raise CycleError(node)
        temp.add(node)
        stack.append((node, iter(successors(node))))

    enter(root)
    while stack:
        node, pending = stack[-1]
        successor = next(pending, _DONE)
        if successor is _DONE:
            stack.pop()
            marked.add(node)
            ordered.appendleft(node)
        else:
            enter(successor)


def topological_sort_into_groups(
    nodes: Iterable[N], successors: Callable[[N], Iterable[N]]
) -> list[list[N]]:
    """Partition ``nodes`` into groups of mutually independent nodes.

    The first group holds nodes without predecessors, the next one nodes whose
    predecessors are all in the first group, and so on. ``nodes`` must be
    exhaustive: a successor outside it raises ``ValueError``. If cycles prevent
    a full grouping, :class:`GroupingError` is raised with the partial groups
    and the remaining nodes.
    """
    succs_map: dict[N, set[N]] = {}
    preds_map: dict[N, int] = {}
    for node in nodes:
        succs_map[node] = set(successors(node))
        preds_map[node] = 0
    if not succs_map:
        return []
    for succs in succs_map.values():
        for succ in succs:
            if succ not in preds_map:
                raise ValueError(f"successor {succ!r} is not among the given nodes")
            preds_map[succ] += 1

    prev_group = [node for node, count in preds_map.items() if count == 0]
    if not prev_group:
        raise GroupingError([], list(preds_map))
    for node in prev_group:
        del preds_map[node]

    groups: list[list[N]] = []
    while preds_map:
        next_group: list[N] = []
        for node in prev_group:
            for succ in succs_map[node]:
                preds_map[succ] -= 1
                if preds_map[succ] == 0:
                    del preds_map[succ]
                    next_group.append(succ)
        groups.append(prev_group)
        prev_group = next_group
        if not prev_group:
            raise GroupingError(groups, list(preds_map))
    groups.append(prev_group)
    return groups
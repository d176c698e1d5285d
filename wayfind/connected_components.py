"""Separate the components of an undirected graph into disjoint sets."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

N = TypeVar("N", bound=Hashable)


def _get_and_redirect(table: list[int | None], idx: int) -> int:
    """Follow ``table`` to its root, halving the path along the way."""
    while idx != table[idx]:
        table[idx] = table[table[idx]]
        idx = table[idx]
    return idx


def separate_components(
    groups: Sequence[Iterable[N]],
) -> tuple[dict[N, int], list[int | None]]:
    """Assign a set identifier to every vertex and to every group.

    ``groups`` holds groups of vertices connected together. The result is a
    mapping from every vertex to its set identifier, and a list giving the
    identifier of each group; empty groups get ``None``. Identifiers are opaque,
    not necessarily compact, and never larger than the number of groups.
    """
    groups = [list(group) for group in groups]
    table: list[int | None] = list(range(len(groups)))
    indices: dict[N, int] = {}
    for group_index, group in enumerate(groups):
        if not group:
            table[group_index] = None
        for element in group:
            if element in indices:
                table[group_index] = _get_and_redirect(table, indices[element])
                group_index = table[group_index]
            else:
                indices[element] = group_index
    for element, group_index in indices.items():
        indices[element] = _get_and_redirect(table, group_index)
    for group_index, target in enumerate(table):
        if target is not None:
            # Path halving may have left this entry one step behind.
            table[group_index] = _get_and_redirect(table, group_index)
    return indices, table


def components(groups: Sequence[Iterable[N]]) -> list[set[N]]:
    """Return the disjoint sets of vertices connected through ``groups``."""
    groups = [list(group) for group in groups]
    _, group_ids = separate_components(groups)
    ordered = sorted(
        ((index, ident) for index, ident in enumerate(group_ids) if ident is not None),
        key=lambda pair: pair[1],
    )
    result: list[set[N]] = []
    key = None
    for group_index, ident in ordered:
        if ident != key:
            result.append(set())
            key = ident
        result[-1].update(groups[group_index])
    return result


def connected_components(
    starts: Iterable[N], neighbours: Callable[[N], Iterable[N]]
) -> list[set[N]]:
    """Extract the connected components reachable from ``starts``."""
    return components([[*neighbours(start), start] for start in starts])


def component_index(components: Sequence[Iterable[N]]) -> dict[N, int]:
    """Map every vertex to the index of the set containing it."""
    return {node: i for i, component in enumerate(components) for node in component}
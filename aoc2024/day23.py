"""LAN Party: triangles and cliques in a network of computers."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping, Set

Graph = dict[str, set[str]]


def build_graph(text: str) -> Graph:
    """Build an undirected graph from lines such as "kh-tc"."""
    graph: defaultdict[str, set[str]] = defaultdict(set)
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        first, separator, second = line.partition("-")
        if not separator or not first or not second:
            raise ValueError(f"expected 'a-b', got {line!r}")
        graph[first].add(second)
        graph[second].add(first)
    return dict(graph)


def count_triangles_with_t(graph: Mapping[str, Set[str]]) -> int:
    """Count sets of three connected computers where one name starts with "t"."""
    triangles: set[tuple[str, ...]] = set()
    for first, first_neighbours in graph.items():
        for second in first_neighbours:
            for third in graph.get(second, ()):
                if first in graph.get(third, ()):
                    triangles.add(tuple(sorted((first, second, third))))
    return sum(any(name.startswith("t") for name in triangle) for triangle in triangles)


def maximum_cliques(graph: Mapping[str, Set[str]]) -> list[str]:
    """Maximal cliques whose size equals the largest node degree.

    Each clique is given as its sorted names joined by commas; the list is sorted.
    """
    if not graph:
        return []
    target = max(len(neighbours) for neighbours in graph.values())
    found: list[str] = []

    def expand(clique: frozenset[str], candidates: set[str], excluded: set[str]) -> None:
        if not candidates and not excluded:
            if len(clique) == target:
                found.append(",".join(sorted(clique)))
            return
        for node in list(candidates):
            neighbours = graph[node]
            expand(clique | {node}, candidates & neighbours, excluded & neighbours)
            candidates = candidates - {node}
            excluded = excluded | {node}

    expand(frozenset(), set(graph), set())
    return sorted(found)


def part1(text: str) -> int:
    return count_triangles_with_t(build_graph(text))


def part2(text: str) -> str:
    """The password: names of the largest clique, sorted and comma separated."""
    cliques = maximum_cliques(build_graph(text))
    if not cliques:
        raise ValueError("no clique as large as the largest degree was found")
    return cliques[0]
"""Structural checks over a graph."""

from __future__ import annotations

from enum import Enum

from graphdb.database import Database


class _Mark(Enum):
    NEW = 0
    ACTIVE = 1
    DONE = 2


def _sorted_edges(db: Database):
    for source, targets in sorted(db.edges.items()):
        for target, weight in sorted(targets.items()):
            yield source, target, weight


def detect_cycle(db: Database) -> bool:
    """Return True if the directed graph contains a cycle."""
    adjacency = {node: sorted(db.edges.get(node, {})) for node in db.nodes}
    marks = dict.fromkeys(adjacency, _Mark.NEW)
    for start in sorted(adjacency):
        if marks[start] is not _Mark.NEW:
            continue
        marks[start] = _Mark.ACTIVE
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, pending = stack[-1]
            for following in pending:
                mark = marks[following]
                if mark is _Mark.ACTIVE:
                    return True
                if mark is _Mark.NEW:
                    marks[following] = _Mark.ACTIVE
                    stack.append((following, iter(adjacency[following])))
                    break
            else:
                marks[node] = _Mark.DONE
                stack.pop()
    return False


def _flow_components(db: Database) -> int:
    """Count weakly connected components among nodes in the edge table."""
    parent: dict[str, str] = {}

    def find(node: str) -> str:
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    for source, targets in db.edges.items():
        parent.setdefault(source, source)
        for target in targets:
            parent.setdefault(target, target)
            root_a, root_b = find(source), find(target)
            if root_a != root_b:
                parent[root_b] = root_a
    return len({find(node) for node in parent})


def check_flow_connectivity(db: Database) -> bool:
    """True when the edge table forms at least one component."""
    return _flow_components(db) > 0


def detect_negative_cycle(db: Database) -> list[str]:
    """Return the nodes of a negative cycle, first node repeated at the end.

    An empty list means no negative cycle was found.
    """
    names = sorted(db.nodes)
    if not names:
        return []
    edges = list(_sorted_edges(db))
    distance = dict.fromkeys(names, 0)
    predecessor: dict[str, str | None] = dict.fromkeys(names)
    last = None
    for _ in names:
        last = None
        for source, target, weight in edges:
            if distance[source] + weight < distance[target]:
                distance[target] = distance[source] + weight
                predecessor[target] = source
                last = target
    if last is None:
        return []
    for _ in names:
        last = predecessor[last]
    cycle = [last]
    current = predecessor[last]
    while current != last:
        cycle.append(current)
        current = predecessor[current]
    cycle.append(last)
    cycle.reverse()
    return cycle


def negative_weighted_edges(db: Database) -> list[tuple[str, str]]:
    """Return every edge with a negative weight."""
    return [(s, t) for s, t, w in _sorted_edges(db) if w < 0]


def orphan_nodes(db: Database) -> list[str]:
    """Return nodes that appear nowhere in the edge table."""
    connected = set(db.edges)
    for targets in db.edges.values():
        connected.update(targets)
    return sorted(db.nodes - connected)
"""Scheduling order and earliest start times over the graph."""

from __future__ import annotations

from collections import deque

from graphdb.database import Database, GraphError


def min_flow(db: Database) -> str:
    """Return the processing order of nodes and the time before each.

    Nodes without outgoing edges come first; the time before a node is the
    longest weighted path from it to a node without outgoing edges.
    Raises GraphError for negative weights, an empty graph or a cycle.
    """
    if any(w < 0 for targets in db.edges.values() for w in targets.values()):
        raise GraphError("Graph has negative weight edge, min flow not possible")
    if not db.nodes:
        raise GraphError("Graph is empty!")

    names = sorted(db.nodes)
    out_degree = dict.fromkeys(names, 0)
    incoming: dict[str, list[tuple[str, int]]] = {name: [] for name in names}
    for source, targets in sorted(db.edges.items()):
        for target, weight in sorted(targets.items()):
            out_degree[source] += 1
            incoming[target].append((source, weight))

    queue = deque(name for name in names if out_degree[name] == 0)
    cost = dict.fromkeys(names, 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for source, weight in incoming[node]:
            cost[source] = max(cost[source], cost[node] + weight)
            out_degree[source] -= 1
            if out_degree[source] == 0:
                queue.append(source)

    if len(order) != len(names):
        raise GraphError("Graph has a cycle, min flow not possible")

    nodes_line = "Order of Nodes: " + "".join(f"{n} " for n in order)
    cost_line = "Time before each node: " + "".join(f"{cost[n]} " for n in order)
    return nodes_line + "\n" + cost_line
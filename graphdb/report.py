"""Text reports describing the graph and its structural flags."""

from __future__ import annotations

from graphdb.database import Database
from graphdb.flags import (
    check_flow_connectivity,
    detect_cycle,
    detect_negative_cycle,
    negative_weighted_edges,
    orphan_nodes,
)

_EMPTY_REPORT = (
    "Empty Graph?: Yes\n"
    "Cycle Present?: No\n"
    "Flow Connected?: Yes\n"
    "Negative Cycle Present?: No\n"
    "Negative Weight Edges Present?: No\n"
    "Orphan Nodes Present?: No\n"
)


def _flag_line(label: str, flag: bool) -> str:
    answer = "Yes" if flag else "No"
    return f"{label}?: {answer}\n"


def graph_summary(db: Database) -> str:
    """List all nodes, weighted edges and relationships."""
    nodes = "".join(f"{node} " for node in sorted(db.nodes))
    edges = "".join(
        f"{source} --{{{weight}}}--> {target}, "
        for source, targets in sorted(db.edges.items())
        for target, weight in sorted(targets.items())
    )
    relations = "".join(f"{s} -> {t}, " for s, t in sorted(db.relationships))
    return (
        f"All Nodes in Graph: \n{nodes}\n"
        f"The current graph: \n{edges}\n"
        f"All Relationships in graph: \n{relations}\n"
    )


def flag_report(db: Database) -> str:
    """Return the graph summary followed by every structural flag."""
    if not db.nodes:
        return _EMPTY_REPORT
    lines = [
        "EmptyGraph?: No\n",
        _flag_line("Cycle Present", detect_cycle(db)),
        _flag_line("Flow Connected", check_flow_connectivity(db)),
    ]
    cycle = detect_negative_cycle(db)
    lines.append(_flag_line("Negative Cycle Present", bool(cycle)))
    if cycle:
        lines.append("Nodes in Negative Cycle: " + "".join(f"{n} " for n in cycle) + "\n")
    lines.append(
        _flag_line("Negative Weight Edges Present", bool(negative_weighted_edges(db)))
    )
    lines.append(_flag_line("Orphan Nodes Present", bool(orphan_nodes(db))))
    return graph_summary(db) + "".join(lines)
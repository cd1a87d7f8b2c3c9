"""In-memory directed, weighted graph store."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for graph errors."""


class NodeNotFoundError(GraphError):
    """Raised when a node is not in the graph."""


class EdgeNotFoundError(GraphError):
    """Raised when an edge is not in the graph."""


class Database:
    """A directed graph holding nodes, weighted edges and edge relationships.

    ``edges`` maps a source node to a mapping of target node to weight.
    A source keeps its (possibly empty) entry after its last edge is deleted;
    the entry only disappears when the node itself is deleted.
    """

    def __init__(self):
        self.nodes: set[str] = set()
        self.edges: dict[str, dict[str, int]] = {}
        self.relationships: set[tuple[str, str]] = set()

    def add_node(self, node: str) -> bool:
        """Add a node; return False if it was already present."""
        if node in self.nodes:
            return False
        self.nodes.add(node)
        return True

    def add_edge(self, source: str, target: str, weight: int) -> None:
        """Add an edge, replacing the weight of an existing one."""
        self.edges.setdefault(source, {})[target] = weight
        self.relationships.add((source, target))
        self.nodes.update((source, target))

    def delete_node(self, node: str) -> None:
        """Remove a node together with every edge that touches it."""
        if node not in self.nodes:
            raise NodeNotFoundError(f"Node not found: {node!r}")
        self.nodes.discard(node)
        self.edges.pop(node, None)
        for targets in self.edges.values():
            targets.pop(node, None)
        self.relationships = {
            pair for pair in self.relationships if node not in pair
        }

    def delete_edge(self, source: str, target: str) -> None:
        """Remove the edge from ``source`` to ``target``."""
        targets = self.edges.get(source)
        if targets is None or target not in targets:
            raise EdgeNotFoundError(f"No edge found from {source!r} to {target!r}")
        del targets[target]
        self.relationships.discard((source, target))

    def children(self, node: str) -> list[str]:
        """Return the sorted targets of edges leaving ``node``."""
        return sorted({t for s, t in self.relationships if s == node})

    def parents(self, node: str) -> list[str]:
        """Return the sorted sources of edges entering ``node``."""
        return sorted({s for s, t in self.relationships if t == node})

    def clear(self) -> None:
        """Remove everything from the graph."""
        self.nodes.clear()
        self.edges.clear()
        self.relationships.clear()
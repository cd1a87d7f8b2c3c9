"""Operations behind the graph endpoints, driven by plain request bodies."""

from __future__ import annotations

from contextlib import suppress

from graphdb.database import Database, EdgeNotFoundError, NodeNotFoundError
from graphdb.flow import min_flow
from graphdb.report import flag_report
from graphdb.serializer import parse_edges, parse_nodes, validate_edges


class GraphService:
    """Apply request bodies to a graph and produce the response texts."""

    def __init__(self, db: Database | None = None):
        self.db = db if db is not None else Database()

    def add_nodes(self, body: str) -> str:
        """Add every node named in ``body``; existing nodes are left alone."""
        for node in parse_nodes(body):
            self.db.add_node(node)
        return "nodes added"

    def remove_nodes(self, body: str) -> str:
        """Delete every node named in ``body``.

        If any node is missing, the nodes already deleted are put back
        (without their edges) and NodeNotFoundError is raised.
        """
        deleted = []
        try:
            for node in parse_nodes(body):
                self.db.delete_node(node)
                deleted.append(node)
        except NodeNotFoundError:
            for node in deleted:
                self.db.add_node(node)
            raise
        return "nodes deleted"

    def add_edges(self, body: str) -> str:
        """Add every edge described in ``body``, overwriting existing weights."""
        edges, weights = parse_edges(body)
        validate_edges(edges, weights)
        for (source, target), weight in zip(edges, weights):
            self.db.add_edge(source, target, weight)
        return "Edges added successfully"

    def remove_edges(self, body: str) -> str:
        """Delete every edge in ``body``; nothing is deleted if one is missing."""
        edges, _ = parse_edges(body)
        if any(edge not in self.db.relationships for edge in edges):
            raise EdgeNotFoundError("some edge not found")
        for source, target in edges:
            with suppress(EdgeNotFoundError):
                self.db.delete_edge(source, target)
        return "Edges deleted successfully"

    def _first_node(self, body: str) -> str:
        nodes = parse_nodes(body)
        if not nodes:
            raise ValueError("no node given")
        return nodes[0]

    def children(self, body: str) -> str:
        """Return the children of the first node in ``body``, space separated."""
        return "".join(f"{child} " for child in self.db.children(self._first_node(body)))

    def parents(self, body: str) -> str:
        """Return the parents of the first node in ``body``, space separated."""
        return "".join(f"{parent} " for parent in self.db.parents(self._first_node(body)))

    def flow(self) -> str:
        """Return the processing order and timings; raises GraphError if impossible."""
        return min_flow(self.db)

    def flags(self) -> str:
        """Return the graph summary and its structural flags."""
        return flag_report(self.db)

    def clear(self) -> str:
        """Remove everything from the graph."""
        self.db.clear()
        return "Graph cleared successfully"
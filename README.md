# graphdb

An in-memory store for a weighted, directed graph. It keeps a set of nodes,
a table of weighted edges and a set of (parent, child) relationships. On top
of that it can:

- detect cycles and negative cycles
- list negative-weight edges and orphan nodes
- compute a schedule: an order of the nodes together with the time before
  each one
- print a summary of the graph with a report of these flags

The same operations are served as plain text by a small HTTP server.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the library

```python
from graphdb.database import Database
from graphdb.flags import detect_cycle, orphan_nodes
from graphdb.flow import min_flow
from graphdb.report import flag_report

db = Database()
db.add_node("A")
db.add_edge("A", "B", 3)
db.add_edge("B", "C", 2)

print(db.children("A"))   # ['B']
print(db.parents("C"))    # ['B']
print(detect_cycle(db))   # False
print(orphan_nodes(db))   # []
print(min_flow(db))
print(flag_report(db))
```

### `graphdb.database`

- `Database.add_node(node)` adds a node. It returns `False` if the node was
  already there.
- `Database.add_edge(source, target, weight)` adds an edge and both of its
  end nodes. If the edge already exists, its weight is replaced, so each edge
  has exactly one weight.
- `Database.delete_node(node)` removes the node and every edge that touches
  it. It raises `NodeNotFoundError` if the node is missing.
- `Database.delete_edge(source, target)` raises `EdgeNotFoundError` if there
  is no such edge.
- `Database.children(node)` and `Database.parents(node)` return sorted lists.
- `Database.clear()` empties the graph.

`NodeNotFoundError` and `EdgeNotFoundError` are subclasses of `GraphError`.

### `graphdb.flags`

- `detect_cycle(db)` returns `True` if the graph has a directed cycle.
- `detect_negative_cycle(db)` returns the nodes of a negative-weight cycle,
  with the first node repeated at the end. If there is no such cycle, it
  returns an empty list.
- `negative_weighted_edges(db)` returns the `(source, target)` pairs whose
  weight is below zero.
- `orphan_nodes(db)` returns the nodes that no edge touches.
- `check_flow_connectivity(db)` returns `True` when the edge table holds at
  least one connected component, which means the graph has at least one edge.

### `graphdb.flow`

`min_flow(db)` returns two lines of text, `Order of Nodes: ...` and
`Time before each node: ...`. It processes the nodes that have no outgoing
edges first, then works back along the edges. The time before a node is the
longest weighted path from that node to a node with no outgoing edges. It
raises `GraphError` in three cases: the graph has a negative weight, the graph
is empty, or the graph has a cycle.

### `graphdb.report`

- `graph_summary(db)` lists all nodes, all weighted edges and all
  relationships.
- `flag_report(db)` returns that summary followed by one `Yes`/`No` line per
  flag. When there is a negative cycle, it also lists the cycle's nodes. An
  empty graph gets a fixed report.

### Request bodies

`graphdb.serializer` parses the text bodies that the server accepts. Only the
text after the first `:` is read.

- Nodes: `{"nodes": "A, B, C"}`, parsed with `parse_nodes`. Spaces, braces
  and quotes are dropped, and names are split on commas.
- Unweighted edges: `{"edge":"A -> B, B -> C"}`, parsed with `parse_edges`.
  Every weight is 0.
- Weighted edges: `{"edge":"A -{5}-> B, B -{2}-> C"}`.

`parse_edges` drops the first character after the colon and the last two
characters of the body, so the quoted edge list must follow the colon
directly. Weights are read digit by digit with `str_to_int`, so write them as
plain decimal digits. `validate_edges(edges, weights)` raises `ValueError`
when the two lists differ in length.

`GraphService` in `graphdb.service` takes these bodies directly and returns
the reply text:

```python
from graphdb.database import Database
from graphdb.service import GraphService

service = GraphService(Database())
service.add_nodes('{"nodes": "A, B"}')
service.add_edges('{"edge":"A -{4}-> B"}')
print(service.flow())
```

- `remove_edges` deletes nothing if any listed edge is missing, and raises
  `EdgeNotFoundError`.
- `remove_nodes` stops at the first missing node and raises
  `NodeNotFoundError`. Before it raises, it puts back the nodes it had already
  deleted, but without their edges.

## Running the server

```
graphdb-server [--host HOST] [--port PORT]
```

By default the server listens on `0.0.0.0:8080`. Every response carries
permissive CORS headers, and `OPTIONS` requests get a `204` reply. It has
these endpoints:

| Method | Path              | Action                          |
|--------|-------------------|---------------------------------|
| POST   | `/node/add`       | add nodes                       |
| POST   | `/node/delete`    | delete nodes                    |
| POST   | `/edge/add`       | add edges                       |
| POST   | `/edge/delete`    | delete edges (all or nothing)   |
| POST   | `/query/children` | children of the first node      |
| POST   | `/query/parents`  | parents of the first node       |
| GET    | `/tree/flow`      | schedule from `min_flow`        |
| GET    | `/flags`          | graph summary and flag report   |
| POST   | `/graph/clear`    | remove everything               |

Replies are plain text.

- When a node operation fails, the reply is `something went wrong`.
- When another operation fails with a `GraphError`, the reply is the error
  message with status 200.
- A body that cannot be parsed gets status 400.
- An unknown path gets status 404.

To run a server from your own code, call `create_server(host, port, service)`
from `graphdb.server`, then call `serve_forever()` on the result.

## Limitations

The graph lives only in memory. Nothing is saved to disk, and the graph is
lost when the process stops.
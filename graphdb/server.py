"""HTTP front end for the graph service."""

from __future__ import annotations

import argparse
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from graphdb.database import Database, GraphError
from graphdb.service import GraphService

_NODE_FAILURE = "something went wrong"

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Credentials": "true",
}

# path -> (handler(service, body), text sent on failure or None for the error's own)
_POST_ROUTES = {
    "/node/add": (GraphService.add_nodes, _NODE_FAILURE),
    "/node/delete": (GraphService.remove_nodes, _NODE_FAILURE),
    "/edge/add": (GraphService.add_edges, None),
    "/edge/delete": (GraphService.remove_edges, None),
    "/query/children": (GraphService.children, None),
    "/query/parents": (GraphService.parents, None),
    "/graph/clear": (lambda service, body: service.clear(), None),
}

_GET_ROUTES = {
    "/tree/flow": (lambda service, body: service.flow(), None),
    "/flags": (lambda service, body: service.flags(), None),
}


class GraphRequestHandler(BaseHTTPRequestHandler):
    """Route requests to the server's GraphService."""

    def _send_cors(self) -> None:
        for name, value in _CORS_HEADERS.items():
            self.send_header(name, value)

    def _respond(self, status: int, text: str) -> None:
        payload = text.encode("utf-8")
        self.send_response(status)
        self._send_cors()
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def _read_body(self) -> str:
        length = int(self.headers.get("Content-Length") or 0)
        return self.rfile.read(length).decode("utf-8") if length else ""

    def _dispatch(self, routes) -> None:
        route = routes.get(urlsplit(self.path).path)
        body = self._read_body()
        if route is None:
            self._respond(404, "Not Found")
            return
        handler, failure = route
        try:
            with self.server.lock:
                text = handler(self.server.service, body)
        except GraphError as exc:
            self._respond(200, failure or str(exc))
        except ValueError as exc:
            self._respond(400, failure or str(exc))
        else:
            self._respond(200, text)

    def do_OPTIONS(self):
        self.send_response(204)
        self._send_cors()
        self.end_headers()

    def do_GET(self):
        self._dispatch(_GET_ROUTES)

    def do_POST(self):
        self._dispatch(_POST_ROUTES)


def create_server(host: str, port: int, service: GraphService | None = None) -> ThreadingHTTPServer:
    """Build an HTTP server bound to ``host``:``port`` serving ``service``."""
    server = ThreadingHTTPServer((host, port), GraphRequestHandler)
    server.service = service if service is not None else GraphService(Database())
    server.lock = threading.Lock()
    return server


def main(argv=None) -> int:
    """Run the graph server until interrupted."""
    parser = argparse.ArgumentParser(description="Serve an in-memory graph over HTTP.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    with create_server(args.host, args.port) as server:
        print(f"server is running on port localhost:{args.port}", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0
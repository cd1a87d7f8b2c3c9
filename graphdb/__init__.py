"""In-memory weighted directed graph store with structural checks, scheduling and an HTTP front end."""

__version__ = "0.1.0"
__all__ = ["database", "serializer", "flags", "flow", "report", "service", "server"]
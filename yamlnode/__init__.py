"""A mutable YAML node graph with building from, and replaying as, document events."""

__version__ = "0.1.0"

__all__ = [
    "kinds",
    "errors",
    "events",
    "writer",
    "convert",
    "data",
    "graph",
    "node",
    "builder",
    "nodeevents",
]
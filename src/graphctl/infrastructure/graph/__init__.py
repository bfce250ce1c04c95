"""In-memory graph store and networkx interop."""

from graphctl.infrastructure.graph.store import GraphStore

__all__ = ["GraphStore"]

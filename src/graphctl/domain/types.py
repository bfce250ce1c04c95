"""Graph element types.

Nodes and edges are mutable in place (``update_node`` / ``update_edge``),
so they are plain dataclasses owned by the store rather than frozen models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from graphctl.domain.ids import edge_key


@dataclass
class Node:
    """A labeled vertex. ``id`` is opaque and externally supplied."""

    id: str
    label: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label}


@dataclass
class Edge:
    """A relation between two existing nodes.

    ``weight=None`` means unit weight for path algorithms. An undirected
    edge is stored once, under the orientation it was inserted with.
    """

    source: str
    target: str
    weight: float | None = None
    directed: bool = False

    @property
    def id(self) -> str:
        return edge_key(self.source, self.target)

    def connects(self, a: str, b: str) -> bool:
        """Return True if this edge lets a traversal step from *a* to *b*."""
        if self.source == a and self.target == b:
            return True
        return not self.directed and self.source == b and self.target == a

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "directed": self.directed,
        }

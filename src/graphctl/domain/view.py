"""GraphView — the read-only contract algorithms are written against.

Algorithms accept a ``GraphView`` rather than the concrete store. Every
query returns ids, numbers or freshly built lists, never the store's own
``Node``/``Edge`` records, so analysis code has nothing it could mutate.
"""

from __future__ import annotations

from typing import Protocol


class GraphView(Protocol):
    """Read-only queries over a graph."""

    @property
    def node_count(self) -> int: ...

    @property
    def edge_count(self) -> int: ...

    def has_node(self, node_id: str) -> bool: ...

    def get_node_ids(self) -> list[str]: ...

    def get_neighbors(self, node_id: str) -> list[str]: ...

    def get_degree(self, node_id: str) -> int: ...

    def edge_weight(self, source: str, target: str) -> float: ...

    def adjacency(self) -> dict[str, list[str]]:
        """Scratch copy of every neighbor list."""
        ...

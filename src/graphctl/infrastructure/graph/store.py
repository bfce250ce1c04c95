"""GraphStore — nodes, edges, and insertion-ordered adjacency.

The store is the only owner of graph state. Algorithms read it through
the :class:`~graphctl.domain.view.GraphView` protocol; all mutation goes
through the methods below.

Edge identity:
- One record per inserted orientation, keyed by the ordered pair.
- An undirected record is looked up symmetrically.
- A pair holds at most one record, except two directed records in
  opposite orientations, which are distinct edges.

Adjacency for a pair is re-derived from its records after every mutation
touching that pair, so neighbor lists and edge records cannot drift apart.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

from graphctl.domain.errors import GraphInvariantError
from graphctl.domain.snapshot import EdgeRecord, GraphSnapshot, NodeRecord
from graphctl.domain.types import Edge, Node

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

type _Pair = tuple[str, str]


class GraphStore:
    """Mutable graph aggregate. Not thread-safe; one owner at a time."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        # Keyed by ordered pair so hyphenated node ids never collide.
        self._edges: dict[_Pair, Edge] = {}
        self._adjacency: dict[str, list[str]] = {}
        self._revision = 0

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, node_id: str, label: str = "") -> bool:
        """Insert a node. Returns False (no-op) if *node_id* already exists."""
        if node_id in self._nodes:
            return False
        self._nodes[node_id] = Node(id=node_id, label=label)
        self._adjacency[node_id] = []
        self._revision += 1
        return True

    def remove_node(self, node_id: str) -> bool:
        """Remove a node and every edge incident to it."""
        if node_id not in self._nodes:
            return False
        incident = [pair for pair in self._edges if node_id in pair]
        for source, target in incident:
            self.remove_edge(source, target)
        del self._nodes[node_id]
        del self._adjacency[node_id]
        self._revision += 1
        return True

    def update_node(self, node_id: str, label: str) -> bool:
        node = self._nodes.get(node_id)
        if node is None:
            return False
        node.label = label
        self._revision += 1
        return True

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def get_node(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def nodes(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def get_node_ids(self) -> list[str]:
        return list(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(
        self,
        source: str,
        target: str,
        weight: float | None = None,
        directed: bool = False,
    ) -> bool:
        """Insert or overwrite the edge ``source -> target``.

        Returns False if either endpoint is missing. An existing record in
        the opposite orientation is replaced unless both it and the new
        edge are directed.
        """
        if source not in self._nodes or target not in self._nodes:
            return False

        if source != target:
            reverse = self._edges.get((target, source))
            if reverse is not None and not (directed and reverse.directed):
                del self._edges[(target, source)]

        self._edges[(source, target)] = Edge(
            source=source, target=target, weight=weight, directed=directed
        )
        self._sync_pair(source, target)
        self._revision += 1
        return True

    def remove_edge(self, source: str, target: str) -> bool:
        """Remove both orientations of the pair.

        Always returns True: removing an absent edge is a defined no-op.
        """
        forward = self._edges.pop((source, target), None)
        backward = self._edges.pop((target, source), None)
        self._sync_pair(source, target)
        if forward is not None or backward is not None:
            self._revision += 1
        return True

    def update_edge(
        self,
        source: str,
        target: str,
        weight: float | None,
        directed: bool,
    ) -> bool:
        """Change weight and direction of an existing edge in place.

        An undirected record found under the reverse key is re-keyed to
        ``source-target`` when it becomes directed, so the edge points the
        way the caller named it. Enumeration order is kept.
        """
        edge = self.get_edge(source, target)
        if edge is None:
            return False
        if directed and (edge.source, edge.target) != (source, target):
            self._edges = {
                ((source, target) if key == (target, source) else key): record
                for key, record in self._edges.items()
            }
            edge.source, edge.target = source, target
        edge.weight = weight
        edge.directed = directed
        if not directed and edge.source != edge.target:
            self._edges.pop((edge.target, edge.source), None)
        self._sync_pair(edge.source, edge.target)
        self._revision += 1
        return True

    def has_edge(self, source: str, target: str) -> bool:
        return self.get_edge(source, target) is not None

    def get_edge(self, source: str, target: str) -> Edge | None:
        """Return the edge traversable from *source* to *target*, if any."""
        edge = self._edges.get((source, target))
        if edge is not None:
            return edge
        reverse = self._edges.get((target, source))
        if reverse is not None and not reverse.directed:
            return reverse
        return None

    def get_edge_by_id(self, edge_id: str) -> Edge | None:
        """Look up an edge by its ``source-target`` string id."""
        for edge in self._edges.values():
            if edge.id == edge_id:
                return edge
        return None

    def edge_weight(self, source: str, target: str) -> float:
        """Traversal cost from *source* to *target*; unit when unweighted."""
        edge = self.get_edge(source, target)
        if edge is None or edge.weight is None:
            return 1
        return edge.weight

    def edges(self) -> Iterator[Edge]:
        return iter(list(self._edges.values()))

    def get_edge_ids(self) -> list[str]:
        return [edge.id for edge in self._edges.values()]

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def get_neighbors(self, node_id: str) -> list[str]:
        """Neighbor ids in insertion order; empty for absent or isolated nodes."""
        return list(self._adjacency.get(node_id, ()))

    def get_degree(self, node_id: str) -> int:
        return len(self._adjacency.get(node_id, ()))

    def adjacency(self) -> dict[str, list[str]]:
        """Deep copy of all neighbor lists, safe for callers to consume."""
        return copy.deepcopy(self._adjacency)

    def _links(self, a: str, b: str) -> bool:
        edge = self._edges.get((a, b)) or self._edges.get((b, a))
        return edge is not None and edge.connects(a, b)

    def _sync_direction(self, a: str, b: str) -> None:
        neighbors = self._adjacency.get(a)
        if neighbors is None:
            return
        linked = self._links(a, b)
        if linked and b not in neighbors:
            neighbors.append(b)
        elif not linked and b in neighbors:
            neighbors.remove(b)

    def _sync_pair(self, a: str, b: str) -> None:
        self._sync_direction(a, b)
        if a != b:
            self._sync_direction(b, a)

    # ------------------------------------------------------------------
    # Whole-graph operations
    # ------------------------------------------------------------------

    @property
    def revision(self) -> int:
        """Incremented by every mutation that changed state."""
        return self._revision

    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()
        self._adjacency.clear()
        self._revision += 1

    def check_invariants(self) -> None:
        """Raise GraphInvariantError if adjacency and edge records disagree."""
        if self._adjacency.keys() != self._nodes.keys():
            raise GraphInvariantError("adjacency keys do not match node ids")

        for (source, target), edge in self._edges.items():
            if (edge.source, edge.target) != (source, target):
                raise GraphInvariantError(f"edge {edge.id} stored under ({source}, {target})")
            if source not in self._nodes or target not in self._nodes:
                raise GraphInvariantError(f"edge {edge.id} references a missing node")

        for node_id, neighbors in self._adjacency.items():
            if len(neighbors) != len(set(neighbors)):
                raise GraphInvariantError(f"duplicate neighbor entries for {node_id}")
            for neighbor in neighbors:
                if not self._links(node_id, neighbor):
                    raise GraphInvariantError(f"{node_id} -> {neighbor} has no backing edge")

        for source, target in self._edges:
            if target not in self._adjacency[source]:
                raise GraphInvariantError(f"edge {source}-{target} missing from adjacency")
            edge = self._edges[(source, target)]
            if not edge.directed and source not in self._adjacency[target]:
                raise GraphInvariantError(f"undirected edge {edge.id} missing reverse adjacency")

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def to_snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(
            nodes=[NodeRecord(id=n.id, label=n.label) for n in self._nodes.values()],
            edges=[
                EdgeRecord(
                    id=e.id,
                    source=e.source,
                    target=e.target,
                    weight=e.weight,
                    directed=e.directed,
                )
                for e in self._edges.values()
            ],
        )

    def replay(self, snapshot: GraphSnapshot) -> list[str]:
        """Add every snapshot node, then every edge, in array order.

        Returns the ids of edge records that could not be added because an
        endpoint was missing.
        """
        for node in snapshot.nodes:
            self.add_node(node.id, node.label)
        skipped: list[str] = []
        for record in snapshot.edges:
            if not self.add_edge(record.source, record.target, record.weight, record.directed):
                skipped.append(record.canonical_id())
        if skipped:
            logger.warning("Skipped %d edge(s) with missing endpoints", len(skipped))
        return skipped

    @classmethod
    def from_snapshot(cls, snapshot: GraphSnapshot) -> GraphStore:
        store = cls()
        store.replay(snapshot)
        return store

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self._nodes)}, edges={len(self._edges)})"

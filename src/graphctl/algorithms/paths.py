"""Path algorithms — Dijkstra (single and all targets) and Eulerian paths.

Dijkstra is the array-based variant: the next node is found by a linear
scan over the unvisited set, ties going to the earliest-inserted node.
Negative weights are not supported.

Eulerian existence uses the undirected degree conditions on adjacency
degrees; the directed variant (in/out balance) is not implemented.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graphctl.algorithms.traversal import is_connected

if TYPE_CHECKING:
    from graphctl.domain.view import GraphView

INFINITY = math.inf


@dataclass(frozen=True)
class PathResult:
    """A shortest path and its total weight.

    An unreachable target yields ``path=[]`` and ``distance=inf``.
    """

    path: list[str]
    distance: float

    @property
    def found(self) -> bool:
        return bool(self.path)


@dataclass(frozen=True)
class ShortestPathTree:
    """Distances and predecessors from one source to every node."""

    source: str
    distances: dict[str, float] = field(default_factory=dict)
    previous: dict[str, str] = field(default_factory=dict)

    def path_to(self, target: str) -> PathResult:
        """Reconstruct the shortest path from the source to *target*."""
        if target not in self.distances:
            return PathResult(path=[], distance=INFINITY)
        return PathResult(
            path=_reconstruct(self.previous, self.source, target),
            distance=self.distances[target],
        )

    def tree_edges(self) -> list[tuple[str, str, float]]:
        """Predecessor edges ``(parent, node, distance)``, nearest first."""
        edges = [
            (parent, node, self.distances[node])
            for node, parent in self.previous.items()
            if node != self.source and math.isfinite(self.distances[node])
        ]
        edges.sort(key=lambda e: e[2])
        return edges


def _reconstruct(previous: dict[str, str], start: str, end: str) -> list[str]:
    if end != start and end not in previous:
        return []
    path = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def _relax(
    graph: GraphView,
    start: str,
    end: str | None = None,
) -> tuple[dict[str, float], dict[str, str]]:
    """Run the relaxation loop, stopping early once *end* is extracted."""
    distances: dict[str, float] = {
        node_id: (0 if node_id == start else INFINITY) for node_id in graph.get_node_ids()
    }
    previous: dict[str, str] = {}
    unvisited = list(distances)
    visited: set[str] = set()

    while unvisited:
        # min() keeps the first minimal element, so ties follow insertion order.
        current = min(unvisited, key=distances.__getitem__)
        if distances[current] == INFINITY:
            break
        unvisited.remove(current)
        if current == end:
            break
        visited.add(current)

        for neighbor in graph.get_neighbors(current):
            if neighbor in visited:
                continue
            alt = distances[current] + graph.edge_weight(current, neighbor)
            if alt < distances[neighbor]:
                distances[neighbor] = alt
                previous[neighbor] = current

    return distances, previous


def dijkstra(graph: GraphView, start: str, end: str) -> PathResult | None:
    """Shortest weighted path from *start* to *end*.

    Returns None if either endpoint is not in the graph.
    """
    if not graph.has_node(start) or not graph.has_node(end):
        return None
    distances, previous = _relax(graph, start, end)
    path = _reconstruct(previous, start, end)
    if not path:
        return PathResult(path=[], distance=INFINITY)
    return PathResult(path=path, distance=distances[end])


def dijkstra_all(graph: GraphView, start: str) -> ShortestPathTree | None:
    """Distances and predecessors from *start* to every node.

    Unreachable nodes keep distance ``inf`` and have no predecessor.
    Returns None if *start* is not in the graph.
    """
    if not graph.has_node(start):
        return None
    distances, previous = _relax(graph, start)
    return ShortestPathTree(source=start, distances=distances, previous=previous)


# ---------------------------------------------------------------------------
# Eulerian paths
# ---------------------------------------------------------------------------


def odd_degree_nodes(graph: GraphView) -> list[str]:
    return [node_id for node_id in graph.get_node_ids() if graph.get_degree(node_id) % 2]


def has_eulerian_cycle(graph: GraphView) -> bool:
    """Connected and every node has even degree."""
    return is_connected(graph) and not odd_degree_nodes(graph)


def has_eulerian_path(graph: GraphView) -> bool:
    """Connected and zero or exactly two odd-degree nodes."""
    return is_connected(graph) and len(odd_degree_nodes(graph)) in (0, 2)


def find_eulerian_path(graph: GraphView) -> list[str] | None:
    """Walk every edge exactly once (Hierholzer, explicit stack).

    Starts at the first odd-degree node, or the first node when all degrees
    are even. Consumes a scratch copy of adjacency; the graph is untouched.
    Returns None when no Eulerian path exists or the graph is empty.
    """
    if graph.node_count == 0 or not has_eulerian_path(graph):
        return None

    odd = odd_degree_nodes(graph)
    start = odd[0] if odd else graph.get_node_ids()[0]
    scratch = graph.adjacency()

    path: list[str] = []
    stack = [start]
    while stack:
        current = stack[-1]
        neighbors = scratch.get(current)
        if neighbors:
            nxt = neighbors.pop()
            back = scratch.get(nxt)
            if back and current in back:
                back.remove(current)
            stack.append(nxt)
        else:
            path.append(stack.pop())

    path.reverse()
    return path

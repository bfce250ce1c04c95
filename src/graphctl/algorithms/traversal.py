"""Traversal and connectivity — DFS/BFS, components, tree test, eccentricity.

All reachability here follows adjacency: a directed edge contributes only
its ``source -> target`` direction. Connectivity of a graph with directed
edges is therefore "reachable from the first node", not weak or strong
connectivity.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphctl.domain.view import GraphView


def _walk(graph: GraphView, start: str, visited: set[str]) -> list[str]:
    """Depth-first discovery from *start*, marking nodes in *visited*.

    Uses a stack of neighbor iterators so the discovery order matches the
    recursive formulation without its recursion-depth limit.
    """
    order = [start]
    visited.add(start)
    stack = [iter(graph.get_neighbors(start))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(graph.get_neighbors(neighbor)))
                break
        else:
            stack.pop()
    return order


def dfs(graph: GraphView, start: str, visited: set[str] | None = None) -> set[str]:
    """Return the set of nodes reachable from *start* (including it).

    When *visited* is given it is updated in place and returned, so repeated
    calls can share one visited set.
    """
    if visited is None:
        visited = set()
    if graph.has_node(start):
        _walk(graph, start, visited)
    return visited


def dfs_order(graph: GraphView, start: str) -> list[str]:
    """Depth-first discovery order from *start*; empty if *start* is absent."""
    if not graph.has_node(start):
        return []
    return _walk(graph, start, set())


def bfs_order(graph: GraphView, start: str) -> list[str]:
    """Breadth-first discovery order from *start*; empty if *start* is absent."""
    if not graph.has_node(start):
        return []
    order = [start]
    visited = {start}
    queue: deque[str] = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in graph.get_neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                queue.append(neighbor)
    return order


def is_connected(graph: GraphView) -> bool:
    """True for 0 or 1 nodes, else True iff the first node reaches every node."""
    node_ids = graph.get_node_ids()
    if len(node_ids) <= 1:
        return True
    return len(dfs(graph, node_ids[0])) == len(node_ids)


def connected_components(graph: GraphView) -> list[list[str]]:
    """Partition nodes into components.

    Seeds are taken in node-id order; each component lists its members in
    discovery order. Every node belongs to exactly one component.
    """
    visited: set[str] = set()
    components: list[list[str]] = []
    for node_id in graph.get_node_ids():
        if node_id not in visited:
            components.append(_walk(graph, node_id, visited))
    return components


def component_count(graph: GraphView) -> int:
    return len(connected_components(graph))


def is_tree(graph: GraphView) -> bool:
    """Connected, non-empty, and exactly ``n - 1`` edge records."""
    n = graph.node_count
    return n > 0 and is_connected(graph) and graph.edge_count == n - 1


def _hop_distances(graph: GraphView, start: str) -> dict[str, int]:
    distances = {start: 0}
    queue: deque[str] = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in graph.get_neighbors(current):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)
    return distances


def eccentricity(graph: GraphView, node_id: str) -> int:
    """Largest hop distance from *node_id* to any node.

    Returns -1 if the node is absent or some node is unreachable from it,
    since the distance to that node is unbounded.
    """
    if not graph.has_node(node_id):
        return -1
    distances = _hop_distances(graph, node_id)
    if len(distances) < graph.node_count:
        return -1
    return max(distances.values())


def _eccentricities(graph: GraphView) -> list[int] | None:
    values = [eccentricity(graph, node_id) for node_id in graph.get_node_ids()]
    if not values or -1 in values:
        return None
    return values


def radius(graph: GraphView) -> int:
    """Minimum eccentricity; -1 if empty or any eccentricity is undefined."""
    values = _eccentricities(graph)
    return min(values) if values is not None else -1


def diameter(graph: GraphView) -> int:
    """Maximum eccentricity; -1 if empty or any eccentricity is undefined."""
    values = _eccentricities(graph)
    return max(values) if values is not None else -1

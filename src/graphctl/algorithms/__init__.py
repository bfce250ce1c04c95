"""Algorithm layer — pure functions over a read-only GraphView.

Algorithms never mutate the graph they are given. They may import from
the domain layer only.
"""

from graphctl.algorithms.coloring import chromatic_number, color_graph
from graphctl.algorithms.matrix import AdjacencyMatrix, adjacency_matrix
from graphctl.algorithms.paths import (
    PathResult,
    ShortestPathTree,
    dijkstra,
    dijkstra_all,
    find_eulerian_path,
    has_eulerian_cycle,
    has_eulerian_path,
)
from graphctl.algorithms.search import (
    SearchBudget,
    find_hamiltonian_cycle,
    find_hamiltonian_path,
    has_hamiltonian_cycle,
    has_hamiltonian_path,
)
from graphctl.algorithms.traversal import (
    bfs_order,
    component_count,
    connected_components,
    dfs,
    dfs_order,
    diameter,
    eccentricity,
    is_connected,
    is_tree,
    radius,
)

__all__ = [
    "AdjacencyMatrix",
    "PathResult",
    "SearchBudget",
    "ShortestPathTree",
    "adjacency_matrix",
    "bfs_order",
    "chromatic_number",
    "color_graph",
    "component_count",
    "connected_components",
    "dfs",
    "dfs_order",
    "diameter",
    "dijkstra",
    "dijkstra_all",
    "eccentricity",
    "find_eulerian_path",
    "find_hamiltonian_cycle",
    "find_hamiltonian_path",
    "has_eulerian_cycle",
    "has_eulerian_path",
    "has_hamiltonian_cycle",
    "has_hamiltonian_path",
    "is_connected",
    "is_tree",
    "radius",
]

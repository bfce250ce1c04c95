"""AnalysisService — graph algorithms over the workspace graph.

Read-only: no method here opens a transaction. Algorithm sentinels
(None, empty path, -1) become either error codes (``NO_PATH``,
``NO_EULERIAN_PATH``, ...) or JSON-safe ``None`` fields in the payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from graphctl.algorithms import (
    SearchBudget,
    adjacency_matrix,
    bfs_order,
    chromatic_number,
    color_graph,
    component_count,
    connected_components,
    dfs_order,
    diameter,
    dijkstra,
    dijkstra_all,
    eccentricity,
    find_eulerian_path,
    find_hamiltonian_cycle,
    find_hamiltonian_path,
    has_eulerian_cycle,
    has_eulerian_path,
    has_hamiltonian_cycle,
    has_hamiltonian_path,
    is_connected,
    is_tree,
    radius,
)
from graphctl.algorithms.coloring import color_classes
from graphctl.algorithms.paths import odd_degree_nodes
from graphctl.domain.errors import SearchBudgetExceeded
from graphctl.services.base import BaseService
from graphctl.services.result import ServiceResult
from graphctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from graphctl.infrastructure.workspace import Workspace

TraversalOrder = Literal["bfs", "dfs"]


def _metric(value: int) -> int | None:
    """Map the -1 'undefined' sentinel to None."""
    return None if value < 0 else value


class AnalysisService(BaseService):
    """Run graph algorithms and summarize graph properties."""

    def __init__(
        self,
        workspace: Workspace,
        *,
        budget: SearchBudget | None = None,
        hamiltonian_node_limit: int = 0,
    ) -> None:
        super().__init__(workspace)
        self._budget = budget
        self._hamiltonian_node_limit = hamiltonian_node_limit

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    @traced
    def properties(self) -> ServiceResult:
        """Connectivity, tree, metric, Eulerian, Hamiltonian and coloring summary.

        Hamiltonian checks are skipped (reported as None with a warning) when
        the node count exceeds ``hamiltonian_node_limit`` or the search budget
        runs out.
        """
        graph = self._workspace.store
        warnings: list[str] = []

        with trace_span("structure"):
            data: dict[str, Any] = {
                "node_count": graph.node_count,
                "edge_count": graph.edge_count,
                "connected": is_connected(graph),
                "component_count": component_count(graph),
                "is_tree": is_tree(graph),
                "radius": _metric(radius(graph)),
                "diameter": _metric(diameter(graph)),
                "has_eulerian_cycle": has_eulerian_cycle(graph),
                "has_eulerian_path": has_eulerian_path(graph),
            }

        limit = self._hamiltonian_node_limit
        if limit and graph.node_count > limit:
            warnings.append(
                f"Hamiltonian checks skipped: {graph.node_count} nodes exceeds limit of {limit}"
            )
            data["has_hamiltonian_cycle"] = None
            data["has_hamiltonian_path"] = None
        else:
            with trace_span("hamiltonian") as span:
                try:
                    data["has_hamiltonian_cycle"] = has_hamiltonian_cycle(graph, self._budget)
                    data["has_hamiltonian_path"] = has_hamiltonian_path(graph, self._budget)
                except SearchBudgetExceeded as exc:
                    warnings.append(f"Hamiltonian checks skipped: {exc}")
                    data["has_hamiltonian_cycle"] = None
                    data["has_hamiltonian_path"] = None
                    if span:
                        span.annotate("steps", exc.steps)

        data["chromatic_number"] = chromatic_number(graph)
        data["degrees"] = {node_id: graph.get_degree(node_id) for node_id in graph.get_node_ids()}

        return ServiceResult(ok=True, op="properties", data=data, warnings=warnings)

    @traced
    def components(self) -> ServiceResult:
        comps = connected_components(self._workspace.store)
        return ServiceResult(
            ok=True,
            op="components",
            data={
                "count": len(comps),
                "components": [
                    {"index": i, "size": len(members), "members": members}
                    for i, members in enumerate(comps)
                ],
            },
        )

    # ------------------------------------------------------------------
    # Traversal and paths
    # ------------------------------------------------------------------

    @traced
    def traverse(self, start: str, *, order: TraversalOrder = "bfs") -> ServiceResult:
        """Discovery order of a BFS or DFS from *start*."""
        op = "traverse"
        graph = self._workspace.store
        if not graph.has_node(start):
            return self._error(op, "NOT_FOUND", f"Node '{start}' not found", id=start)
        visited = bfs_order(graph, start) if order == "bfs" else dfs_order(graph, start)
        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start, "order": order, "visited": visited, "count": len(visited)},
        )

    @traced
    def shortest_path(self, source: str, target: str) -> ServiceResult:
        op = "shortest_path"
        graph = self._workspace.store
        result = dijkstra(graph, source, target)
        if result is None:
            missing = [n for n in (source, target) if not graph.has_node(n)]
            return self._error(
                op, "NOT_FOUND", f"Node(s) not found: {', '.join(missing)}", missing=missing
            )
        if not result.found:
            return self._error(
                op,
                "NO_PATH",
                f"No path from '{source}' to '{target}'",
                source=source,
                target=target,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source,
                "target": target,
                "path": result.path,
                "hops": len(result.path) - 1,
                "distance": result.distance,
            },
        )

    @traced
    def distances(self, source: str) -> ServiceResult:
        """Shortest distances from *source* to every node, plus the path tree."""
        op = "distances"
        tree = dijkstra_all(self._workspace.store, source)
        if tree is None:
            return self._error(op, "NOT_FOUND", f"Node '{source}' not found", id=source)

        items = []
        for node_id, dist in tree.distances.items():
            items.append(
                {
                    "id": node_id,
                    "distance": self._distance(dist),
                    "previous": tree.previous.get(node_id),
                    "path": tree.path_to(node_id).path,
                }
            )
        unreachable = [item["id"] for item in items if item["distance"] is None]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source,
                "items": items,
                "tree_edges": [
                    {"source": parent, "target": node, "distance": dist}
                    for parent, node, dist in tree.tree_edges()
                ],
                "unreachable": unreachable,
            },
        )

    @traced
    def eccentricity(self, node_id: str) -> ServiceResult:
        op = "eccentricity"
        graph = self._workspace.store
        if not graph.has_node(node_id):
            return self._error(op, "NOT_FOUND", f"Node '{node_id}' not found", id=node_id)
        value = _metric(eccentricity(graph, node_id))
        warnings = [] if value is not None else [f"Some nodes are unreachable from '{node_id}'"]
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": node_id, "eccentricity": value},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Eulerian / Hamiltonian
    # ------------------------------------------------------------------

    @traced
    def eulerian(self) -> ServiceResult:
        """Find a walk using every edge exactly once."""
        op = "eulerian"
        graph = self._workspace.store
        path = find_eulerian_path(graph)
        if path is None:
            odd = odd_degree_nodes(graph)
            return self._error(
                op,
                "NO_EULERIAN_PATH",
                "Graph has no Eulerian path",
                connected=is_connected(graph),
                odd_degree_nodes=odd,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": path,
                "is_cycle": has_eulerian_cycle(graph),
                "edge_count": graph.edge_count,
            },
        )

    @traced
    def hamiltonian(
        self,
        *,
        cycle: bool = False,
        budget: SearchBudget | None = None,
    ) -> ServiceResult:
        """Backtracking search for a Hamiltonian path (or cycle).

        *budget* overrides the service default for this call.
        """
        op = "hamiltonian"
        graph = self._workspace.store
        budget = budget if budget is not None else self._budget
        find = find_hamiltonian_cycle if cycle else find_hamiltonian_path

        with trace_span("backtrack") as span:
            try:
                path = find(graph, budget)
            except SearchBudgetExceeded as exc:
                return self._error(
                    op,
                    "BUDGET_EXCEEDED",
                    str(exc),
                    steps=exc.steps,
                    elapsed_seconds=round(exc.elapsed_seconds, 3),
                )
            if span:
                span.annotate("nodes", graph.node_count)

        if path is None:
            kind = "cycle" if cycle else "path"
            return self._error(
                op,
                "NO_HAMILTONIAN_CYCLE" if cycle else "NO_HAMILTONIAN_PATH",
                f"Graph has no Hamiltonian {kind}",
                node_count=graph.node_count,
            )
        return ServiceResult(ok=True, op=op, data={"cycle": cycle, "path": path})

    # ------------------------------------------------------------------
    # Coloring and matrix
    # ------------------------------------------------------------------

    @traced
    def coloring(self) -> ServiceResult:
        """Greedy coloring; ``chromatic_number`` is an upper bound."""
        store = self._workspace.store
        coloring = color_graph(store)
        return ServiceResult(
            ok=True,
            op="coloring",
            data={
                "chromatic_number": chromatic_number(store),
                "coloring": coloring,
                "classes": color_classes(coloring),
            },
        )

    @traced
    def matrix(self) -> ServiceResult:
        m = adjacency_matrix(self._workspace.store)
        return ServiceResult(
            ok=True,
            op="matrix",
            data={"labels": m.labels, "rows": m.rows},
        )

"""GraphService — node and edge mutations, lookups, and clear.

Mutations run inside ``self._workspace.transaction()`` so the snapshot file
is rewritten only when the store actually changed. Store-level no-op
results (``False``) become ``NOT_FOUND`` / ``ALREADY_EXISTS`` errors here.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from graphctl.domain.ids import edge_key
from graphctl.infrastructure.workspace import WorkspaceError
from graphctl.services.base import BaseService
from graphctl.services.result import ServiceResult
from graphctl.services.telemetry import traced

if TYPE_CHECKING:
    from graphctl.infrastructure.graph.store import GraphStore

logger = logging.getLogger(__name__)


def _pair_ids(store: GraphStore, a: str, b: str) -> set[str]:
    """Ids of every record joining *a* and *b*, in either orientation."""
    return {e.id for e in store.edges() if {e.source, e.target} == {a, b}}


def _bad_weight(weight: float | None) -> bool:
    """Weights must be finite and non-negative; None means unit weight."""
    return weight is not None and (not math.isfinite(weight) or weight < 0)


class GraphService(BaseService):
    """Mutates and inspects the workspace graph."""

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    @traced
    def add_node(self, node_id: str, *, label: str = "") -> ServiceResult:
        op = "add_node"
        try:
            with self._workspace.transaction() as store:
                if not store.add_node(node_id, label):
                    return self._error(
                        op, "ALREADY_EXISTS", f"Node '{node_id}' already exists", id=node_id
                    )
        except WorkspaceError as exc:
            return self._workspace_error(op, exc)
        return ServiceResult(ok=True, op=op, data={"id": node_id, "label": label})

    @traced
    def remove_node(self, node_id: str) -> ServiceResult:
        """Remove a node together with every incident edge."""
        op = "remove_node"
        try:
            with self._workspace.transaction() as store:
                incident = [e.id for e in store.edges() if node_id in (e.source, e.target)]
                if not store.remove_node(node_id):
                    return self._error(op, "NOT_FOUND", f"Node '{node_id}' not found", id=node_id)
        except WorkspaceError as exc:
            return self._workspace_error(op, exc)
        logger.debug("Removed node %s and %d incident edge(s)", node_id, len(incident))
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": node_id, "edges_removed": len(incident), "removed_edges": incident},
        )

    @traced
    def update_node(self, node_id: str, *, label: str) -> ServiceResult:
        op = "update_node"
        try:
            with self._workspace.transaction() as store:
                node = store.get_node(node_id)
                previous = node.label if node is not None else None
                if not store.update_node(node_id, label):
                    return self._error(op, "NOT_FOUND", f"Node '{node_id}' not found", id=node_id)
        except WorkspaceError as exc:
            return self._workspace_error(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": node_id, "label": label, "previous_label": previous},
        )

    @traced
    def get_node(self, node_id: str) -> ServiceResult:
        """Show a node with its neighbors and incident edges."""
        store = self._workspace.store
        node = store.get_node(node_id)
        if node is None:
            return self._error("get_node", "NOT_FOUND", f"Node '{node_id}' not found", id=node_id)
        incident = [e.to_dict() for e in store.edges() if node_id in (e.source, e.target)]
        return ServiceResult(
            ok=True,
            op="get_node",
            data={
                **node.to_dict(),
                "degree": store.get_degree(node_id),
                "neighbors": store.get_neighbors(node_id),
                "edges": incident,
            },
        )

    @traced
    def list_nodes(self) -> ServiceResult:
        store = self._workspace.store
        items = [{**n.to_dict(), "degree": store.get_degree(n.id)} for n in store.nodes()]
        return ServiceResult(ok=True, op="list_nodes", data={"count": len(items), "items": items})

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    @traced
    def add_edge(
        self,
        source: str,
        target: str,
        *,
        weight: float | None = None,
        directed: bool = False,
    ) -> ServiceResult:
        """Insert or overwrite an edge; both endpoints must exist."""
        op = "add_edge"
        warnings: list[str] = []
        if _bad_weight(weight):
            return self._weight_error(op, weight)
        try:
            with self._workspace.transaction() as store:
                missing = [n for n in (source, target) if not store.has_node(n)]
                if missing:
                    return self._error(
                        op,
                        "NOT_FOUND",
                        f"Node(s) not found: {', '.join(missing)}",
                        missing=missing,
                    )
                before = _pair_ids(store, source, target)
                store.add_edge(source, target, weight, directed)
                after = _pair_ids(store, source, target)
                new_id = edge_key(source, target)
                replaced = sorted(i for i in before if i == new_id or i not in after)
                data = {**store.get_edge(source, target).to_dict(), "replaced": replaced}
        except WorkspaceError as exc:
            return self._workspace_error(op, exc)

        for edge_id in replaced:
            warnings.append(f"Replaced existing edge {edge_id}")
        if source == target:
            warnings.append(f"Self-loop on '{source}'")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def remove_edge(self, source: str, target: str) -> ServiceResult:
        """Remove both orientations of the pair.

        Always succeeds; a warning notes when nothing was removed.
        """
        op = "remove_edge"
        warnings: list[str] = []
        try:
            with self._workspace.transaction() as store:
                existing = _pair_ids(store, source, target)
                store.remove_edge(source, target)
        except WorkspaceError as exc:
            return self._workspace_error(op, exc)

        if not existing:
            warnings.append(f"No edge between '{source}' and '{target}'")
        return ServiceResult(
            ok=True,
            op=op,
            data={"source": source, "target": target, "removed": sorted(existing)},
            warnings=warnings,
        )

    @traced
    def update_edge(
        self,
        source: str,
        target: str,
        *,
        weight: float | None = None,
        clear_weight: bool = False,
        directed: bool | None = None,
    ) -> ServiceResult:
        """Change an edge's weight and/or direction.

        Omitted values keep their current setting; *clear_weight* resets the
        edge to unit weight.
        """
        op = "update_edge"
        if _bad_weight(weight):
            return self._weight_error(op, weight)
        try:
            with self._workspace.transaction() as store:
                current = store.get_edge(source, target)
                if current is None:
                    return self._error(
                        op,
                        "NOT_FOUND",
                        f"No edge from '{source}' to '{target}'",
                        source=source,
                        target=target,
                    )
                if clear_weight:
                    new_weight = None
                else:
                    new_weight = weight if weight is not None else current.weight
                new_directed = current.directed if directed is None else directed
                store.update_edge(source, target, new_weight, new_directed)
        except WorkspaceError as exc:
            return self._workspace_error(op, exc)
        return ServiceResult(ok=True, op=op, data=current.to_dict())

    @traced
    def list_edges(self) -> ServiceResult:
        items = [e.to_dict() for e in self._workspace.store.edges()]
        return ServiceResult(ok=True, op="list_edges", data={"count": len(items), "items": items})

    def _weight_error(self, op: str, weight: float | None) -> ServiceResult:
        return self._error(
            op,
            "INVALID_WEIGHT",
            f"Edge weight must be a finite non-negative number, got {weight}",
            weight=str(weight),
        )

    # ------------------------------------------------------------------
    # Whole graph
    # ------------------------------------------------------------------

    @traced
    def clear(self) -> ServiceResult:
        op = "clear"
        try:
            with self._workspace.transaction() as store:
                counts = {"nodes_removed": store.node_count, "edges_removed": store.edge_count}
                if store.node_count:
                    store.clear()
        except WorkspaceError as exc:
            return self._workspace_error(op, exc)
        return ServiceResult(ok=True, op=op, data=counts)

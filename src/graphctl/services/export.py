"""ExportService — snapshot export/import and graph interchange formats.

Formats for :meth:`ExportService.export_graph`:

- ``dot`` — Graphviz DOT (``graph`` when every edge is undirected, else
  ``digraph`` with ``dir=none`` on undirected edges)
- ``json`` — D3-compatible ``{"nodes": [...], "links": [...]}``
- ``graphml`` — GraphML via networkx

Content is returned as a string in ``data["content"]``; writing it to a
file is the command layer's job.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import networkx as nx

from graphctl.infrastructure.graph.interop import to_networkx
from graphctl.infrastructure.workspace import WorkspaceError, read_snapshot
from graphctl.services.base import BaseService
from graphctl.services.result import ServiceResult
from graphctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from graphctl.infrastructure.graph.store import GraphStore

logger = logging.getLogger(__name__)

GRAPH_FORMATS = ("dot", "json", "graphml")


class ExportService(BaseService):
    """Move graphs in and out of the workspace."""

    @traced
    def export_snapshot(self, *, indent: int = 2) -> ServiceResult:
        """Serialize the graph in the canonical snapshot format."""
        store = self._workspace.store
        snapshot = store.to_snapshot()
        return ServiceResult(
            ok=True,
            op="export_snapshot",
            data={
                "format": "snapshot",
                "content": snapshot.model_dump_json(indent=indent) + "\n",
                "node_count": store.node_count,
                "edge_count": store.edge_count,
            },
        )

    @traced
    def export_graph(self, *, fmt: str = "dot") -> ServiceResult:
        store = self._workspace.store
        if fmt == "dot":
            content = _to_dot(store)
        elif fmt == "json":
            content = _to_d3_json(store)
        elif fmt == "graphml":
            content = _to_graphml(store)
        else:
            return self._error(
                "export_graph",
                "INVALID_FORMAT",
                f"Unknown graph format: {fmt}",
                format=fmt,
                valid=list(GRAPH_FORMATS),
            )
        return ServiceResult(
            ok=True,
            op="export_graph",
            data={
                "format": fmt,
                "content": content,
                "node_count": store.node_count,
                "edge_count": store.edge_count,
            },
        )

    @traced
    def import_snapshot(self, source: Path, *, merge: bool = False) -> ServiceResult:
        """Replay a snapshot file into the workspace.

        Nodes are added first, then edges, in file order. Without *merge*
        the current graph is cleared first. Edges whose endpoints are
        missing are skipped with a warning.
        """
        op = "import_snapshot"
        try:
            snapshot = read_snapshot(source)
            with self._workspace.transaction() as store:
                if not merge:
                    store.clear()
                with trace_span("replay") as span:
                    skipped = store.replay(snapshot)
                    if span:
                        span.annotate("nodes", len(snapshot.nodes))
                        span.annotate("edges", len(snapshot.edges))
                counts = {"node_count": store.node_count, "edge_count": store.edge_count}
        except WorkspaceError as exc:
            return self._workspace_error(op, exc)

        logger.debug("Imported %s into %s", source, self._workspace.path)
        return ServiceResult(
            ok=True,
            op=op,
            data={"source_file": str(source), "merged": merge, **counts, "skipped_edges": skipped},
            warnings=[f"Skipped edge {edge_id}: endpoint not found" for edge_id in skipped],
        )


# ── Format writers ────────────────────────────────────────────────────


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _format_weight(weight: float) -> str:
    return str(int(weight)) if float(weight).is_integer() else str(weight)


def _to_dot(store: GraphStore) -> str:
    """Generate Graphviz DOT notation."""
    edges = list(store.edges())
    directed = any(e.directed for e in edges)
    lines = ["digraph G {" if directed else "graph G {"]

    for node in store.nodes():
        label = node.label or node.id
        lines.append(f"  {_quote(node.id)} [label={_quote(label)}];")

    for edge in edges:
        arrow = "->" if directed else "--"
        attrs: list[str] = []
        if edge.weight is not None:
            w = _format_weight(edge.weight)
            attrs.append(f'label="{w}"')
            attrs.append(f'weight="{w}"')
        if directed and not edge.directed:
            attrs.append("dir=none")
        suffix = f" [{', '.join(attrs)}]" if attrs else ""
        lines.append(f"  {_quote(edge.source)} {arrow} {_quote(edge.target)}{suffix};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def _to_d3_json(store: GraphStore) -> str:
    """Generate D3-compatible JSON."""
    d3_nodes = [{"id": n.id, "label": n.label} for n in store.nodes()]
    d3_links: list[dict[str, Any]] = [
        {
            "id": e.id,
            "source": e.source,
            "target": e.target,
            "weight": e.weight,
            "directed": e.directed,
        }
        for e in store.edges()
    ]
    return json.dumps({"nodes": d3_nodes, "links": d3_links}, indent=2) + "\n"


def _to_graphml(store: GraphStore) -> str:
    return "\n".join(nx.generate_graphml(to_networkx(store))) + "\n"

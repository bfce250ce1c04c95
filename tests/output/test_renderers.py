"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from typing import Any

from graphctl.output.renderers import render_quiet, render_result
from graphctl.services.result import ServiceError, ServiceResult


def _ok(op: str, data: dict[str, Any], **kwargs: Any) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=data, **kwargs)


def _err(op: str = "get_node") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="NOT_FOUND", message="Node 'Z' not found", detail={"id": "Z"}),
    )


class TestErrorRenderer:
    def test_error_line(self) -> None:
        out = render_result(_err())
        assert out == "ERROR  get_node [NOT_FOUND] — Node 'Z' not found"

    def test_verbose_shows_detail(self) -> None:
        out = render_result(_err(), verbose=True)
        assert "detail:" in out
        assert "id: Z" in out


class TestMutationRenderer:
    def test_add_edge(self) -> None:
        out = render_result(
            _ok(
                "add_edge",
                {
                    "id": "A-B",
                    "source": "A",
                    "target": "B",
                    "weight": 2.0,
                    "directed": False,
                    "replaced": [],
                },
            )
        )
        assert out.startswith("OK  add_edge")
        assert "weight: 2" in out
        assert "replaced" not in out

    def test_replaced_listed(self) -> None:
        out = render_result(
            _ok("add_edge", {"id": "B-A", "source": "B", "target": "A", "replaced": ["A-B"]})
        )
        assert "replaced: A-B" in out

    def test_unchanged_previous_label_hidden(self) -> None:
        out = render_result(
            _ok("update_node", {"id": "A", "label": "x", "previous_label": "x"})
        )
        assert "previous_label" not in out


class TestLookupRenderers:
    def test_node_panel(self) -> None:
        out = render_result(
            _ok(
                "get_node",
                {
                    "id": "A",
                    "label": "Alpha",
                    "degree": 1,
                    "neighbors": ["B"],
                    "edges": [
                        {
                            "id": "A-B",
                            "source": "A",
                            "target": "B",
                            "weight": None,
                            "directed": True,
                        }
                    ],
                },
            )
        )
        assert "A — Alpha" in out
        assert "neighbors: B" in out
        assert "A-B" in out
        assert "yes" in out

    def test_node_table(self) -> None:
        out = render_result(
            _ok("list_nodes", {"count": 1, "items": [{"id": "A", "label": "", "degree": 0}]})
        )
        assert out.endswith("1 nodes")

    def test_edge_table(self) -> None:
        items = [{"id": "A-B", "source": "A", "target": "B", "weight": None, "directed": False}]
        out = render_result(_ok("list_edges", {"count": 1, "items": items}))
        assert "no" in out
        assert out.endswith("1 edges")


class TestAnalysisRenderers:
    def test_properties_skipped_hamiltonian(self) -> None:
        data = {
            "node_count": 3,
            "edge_count": 2,
            "connected": True,
            "component_count": 1,
            "is_tree": True,
            "radius": None,
            "diameter": 2,
            "has_eulerian_cycle": False,
            "has_eulerian_path": True,
            "has_hamiltonian_cycle": None,
            "has_hamiltonian_path": None,
            "chromatic_number": 2,
            "degrees": {"A": 1},
        }
        out = render_result(_ok("properties", data))
        assert "Hamiltonian cycle" in out
        assert "skipped" in out
        assert "Radius" in out
        assert "∞" in out
        assert "Chromatic number (greedy)" in out

    def test_components(self) -> None:
        data = {
            "count": 2,
            "components": [
                {"index": 0, "size": 2, "members": ["A", "B"]},
                {"index": 1, "size": 1, "members": ["C"]},
            ],
        }
        out = render_result(_ok("components", data))
        assert "1. (2) A, B" in out
        assert out.endswith("2 components")

    def test_traverse(self) -> None:
        data = {"start": "A", "order": "dfs", "visited": ["A", "C"], "count": 2}
        out = render_result(_ok("traverse", data))
        assert out.startswith("DFS from A")
        assert "A → C" in out

    def test_distances_unreachable(self) -> None:
        data = {
            "source": "A",
            "items": [
                {"id": "A", "distance": 0, "previous": None, "path": ["A"]},
                {"id": "B", "distance": None, "previous": None, "path": []},
            ],
            "tree_edges": [],
            "unreachable": ["B"],
        }
        out = render_result(_ok("distances", data))
        assert "Shortest distances from A" in out
        assert "1 unreachable: B" in out

    def test_hamiltonian_cycle(self) -> None:
        out = render_result(_ok("hamiltonian", {"cycle": True, "path": ["A", "B", "A"]}))
        assert out.startswith("Hamiltonian cycle")

    def test_eulerian_path(self) -> None:
        out = render_result(_ok("eulerian", {"path": ["A", "B"], "is_cycle": False}))
        assert out.startswith("Eulerian path")

    def test_coloring(self) -> None:
        data = {"chromatic_number": 2, "coloring": {}, "classes": [["B"], ["A", "C"]]}
        out = render_result(_ok("coloring", data))
        assert "A, C" in out
        assert "upper bound): 2" in out

    def test_matrix(self) -> None:
        out = render_result(_ok("matrix", {"labels": ["A", "B"], "rows": [[0, 2.5], [2.5, 0]]}))
        assert "2.5" in out
        assert "·" in out

    def test_empty_matrix(self) -> None:
        assert render_result(_ok("matrix", {"labels": [], "rows": []})) == "Empty graph."


class TestExportAndGeneric:
    def test_export_summary(self) -> None:
        data = {"format": "dot", "output_file": "g.dot", "node_count": 2, "edge_count": 1}
        out = render_result(_ok("export_graph", data))
        assert "output_file: g.dot" in out
        assert "node_count: 2" in out

    def test_import_skipped_count(self) -> None:
        data = {
            "source_file": "in.json",
            "node_count": 1,
            "edge_count": 0,
            "skipped_edges": ["X-Q"],
        }
        out = render_result(_ok("import_snapshot", data))
        assert "skipped_edges: 1" in out

    def test_unknown_op_falls_back(self) -> None:
        out = render_result(_ok("clear", {"nodes_removed": 2, "edges_removed": 1}))
        assert out.startswith("OK  clear")
        assert "nodes_removed: 2" in out

    def test_verbose_telemetry_tree(self) -> None:
        meta = {
            "telemetry": {
                "name": "AnalysisService.hamiltonian",
                "duration_ms": 1.5,
                "children": [
                    {"name": "backtrack", "duration_ms": 1.2, "annotations": {"nodes": 4}}
                ],
            }
        }
        out = render_result(
            _ok("hamiltonian", {"cycle": False, "path": ["A"]}, meta=meta), verbose=True
        )
        assert "AnalysisService.hamiltonian" in out
        assert "backtrack  (nodes=4)" in out


class TestRenderQuiet:
    def test_error(self) -> None:
        assert render_quiet(_err()) == "ERROR: get_node — Node 'Z' not found"

    def test_items_are_ids(self) -> None:
        result = _ok("list_nodes", {"items": [{"id": "A"}, {"id": "B"}]})
        assert render_quiet(result) == "A\nB"

    def test_visited(self) -> None:
        assert render_quiet(_ok("traverse", {"visited": ["A", "B"]})) == "A B"

    def test_components(self) -> None:
        data = {"components": [{"members": ["A", "B"]}, {"members": ["C"]}]}
        assert render_quiet(_ok("components", data)) == "A B\nC"

    def test_fallback(self) -> None:
        assert render_quiet(_ok("add_node", {"id": "A"})) == "OK: add_node"

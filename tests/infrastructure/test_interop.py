"""Tests for the networkx conversions."""

from __future__ import annotations

from collections.abc import Callable

import networkx as nx

from graphctl.infrastructure.graph.interop import to_networkx, traversal_digraph
from graphctl.infrastructure.graph.store import GraphStore


class TestToNetworkx:
    def test_one_edge_per_record(self, graph_factory: Callable[..., GraphStore]) -> None:
        store = graph_factory("ABC", [("A", "B", 2), ("C", "B", None, True)])
        store.update_node("A", "Alpha")
        g = to_networkx(store)
        assert list(g.nodes) == ["A", "B", "C"]
        assert g.nodes["A"]["label"] == "Alpha"
        assert g.number_of_edges() == 2
        assert g.edges["A", "B"] == {"id": "A-B", "directed": False, "weight": 2}
        assert "weight" not in g.edges["C", "B"]


class TestTraversalDigraph:
    def test_undirected_edges_become_two_arcs(
        self, graph_factory: Callable[..., GraphStore]
    ) -> None:
        store = graph_factory("ABC", [("A", "B", 3), ("B", "C", None, True)])
        g = traversal_digraph(store)
        assert set(g.edges) == {("A", "B"), ("B", "A"), ("B", "C")}
        assert g.edges["B", "A"]["weight"] == 3
        assert g.edges["B", "C"]["weight"] == 1

    def test_shortest_paths_match_store(self, weighted_graph: GraphStore) -> None:
        g = traversal_digraph(weighted_graph)
        assert nx.dijkstra_path(g, "A", "D") == ["A", "B", "C", "D"]
        assert nx.dijkstra_path_length(g, "A", "D") == 4

"""NetworkX interop — convert the store for export and cross-checking.

Two views:
- :func:`to_networkx` keeps one nx edge per stored record, with ``id``,
  ``weight`` and ``directed`` attributes. Used by graph export.
- :func:`traversal_digraph` has one nx edge per traversable direction
  (an undirected record yields both), weighted with the traversal cost.
  Its shortest paths are the ones Dijkstra must find.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from graphctl.domain.view import GraphView
    from graphctl.infrastructure.graph.store import GraphStore


def to_networkx(store: GraphStore) -> nx.DiGraph:
    """Build a DiGraph with one edge per stored record."""
    g: nx.DiGraph = nx.DiGraph()
    for node in store.nodes():
        g.add_node(node.id, label=node.label)
    for edge in store.edges():
        attrs: dict[str, object] = {"id": edge.id, "directed": edge.directed}
        if edge.weight is not None:
            attrs["weight"] = edge.weight
        g.add_edge(edge.source, edge.target, **attrs)
    return g


def traversal_digraph(graph: GraphView) -> nx.DiGraph:
    """Build a DiGraph of traversable directions weighted by traversal cost."""
    g: nx.DiGraph = nx.DiGraph()
    g.add_nodes_from(graph.get_node_ids())
    for source in graph.get_node_ids():
        for target in graph.get_neighbors(source):
            g.add_edge(source, target, weight=graph.edge_weight(source, target))
    return g

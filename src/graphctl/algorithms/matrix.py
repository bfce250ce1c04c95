"""Adjacency matrix view over sorted node ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphctl.domain.view import GraphView


@dataclass(frozen=True)
class AdjacencyMatrix:
    """Row ``i``, column ``j`` holds the traversal weight from
    ``labels[i]`` to ``labels[j]``, or 0 when there is no edge."""

    labels: list[str]
    rows: list[list[float]]

    def cell(self, source: str, target: str) -> float:
        return self.rows[self.labels.index(source)][self.labels.index(target)]


def adjacency_matrix(graph: GraphView) -> AdjacencyMatrix:
    labels = sorted(graph.get_node_ids())
    rows: list[list[float]] = []
    for source in labels:
        neighbors = set(graph.get_neighbors(source))
        rows.append(
            [graph.edge_weight(source, target) if target in neighbors else 0 for target in labels]
        )
    return AdjacencyMatrix(labels=labels, rows=rows)

"""Greedy vertex coloring.

Nodes are colored in descending-degree order (ties keep insertion order),
each taking the smallest color index unused by its already-colored
neighbors. The resulting color count is an upper bound on the chromatic
number, not the exact value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphctl.domain.view import GraphView


def color_graph(graph: GraphView) -> dict[str, int]:
    """Map every node to a color index, in the order colors were assigned."""
    coloring: dict[str, int] = {}
    by_degree = sorted(graph.get_node_ids(), key=graph.get_degree, reverse=True)

    for node_id in by_degree:
        used = {coloring[n] for n in graph.get_neighbors(node_id) if n in coloring}
        color = 0
        while color in used:
            color += 1
        coloring[node_id] = color

    return coloring


def chromatic_number(graph: GraphView) -> int:
    """Greedy estimate: ``1 + max(color)``, or 0 for an empty graph."""
    coloring = color_graph(graph)
    if not coloring:
        return 0
    return max(coloring.values()) + 1


def color_classes(coloring: dict[str, int]) -> list[list[str]]:
    """Group nodes by color index, lowest color first."""
    classes: dict[int, list[str]] = {}
    for node_id, color in coloring.items():
        classes.setdefault(color, []).append(node_id)
    return [classes[c] for c in sorted(classes)]

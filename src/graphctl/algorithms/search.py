"""Exact search — Hamiltonian path and cycle by backtracking.

The search is exponential in the worst case. Callers that embed it in a
latency-sensitive context pass a :class:`SearchBudget`; exceeding it raises
:class:`~graphctl.domain.errors.SearchBudgetExceeded`. Without a budget the
search runs to completion.

Backtracking uses an explicit stack of neighbor iterators, visiting
candidates in the same order as the recursive formulation.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphctl.domain.errors import SearchBudgetExceeded

if TYPE_CHECKING:
    from graphctl.domain.view import GraphView


@dataclass(frozen=True)
class SearchBudget:
    """Upper bounds on an exact search. ``None`` means unbounded.

    A step is one extension of the partial path by a node.
    """

    max_steps: int | None = None
    timeout_seconds: float | None = None

    @property
    def unbounded(self) -> bool:
        return self.max_steps is None and self.timeout_seconds is None


class _Meter:
    """Counts steps against a budget and raises once it is spent."""

    def __init__(self, budget: SearchBudget | None) -> None:
        self._budget = budget or SearchBudget()
        self._started = time.monotonic()
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        budget = self._budget
        if budget.unbounded:
            return
        elapsed = time.monotonic() - self._started
        if budget.max_steps is not None and self.steps > budget.max_steps:
            raise SearchBudgetExceeded(
                f"search exceeded {budget.max_steps} steps",
                steps=self.steps,
                elapsed_seconds=elapsed,
            )
        if budget.timeout_seconds is not None and elapsed > budget.timeout_seconds:
            raise SearchBudgetExceeded(
                f"search exceeded {budget.timeout_seconds}s",
                steps=self.steps,
                elapsed_seconds=elapsed,
            )


def _backtrack(
    graph: GraphView,
    start: str,
    total: int,
    meter: _Meter,
    accept: Callable[[list[str]], list[str] | None],
) -> list[str] | None:
    """Extend simple paths from *start*; return the first spanning path *accept* keeps."""
    path = [start]
    visited = {start}
    if len(path) == total:
        return accept(path)

    frames = [iter(graph.get_neighbors(start))]
    while frames:
        for nxt in frames[-1]:
            if nxt in visited:
                continue
            meter.tick()
            visited.add(nxt)
            path.append(nxt)
            if len(path) == total:
                result = accept(path)
                if result is not None:
                    return result
                path.pop()
                visited.discard(nxt)
                continue
            frames.append(iter(graph.get_neighbors(nxt)))
            break
        else:
            frames.pop()
            if frames:
                visited.discard(path.pop())
    return None


def find_hamiltonian_cycle(
    graph: GraphView,
    budget: SearchBudget | None = None,
) -> list[str] | None:
    """Find a cycle through every node, starting at the first node.

    The result repeats the start at the end (``n + 1`` entries). Returns
    None for graphs with fewer than two nodes or when no cycle exists.
    """
    node_ids = graph.get_node_ids()
    if len(node_ids) < 2:
        return None
    start = node_ids[0]

    def closes(path: list[str]) -> list[str] | None:
        if start in graph.get_neighbors(path[-1]):
            return [*path, start]
        return None

    return _backtrack(graph, start, len(node_ids), _Meter(budget), closes)


def find_hamiltonian_path(
    graph: GraphView,
    budget: SearchBudget | None = None,
) -> list[str] | None:
    """Find a path through every node, trying each node as the start in order.

    The budget covers the whole call, across all start candidates.
    """
    node_ids = graph.get_node_ids()
    if not node_ids:
        return None
    meter = _Meter(budget)
    for start in node_ids:
        result = _backtrack(graph, start, len(node_ids), meter, list)
        if result is not None:
            return result
    return None


def has_hamiltonian_cycle(graph: GraphView, budget: SearchBudget | None = None) -> bool:
    return find_hamiltonian_cycle(graph, budget) is not None


def has_hamiltonian_path(graph: GraphView, budget: SearchBudget | None = None) -> bool:
    return find_hamiltonian_path(graph, budget) is not None

"""Exception hierarchy for the graph engine.

Expected outcomes (missing nodes, unreachable targets, absent paths) are
never exceptions; they are ``False``/``None`` returns. Exceptions are
reserved for internal defects and caller-imposed limits.
"""

from __future__ import annotations


class GraphctlError(Exception):
    """Base class for all graphctl errors."""


class GraphInvariantError(GraphctlError):
    """Adjacency and edge records disagree.

    INVARIANT: Unreachable through the public store contract. Raised only
    by ``GraphStore.check_invariants()``; never handled as a runtime branch.
    """


class SearchBudgetExceeded(GraphctlError):
    """An exact search ran past its step or time budget."""

    def __init__(self, message: str, *, steps: int, elapsed_seconds: float) -> None:
        super().__init__(message)
        self.steps = steps
        self.elapsed_seconds = elapsed_seconds

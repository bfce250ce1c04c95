"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, graphctl.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class WorkspaceConfig(BaseModel):
    """[workspace] section."""

    model_config = {"frozen": True}

    file: str = "graph.json"
    indent: int = 2


class SearchConfig(BaseModel):
    """[search] section — default budget for Hamiltonian search.

    ``None`` leaves the search unbounded.
    """

    model_config = {"frozen": True}

    max_steps: int | None = None
    timeout_seconds: float | None = None


class AnalysisConfig(BaseModel):
    """[analysis] section."""

    model_config = {"frozen": True}

    # Properties summary skips Hamiltonian checks above this node count (0 = no limit).
    hamiltonian_node_limit: int = 0

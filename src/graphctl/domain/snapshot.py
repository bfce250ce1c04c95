"""Snapshot models — the canonical exported form of a graph.

``{"nodes": [{id, label}], "edges": [{id, source, target, weight, directed}]}``

A loader replays the snapshot by adding every node, then every edge,
in array order. ``edges[].id`` is informational: the store re-derives it
from ``source`` and ``target``. Weights are finite and non-negative, so
every accepted snapshot survives a JSON round-trip unchanged.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from graphctl.domain.ids import edge_key


class NodeRecord(BaseModel):
    """A node entry in a snapshot."""

    model_config = {"frozen": True}

    id: str
    label: str = ""

    @field_validator("id")
    @classmethod
    def _id_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("node id must not be empty")
        return value


class EdgeRecord(BaseModel):
    """An edge entry in a snapshot."""

    model_config = {"frozen": True}

    id: str = ""
    source: str
    target: str
    weight: Annotated[float, Field(ge=0, allow_inf_nan=False)] | None = None
    directed: bool = False

    def canonical_id(self) -> str:
        return edge_key(self.source, self.target)


class GraphSnapshot(BaseModel):
    """Serializable graph state."""

    model_config = {"frozen": True}

    nodes: list[NodeRecord] = Field(default_factory=list)
    edges: list[EdgeRecord] = Field(default_factory=list)

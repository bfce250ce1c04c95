"""Tests for graph element types, edge ids and snapshot models."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from graphctl.domain.ids import edge_key
from graphctl.domain.snapshot import EdgeRecord, GraphSnapshot, NodeRecord
from graphctl.domain.types import Edge, Node


class TestEdgeKey:
    def test_source_dash_target(self) -> None:
        assert edge_key("A", "B") == "A-B"

    def test_orientation_matters(self) -> None:
        assert edge_key("A", "B") != edge_key("B", "A")


class TestEdge:
    def test_id_follows_orientation(self) -> None:
        assert Edge("B", "A").id == "B-A"

    def test_undirected_connects_both_ways(self) -> None:
        edge = Edge("A", "B")
        assert edge.connects("A", "B")
        assert edge.connects("B", "A")
        assert not edge.connects("A", "C")

    def test_directed_connects_one_way(self) -> None:
        edge = Edge("A", "B", directed=True)
        assert edge.connects("A", "B")
        assert not edge.connects("B", "A")

    def test_to_dict(self) -> None:
        assert Edge("A", "B", 2.0, True).to_dict() == {
            "id": "A-B",
            "source": "A",
            "target": "B",
            "weight": 2.0,
            "directed": True,
        }


class TestNode:
    def test_to_dict(self) -> None:
        assert Node("A", "Alpha").to_dict() == {"id": "A", "label": "Alpha"}


class TestSnapshotModels:
    def test_defaults(self) -> None:
        record = EdgeRecord(source="A", target="B")
        assert record.weight is None
        assert record.directed is False
        assert record.canonical_id() == "A-B"
        assert GraphSnapshot().nodes == []

    def test_node_id_required(self) -> None:
        with pytest.raises(ValidationError):
            NodeRecord(id="")

    def test_weight_must_be_numeric(self) -> None:
        with pytest.raises(ValidationError):
            EdgeRecord(source="A", target="B", weight="heavy")  # type: ignore[arg-type]

    @pytest.mark.parametrize("weight", [math.inf, -math.inf, math.nan, -1.0])
    def test_weight_must_be_finite_and_non_negative(self, weight: float) -> None:
        with pytest.raises(ValidationError):
            EdgeRecord(source="A", target="B", weight=weight)

    def test_frozen(self) -> None:
        record = NodeRecord(id="A")
        with pytest.raises(ValidationError):
            record.label = "x"  # type: ignore[misc]

    def test_json_shape(self) -> None:
        snapshot = GraphSnapshot(
            nodes=[NodeRecord(id="A")],
            edges=[EdgeRecord(id="A-A", source="A", target="A", weight=1.5)],
        )
        assert snapshot.model_dump() == {
            "nodes": [{"id": "A", "label": ""}],
            "edges": [
                {"id": "A-A", "source": "A", "target": "A", "weight": 1.5, "directed": False}
            ],
        }

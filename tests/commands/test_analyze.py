"""Tests for the analyze command group."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.mark.usefixtures("seeded")
class TestAnalyzeCommands:
    def test_properties(self, invoke_json) -> None:
        data = invoke_json("analyze", "properties")["data"]
        assert data["node_count"] == 4
        assert data["connected"] is True
        assert data["has_hamiltonian_cycle"] is True
        assert data["chromatic_number"] == 2

    def test_properties_rich(self, invoke) -> None:
        result = invoke("analyze", "properties")
        assert result.exit_code == 0
        assert "Eulerian cycle" in result.stdout

    def test_verbose_includes_telemetry(self, invoke) -> None:
        result = invoke("--json", "-v", "analyze", "properties")
        assert '"telemetry"' in result.stdout

    def test_components(self, invoke) -> None:
        result = invoke("-q", "analyze", "components")
        assert result.stdout == "A B C D\n"

    def test_traverse_dfs(self, invoke) -> None:
        result = invoke("-q", "analyze", "traverse", "A", "--order", "DFS")
        assert result.stdout == "A B C D\n"

    def test_path(self, invoke_json) -> None:
        data = invoke_json("analyze", "path", "A", "D")["data"]
        assert data["path"] == ["A", "B", "C", "D"]
        assert data["distance"] == 4

    def test_path_missing_node(self, invoke) -> None:
        result = invoke("analyze", "path", "A", "Z")
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.stderr

    def test_distances(self, invoke_json) -> None:
        items = invoke_json("analyze", "distances", "A")["data"]["items"]
        assert {item["id"]: item["distance"] for item in items} == {
            "A": 0,
            "B": 1,
            "C": 3,
            "D": 4,
        }

    def test_eccentricity(self, invoke_json) -> None:
        assert invoke_json("analyze", "eccentricity", "A")["data"]["eccentricity"] == 2

    def test_eulerian(self, invoke_json) -> None:
        data = invoke_json("analyze", "eulerian")["data"]
        assert data["is_cycle"] is True
        assert len(data["path"]) == 5

    def test_hamiltonian_cycle(self, invoke) -> None:
        result = invoke("-q", "analyze", "hamiltonian", "--cycle")
        assert result.stdout == "A B C D A\n"

    def test_hamiltonian_budget_flag(self, invoke_json) -> None:
        payload = invoke_json("analyze", "hamiltonian", "--max-steps", "1")
        assert payload["error"]["code"] == "BUDGET_EXCEEDED"

    def test_invalid_timeout(self, invoke) -> None:
        assert invoke("analyze", "hamiltonian", "--timeout", "0").exit_code == 2

    def test_color(self, invoke_json) -> None:
        data = invoke_json("analyze", "color")["data"]
        assert data["classes"] == [["A", "C"], ["B", "D"]]

    def test_matrix(self, invoke_json) -> None:
        data = invoke_json("analyze", "matrix")["data"]
        assert data["labels"] == ["A", "B", "C", "D"]
        assert data["rows"][0] == [0, 1, 0, 10]


@pytest.mark.usefixtures("seeded")
class TestAnalyzeConfig:
    def test_search_budget_from_toml(self, invoke_json, tmp_path: Path) -> None:
        (tmp_path / "graphctl.toml").write_text("[search]\nmax_steps = 1\n")
        assert invoke_json("analyze", "hamiltonian")["error"]["code"] == "BUDGET_EXCEEDED"
        assert invoke_json("analyze", "hamiltonian", "--max-steps", "1000")["ok"] is True

    def test_search_budget_from_env(
        self, invoke_json, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GRAPHCTL_SEARCH__MAX_STEPS", "1")
        assert invoke_json("analyze", "hamiltonian")["ok"] is False

    def test_node_limit_warning(self, invoke, tmp_path: Path) -> None:
        (tmp_path / "graphctl.toml").write_text("[analysis]\nhamiltonian_node_limit = 2\n")
        result = invoke("analyze", "properties")
        assert result.exit_code == 0
        assert "Hamiltonian checks skipped" in result.stderr


@pytest.mark.usefixtures("_isolated_workspace")
class TestCorruptWorkspace:
    def test_invalid_snapshot_exits_1(self, invoke, tmp_path: Path) -> None:
        (tmp_path / "graph.json").write_text("[1, 2")
        result = invoke("analyze", "properties")
        assert result.exit_code == 1
        assert "INVALID_SNAPSHOT" in result.stderr

    def test_dangling_edge_warns_on_load(self, invoke, tmp_path: Path) -> None:
        (tmp_path / "graph.json").write_text(
            '{"nodes": [{"id": "A"}], "edges": [{"source": "A", "target": "Q"}]}'
        )
        result = invoke("analyze", "properties")
        assert result.exit_code == 0
        assert "skipped edge A-Q" in result.stderr

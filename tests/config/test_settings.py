"""Tests for GraphctlSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from graphctl.config.settings import GraphctlSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path)
        assert settings.workspace_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.workspace.file == "graph.json"
        assert settings.search.max_steps is None
        assert settings.analysis.hamiltonian_node_limit == 0

    def test_frozen(self, tmp_path: Path) -> None:
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "graphctl.toml").write_text(
            '[workspace]\nfile = "net.json"\n[search]\nmax_steps = 500\n'
        )
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path)
        assert settings.workspace.file == "net.json"
        assert settings.workspace.indent == 2
        assert settings.search.max_steps == 500
        assert settings.search.timeout_seconds is None

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[analysis]\nhamiltonian_node_limit = 12\n")
        settings = GraphctlSettings.from_cli(config_path=str(custom), workspace_root=tmp_path)
        assert settings.analysis.hamiltonian_node_limit == 12
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "graphctl.toml").write_text("[workspace\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            GraphctlSettings.from_cli(workspace_root=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = GraphctlSettings.from_cli(
            workspace_root=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_none_flags_do_not_mask_toml(self, tmp_path: Path) -> None:
        (tmp_path / "graphctl.toml").write_text("verbose = true\n")
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path, verbose=None)
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "graphctl.toml").write_text("quiet = true\n")
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path, quiet=False)
        assert settings.quiet is False


class TestGraphPath:
    def test_defaults_under_workspace_root(self, tmp_path: Path) -> None:
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path)
        assert settings.graph_path == tmp_path / "graph.json"

    def test_root_from_discovered_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "graphctl.toml").write_text('[workspace]\nfile = "g.json"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = GraphctlSettings.from_cli()
        assert settings.workspace_root == tmp_path.resolve()
        assert settings.graph_path == tmp_path.resolve() / "g.json"

    def test_file_flag_wins(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere.json"
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path, graph_file=target)
        assert settings.graph_path == target


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRAPHCTL_QUIET", "true")
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GRAPHCTL_SEARCH__MAX_STEPS", "250")
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path)
        assert settings.search.max_steps == 250

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "graphctl.toml").write_text("[search]\ntimeout_seconds = 1.0\n")
        monkeypatch.setenv("GRAPHCTL_SEARCH__TIMEOUT_SECONDS", "3.5")
        settings = GraphctlSettings.from_cli(workspace_root=tmp_path)
        assert settings.search.timeout_seconds == 3.5

"""Shared pytest fixtures for graphctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Iterable
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from graphctl.infrastructure.graph.store import GraphStore
from graphctl.infrastructure.workspace import Workspace
from graphctl.services.telemetry import disable_telemetry

type EdgeSpec = (
    tuple[str, str] | tuple[str, str, float | None] | tuple[str, str, float | None, bool]
)


def build_graph(nodes: Iterable[str], edges: Iterable[EdgeSpec] = ()) -> GraphStore:
    """Build a store from node ids and ``(source, target[, weight[, directed]])`` tuples."""
    store = GraphStore()
    for node_id in nodes:
        store.add_node(node_id)
    for spec in edges:
        source, target, *rest = spec
        weight = rest[0] if rest else None
        directed = rest[1] if len(rest) > 1 else False
        assert store.add_edge(source, target, weight, directed)
    return store


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def graph_factory() -> Callable[..., GraphStore]:
    """Return :func:`build_graph` for tests that need several small graphs."""
    return build_graph


@pytest.fixture
def weighted_graph() -> GraphStore:
    """A-B(1), B-C(2), A-D(10), C-D(1): the shortest A→D path goes the long way round."""
    return build_graph(
        "ABCD",
        [("A", "B", 1), ("B", "C", 2), ("A", "D", 10), ("C", "D", 1)],
    )


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """Workspace backed by a (not yet existing) snapshot file in tmp_path."""
    return Workspace(tmp_path / "graph.json")


@pytest.fixture
def _isolated_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI commands from an empty temp directory.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes; the CLI then reads and writes ``tmp_path / "graph.json"``.
    """
    monkeypatch.delenv("GRAPHCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_cli_state() -> Generator[None]:
    """Undo the telemetry and logging setup a CLI invocation performs."""
    yield
    disable_telemetry()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    logging.getLogger("graphctl").setLevel(logging.NOTSET)

"""Command group: graph analysis algorithms."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.commands._base import GraphctlGroup
from graphctl.services.analysis import AnalysisService

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext

_ANALYZE_EXAMPLES = """\
  graphctl analyze properties
  graphctl analyze components
  graphctl analyze traverse A --order dfs
  graphctl analyze path A D
  graphctl analyze distances A
  graphctl analyze eccentricity A
  graphctl analyze eulerian
  graphctl analyze hamiltonian --cycle --max-steps 100000
  graphctl analyze color
  graphctl analyze matrix"""


def _service(app: AppContext) -> AnalysisService:
    return AnalysisService(
        app.workspace,
        budget=app.search_budget(),
        hamiltonian_node_limit=app.settings.analysis.hamiltonian_node_limit,
    )


@click.group(cls=GraphctlGroup, examples=_ANALYZE_EXAMPLES)
@click.pass_obj
def analyze(app: AppContext) -> None:
    """Run graph algorithms on the workspace graph."""


@analyze.command(
    examples="""\
  graphctl analyze properties
  graphctl -v analyze properties
  graphctl --json analyze properties"""
)
@click.pass_obj
def properties(app: AppContext) -> None:
    """Summarize connectivity, metrics, Eulerian/Hamiltonian status and coloring."""
    app.emit(_service(app).properties())


@analyze.command(
    examples="""\
  graphctl analyze components
  graphctl -q analyze components"""
)
@click.pass_obj
def components(app: AppContext) -> None:
    """List connected components."""
    app.emit(_service(app).components())


@analyze.command(
    examples="""\
  graphctl analyze traverse A
  graphctl analyze traverse A --order dfs"""
)
@click.argument("start")
@click.option(
    "--order",
    type=click.Choice(["bfs", "dfs"], case_sensitive=False),
    default="bfs",
    help="Breadth-first or depth-first.",
)
@click.pass_obj
def traverse(app: AppContext, start: str, order: str) -> None:
    """Visit nodes reachable from START in BFS or DFS order."""
    app.emit(_service(app).traverse(start, order="dfs" if order.lower() == "dfs" else "bfs"))


@analyze.command(
    examples="""\
  graphctl analyze path A D
  graphctl -q analyze path A D"""
)
@click.argument("source")
@click.argument("target")
@click.pass_obj
def path(app: AppContext, source: str, target: str) -> None:
    """Find the shortest weighted path (Dijkstra)."""
    app.emit(_service(app).shortest_path(source, target))


@analyze.command(
    examples="""\
  graphctl analyze distances A"""
)
@click.argument("source")
@click.pass_obj
def distances(app: AppContext, source: str) -> None:
    """Shortest distances from SOURCE to every node (shortest-path tree)."""
    app.emit(_service(app).distances(source))


@analyze.command(
    examples="""\
  graphctl analyze eccentricity A"""
)
@click.argument("node_id")
@click.pass_obj
def eccentricity(app: AppContext, node_id: str) -> None:
    """Hop distance from NODE_ID to the farthest node."""
    app.emit(_service(app).eccentricity(node_id))


@analyze.command(
    examples="""\
  graphctl analyze eulerian"""
)
@click.pass_obj
def eulerian(app: AppContext) -> None:
    """Find a walk that uses every edge exactly once."""
    app.emit(_service(app).eulerian())


@analyze.command(
    examples="""\
  graphctl analyze hamiltonian
  graphctl analyze hamiltonian --cycle
  graphctl analyze hamiltonian --max-steps 50000 --timeout 2"""
)
@click.option("--cycle", is_flag=True, help="Require a closed tour.")
@click.option(
    "--max-steps",
    type=click.IntRange(min=1),
    default=None,
    help="Abort after this many search steps.",
)
@click.option(
    "--timeout",
    "timeout_seconds",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Abort after this many seconds.",
)
@click.pass_obj
def hamiltonian(
    app: AppContext,
    cycle: bool,
    max_steps: int | None,
    timeout_seconds: float | None,
) -> None:
    """Search for a path (or cycle) visiting every node once."""
    budget = app.search_budget(max_steps=max_steps, timeout_seconds=timeout_seconds)
    app.emit(_service(app).hamiltonian(cycle=cycle, budget=budget))


@analyze.command(
    examples="""\
  graphctl analyze color
  graphctl --json analyze color"""
)
@click.pass_obj
def color(app: AppContext) -> None:
    """Greedy vertex coloring and chromatic number estimate."""
    app.emit(_service(app).coloring())


@analyze.command(
    examples="""\
  graphctl analyze matrix"""
)
@click.pass_obj
def matrix(app: AppContext) -> None:
    """Adjacency matrix over sorted node ids."""
    app.emit(_service(app).matrix())

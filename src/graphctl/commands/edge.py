"""Command group: edge add, remove, update, list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.commands._base import GraphctlGroup
from graphctl.services.graph import GraphService

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext

_EDGE_EXAMPLES = """\
  graphctl edge add A B
  graphctl edge add A B --weight 2.5
  graphctl edge add A B --directed
  graphctl edge update A B --weight 4
  graphctl edge update A B --undirected --no-weight
  graphctl edge remove A B
  graphctl edge list"""

_NON_NEGATIVE = click.FloatRange(min=0)


@click.group(cls=GraphctlGroup, examples=_EDGE_EXAMPLES)
@click.pass_obj
def edge(app: AppContext) -> None:
    """Connect, reweight and disconnect nodes."""


@edge.command(
    examples="""\
  graphctl edge add A B
  graphctl edge add A B --weight 3
  graphctl edge add A B --directed --weight 1.5"""
)
@click.argument("source")
@click.argument("target")
@click.option("--weight", type=_NON_NEGATIVE, default=None, help="Edge weight (default: unit).")
@click.option("--directed", is_flag=True, help="Traversable from SOURCE to TARGET only.")
@click.pass_obj
def add(app: AppContext, source: str, target: str, weight: float | None, directed: bool) -> None:
    """Add an edge between two existing nodes, replacing any existing one."""
    app.emit(GraphService(app.workspace).add_edge(source, target, weight=weight, directed=directed))


@edge.command(
    examples="""\
  graphctl edge remove A B"""
)
@click.argument("source")
@click.argument("target")
@click.pass_obj
def remove(app: AppContext, source: str, target: str) -> None:
    """Remove every edge between SOURCE and TARGET (both orientations)."""
    app.emit(GraphService(app.workspace).remove_edge(source, target))


@edge.command(
    examples="""\
  graphctl edge update A B --weight 4
  graphctl edge update A B --directed
  graphctl edge update A B --no-weight"""
)
@click.argument("source")
@click.argument("target")
@click.option("--weight", type=_NON_NEGATIVE, default=None, help="New weight.")
@click.option("--no-weight", "clear_weight", is_flag=True, help="Reset to unit weight.")
@click.option(
    "--directed/--undirected",
    default=None,
    help="Change direction (omit to keep the current one).",
)
@click.pass_obj
def update(
    app: AppContext,
    source: str,
    target: str,
    weight: float | None,
    clear_weight: bool,
    directed: bool | None,
) -> None:
    """Change an edge's weight or direction."""
    if weight is not None and clear_weight:
        raise click.UsageError("--weight and --no-weight are mutually exclusive.")
    app.emit(
        GraphService(app.workspace).update_edge(
            source, target, weight=weight, clear_weight=clear_weight, directed=directed
        )
    )


@edge.command(
    name="list",
    examples="""\
  graphctl edge list
  graphctl --json edge list"""
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List edges in insertion order."""
    app.emit(GraphService(app.workspace).list_edges())

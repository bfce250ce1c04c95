"""Command group: node add, remove, update, show, list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.commands._base import GraphctlGroup
from graphctl.services.graph import GraphService

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext

_NODE_EXAMPLES = """\
  graphctl node add A --label "Start"
  graphctl node update A --label "Origin"
  graphctl node show A
  graphctl node list
  graphctl -q node list
  graphctl node remove A"""


@click.group(cls=GraphctlGroup, examples=_NODE_EXAMPLES)
@click.pass_obj
def node(app: AppContext) -> None:
    """Create, inspect and remove nodes."""


@node.command(
    examples="""\
  graphctl node add A
  graphctl node add hub-1 --label "Central hub"
  graphctl --json node add B"""
)
@click.argument("node_id")
@click.option("--label", default="", help="Display label (not unique).")
@click.pass_obj
def add(app: AppContext, node_id: str, label: str) -> None:
    """Add a node with a unique NODE_ID."""
    app.emit(GraphService(app.workspace).add_node(node_id, label=label))


@node.command(
    examples="""\
  graphctl node remove A"""
)
@click.argument("node_id")
@click.pass_obj
def remove(app: AppContext, node_id: str) -> None:
    """Remove a node and every edge touching it."""
    app.emit(GraphService(app.workspace).remove_node(node_id))


@node.command(
    examples="""\
  graphctl node update A --label "Renamed\""""
)
@click.argument("node_id")
@click.option("--label", required=True, help="New display label.")
@click.pass_obj
def update(app: AppContext, node_id: str, label: str) -> None:
    """Change a node's label."""
    app.emit(GraphService(app.workspace).update_node(node_id, label=label))


@node.command(
    examples="""\
  graphctl node show A
  graphctl --json node show A"""
)
@click.argument("node_id")
@click.pass_obj
def show(app: AppContext, node_id: str) -> None:
    """Show a node with its degree, neighbors and incident edges."""
    app.emit(GraphService(app.workspace).get_node(node_id))


@node.command(
    name="list",
    examples="""\
  graphctl node list
  graphctl -q node list"""
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List nodes in insertion order."""
    app.emit(GraphService(app.workspace).list_nodes())

"""Standalone command: remove every node and edge."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.commands._base import GraphctlCommand
from graphctl.services.graph import GraphService

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext


@click.command(
    cls=GraphctlCommand,
    examples="""\
  graphctl clear --yes
  graphctl -f scratch.json clear --yes""",
)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def clear(app: AppContext, yes: bool) -> None:
    """Empty the workspace graph."""
    if not yes:
        click.confirm("Remove every node and edge?", abort=True)
    app.emit(GraphService(app.workspace).clear())

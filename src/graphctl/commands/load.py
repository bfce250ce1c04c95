"""Standalone command: load a snapshot file into the workspace."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphctl.commands._base import GraphctlCommand
from graphctl.services.export import ExportService

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext


@click.command(
    cls=GraphctlCommand,
    examples="""\
  graphctl load backup.json
  graphctl load extra.json --merge
  graphctl -f other.json load backup.json""",
)
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--merge", is_flag=True, help="Add to the current graph instead of replacing it.")
@click.pass_obj
def load(app: AppContext, source: Path, merge: bool) -> None:
    """Replace (or extend) the workspace graph from a snapshot FILE."""
    app.emit(ExportService(app.workspace).import_snapshot(source, merge=merge))

"""Command group: graph export (snapshot, dot, json, graphml)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphctl.commands._base import GraphctlGroup
from graphctl.services.export import ExportService
from graphctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  graphctl export snapshot --output backup.json
  graphctl export dot | dot -Tpng -o graph.png
  graphctl export json --output d3.json
  graphctl export graphml --output graph.graphml"""

_output_option = click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (omit to print to stdout).",
)


@click.group(cls=GraphctlGroup, examples=_EXPORT_EXAMPLES)
@click.pass_obj
def export(app: AppContext) -> None:
    """Export the workspace graph in various formats."""


def _deliver(app: AppContext, result: ServiceResult, output_file: Path | None) -> None:
    """Write exported content to *output_file*, or raw to stdout."""
    if not result.ok:
        app.emit(result)
        return

    if output_file is None:
        # Pipe-friendly: raw content to stdout
        click.echo(result.data["content"], nl=False)
        return

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(result.data["content"], encoding="utf-8")
    except OSError as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op=result.op,
                error=ServiceError(
                    code="IO_ERROR",
                    message=f"Cannot write {output_file}: {exc}",
                    detail={"path": str(output_file)},
                ),
            )
        )
        return

    # Emit summary (without content) for the renderer
    app.emit(
        ServiceResult(
            ok=True,
            op=result.op,
            data={
                "format": result.data["format"],
                "output_file": str(output_file),
                "node_count": result.data["node_count"],
                "edge_count": result.data["edge_count"],
            },
            meta=result.meta,
        )
    )


@export.command(
    examples="""\
  graphctl export snapshot
  graphctl export snapshot --output backup.json"""
)
@_output_option
@click.pass_obj
def snapshot(app: AppContext, output_file: Path | None) -> None:
    """Export the canonical snapshot JSON (re-loadable with 'graphctl load')."""
    service = ExportService(app.workspace)
    _deliver(app, service.export_snapshot(indent=app.settings.workspace.indent), output_file)


@export.command(
    examples="""\
  graphctl export dot
  graphctl export dot | dot -Tsvg -o graph.svg"""
)
@_output_option
@click.pass_obj
def dot(app: AppContext, output_file: Path | None) -> None:
    """Export Graphviz DOT."""
    _deliver(app, ExportService(app.workspace).export_graph(fmt="dot"), output_file)


@export.command(
    name="json",
    examples="""\
  graphctl export json --output d3.json"""
)
@_output_option
@click.pass_obj
def json_cmd(app: AppContext, output_file: Path | None) -> None:
    """Export D3-compatible node/link JSON."""
    _deliver(app, ExportService(app.workspace).export_graph(fmt="json"), output_file)


@export.command(
    examples="""\
  graphctl export graphml --output graph.graphml"""
)
@_output_option
@click.pass_obj
def graphml(app: AppContext, output_file: Path | None) -> None:
    """Export GraphML (via networkx)."""
    _deliver(app, ExportService(app.workspace).export_graph(fmt="graphml"), output_file)

"""Root CLI group for graphctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from graphctl import __version__
from graphctl.commands import register_commands
from graphctl.commands._context import AppContext
from graphctl.config.settings import GraphctlSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="graphctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (ids only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-f",
    "--file",
    "graph_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Workspace snapshot file (default: [workspace] file in graphctl.toml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    graph_file: Path | None,
) -> None:
    """graphctl — build and analyze graphs from the command line."""
    ctx.ensure_object(dict)
    # Unset boolean flags are passed as None so env and TOML values still apply.
    settings = GraphctlSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        graph_file=graph_file,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""Subcommand modules for graphctl.

:func:`register_commands` imports lazily so ``graphctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the four command groups and two standalone commands."""
    # --- Groups ---
    from graphctl.commands.analyze import analyze
    from graphctl.commands.edge import edge
    from graphctl.commands.export import export
    from graphctl.commands.node import node

    cli.add_command(node)
    cli.add_command(edge)
    cli.add_command(analyze)
    cli.add_command(export)

    # --- Standalone commands ---
    from graphctl.commands.clear import clear
    from graphctl.commands.load import load

    cli.add_command(load)
    cli.add_command(clear)

"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Provides the lazily loaded workspace, service
factories configured from settings, and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from graphctl.algorithms import SearchBudget
    from graphctl.config.settings import GraphctlSettings
    from graphctl.infrastructure.workspace import Workspace
    from graphctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace file is read on first use, so ``--help``, ``--examples``
    and argument errors never touch it.
    """

    def __init__(self, settings: GraphctlSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from graphctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from graphctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def workspace(self) -> Workspace:
        """The workspace, with its snapshot loaded.

        A missing file is an empty graph; an unreadable or malformed one is
        reported as an error result and exits with code 1.
        """
        if self._workspace is None:
            from graphctl.infrastructure.workspace import Workspace, WorkspaceError
            from graphctl.services.result import ServiceError, ServiceResult

            workspace = Workspace.from_settings(self.settings)
            try:
                workspace.store  # noqa: B018
            except WorkspaceError as exc:
                self.emit(
                    ServiceResult(
                        ok=False,
                        op="load_workspace",
                        error=ServiceError(
                            code=exc.code, message=str(exc), detail={"path": str(exc.path)}
                        ),
                    )
                )
            for edge_id in workspace.skipped_edges:
                click.echo(f"WARNING: skipped edge {edge_id}: endpoint not found", err=True)
            self._workspace = workspace
        return self._workspace

    def search_budget(
        self,
        *,
        max_steps: int | None = None,
        timeout_seconds: float | None = None,
    ) -> SearchBudget:
        """Budget from explicit flags, falling back to the ``[search]`` section."""
        from graphctl.algorithms import SearchBudget

        search = self.settings.search
        return SearchBudget(
            max_steps=max_steps if max_steps is not None else search.max_steps,
            timeout_seconds=(
                timeout_seconds if timeout_seconds is not None else search.timeout_seconds
            ),
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the lazily created Workspace and the single
place where results are written and mapped to exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dagkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dagkit.config.settings import DagSettings
    from dagkit.infrastructure.workspace import Workspace
    from dagkit.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DagSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from dagkit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """The workspace (created on first access)."""
        if self._workspace is None:
            from dagkit.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult and apply exit semantics.

        * Success: stdout, normal return. Warnings go to stderr in human
          mode so they don't pollute piped output.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

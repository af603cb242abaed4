"""Subcommand modules for dagkit.

register_commands() imports command modules lazily so ``dagkit --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dagkit.commands.analyze import check, cycles, deps, sort
    from dagkit.commands.diagram import diagram

    cli.add_command(check)
    cli.add_command(cycles)
    cli.add_command(sort)
    cli.add_command(deps)
    cli.add_command(diagram)

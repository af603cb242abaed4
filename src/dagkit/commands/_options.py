"""Shared Click decorators for dagkit commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

type _Decorator = Callable[[Callable[..., Any]], Callable[..., Any]]


def examples_option(examples: str) -> _Decorator:
    """Add an eager ``--examples`` flag that prints *examples* and exits."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


def graph_file_argument() -> _Decorator:
    """The positional FILE argument every analysis command takes.

    Existence is checked by the loader, not Click, so a missing file is
    reported through the normal NOT_FOUND error result.
    """
    return click.argument("graph_file", metavar="FILE", type=click.Path(path_type=Path))

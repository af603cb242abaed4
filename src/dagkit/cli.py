"""Root CLI group for dagkit with global flags and command registration."""

from __future__ import annotations

import click

from dagkit import __version__
from dagkit.commands import register_commands
from dagkit.commands._context import AppContext
from dagkit.commands._options import examples_option
from dagkit.config.settings import DagSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dagkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (node IDs only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@examples_option(
    """\
  dagkit check graph.yaml
  dagkit sort graph.yaml
  dagkit deps graph.yaml orders
  dagkit diagram graph.yaml -o graph.puml"""
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """dagkit — cycle checks, topological order, and diagrams for dependency graphs."""
    settings = DagSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""Analysis commands: check, cycles, sort, deps."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dagkit.commands._options import examples_option, graph_file_argument
from dagkit.services.graph import GraphService

if TYPE_CHECKING:
    from dagkit.commands._context import AppContext


@click.command()
@examples_option(
    """\
  dagkit check graph.yaml
  dagkit check graph.json --strict
  dagkit --json check graph.toml"""
)
@graph_file_argument()
@click.option("--strict", is_flag=True, help="Exit 1 if the graph has a cycle.")
@click.pass_obj
def check(app: AppContext, graph_file: Path, strict: bool) -> None:
    """Check a graph for cycles, duplicate IDs, and dangling edges."""
    result = GraphService(app.workspace).check(graph_file)
    app.emit(result)
    if strict and result.data.get("cyclical"):
        raise SystemExit(1)


@click.command()
@examples_option(
    """\
  dagkit cycles graph.yaml
  dagkit -q cycles graph.yaml"""
)
@graph_file_argument()
@click.pass_obj
def cycles(app: AppContext, graph_file: Path) -> None:
    """List cycles, one per depth-first root that reaches one."""
    app.emit(GraphService(app.workspace).cycles(graph_file))


@click.command()
@examples_option(
    """\
  dagkit sort graph.yaml
  dagkit -q sort graph.json > order.txt
  DAGKIT_SORT__REQUIRE_ACYCLIC=false dagkit sort graph.yaml"""
)
@graph_file_argument()
@click.pass_obj
def sort(app: AppContext, graph_file: Path) -> None:
    """Print nodes in topological order."""
    app.emit(GraphService(app.workspace).sort(graph_file))


@click.command()
@examples_option(
    """\
  dagkit deps graph.yaml orders
  dagkit -q deps graph.yaml orders
  dagkit --json deps graph.json customers"""
)
@graph_file_argument()
@click.argument("node_id")
@click.pass_obj
def deps(app: AppContext, graph_file: Path, node_id: str) -> None:
    """Show the nodes before and after NODE_ID in topological order.

    With --quiet, prints dependency IDs, a blank line, then dependent IDs.
    """
    app.emit(GraphService(app.workspace).deps(graph_file, node_id))

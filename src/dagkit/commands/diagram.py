"""Diagram command: PlantUML export."""

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
  dagkit diagram graph.yaml
  dagkit diagram graph.yaml -o docs/graph.puml"""
)
@graph_file_argument()
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the diagram to a file instead of stdout.",
)
@click.pass_obj
def diagram(app: AppContext, graph_file: Path, output: Path | None) -> None:
    """Export the graph as a PlantUML diagram."""
    app.emit(GraphService(app.workspace).diagram(graph_file, output=output))

"""Workspace — settings plus the graph files opened under them.

The single object services receive at construction time. It owns one
GraphEngine per resolved file path and decides how nodes are identified
and ordered, based on the ``[graph]`` config section.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from dagkit.domain.compare import compare_by, declaration_order
from dagkit.domain.graph import NodeComparator
from dagkit.infrastructure.graph.document import GraphDocument, NodeSpec
from dagkit.infrastructure.graph.engine import GraphEngine

if TYPE_CHECKING:
    from dagkit.config.settings import DagSettings


def node_id(node: NodeSpec) -> str:
    """Identity function for document nodes."""
    return node.id


class Workspace:
    """Settings-bound access to graph files."""

    def __init__(self, settings: DagSettings) -> None:
        self.settings = settings
        self._engines: dict[Path, GraphEngine] = {}

    def engine(self, path: Path | str) -> GraphEngine:
        """Return the (cached) engine for *path*, relative to the CWD."""
        resolved = Path(path).expanduser().resolve()
        engine = self._engines.get(resolved)
        if engine is None:
            engine = GraphEngine(resolved)
            self._engines[resolved] = engine
        return engine

    def comparator(self, document: GraphDocument) -> NodeComparator[NodeSpec]:
        """Comparator selected by ``graph.compare``."""
        if self.settings.graph.compare == "id":
            return compare_by(node_id)
        return declaration_order(document.nodes, node_id)

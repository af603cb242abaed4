"""GraphEngine — lazily loaded graph document for one file.

The document is read on first access and cached until ``invalidate()``.
Commands that only print help never touch the file.
"""

from __future__ import annotations

from pathlib import Path

from dagkit.domain.graph import Graph
from dagkit.infrastructure.graph.document import GraphDocument, NodeSpec
from dagkit.infrastructure.graph.loader import load_document


class GraphEngine:
    """Lazy-loading view of a graph file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._document: GraphDocument | None = None
        self._graph: Graph[NodeSpec] | None = None

    @property
    def document(self) -> GraphDocument:
        """Return the document, loading it on first access."""
        if self._document is None:
            self._document = load_document(self.path)
        return self._document

    @property
    def graph(self) -> Graph[NodeSpec]:
        """Return the resolved graph snapshot."""
        if self._graph is None:
            self._graph = self.document.to_graph()
        return self._graph

    def invalidate(self) -> None:
        """Drop the cached document, forcing a reload on next access."""
        self._document = None
        self._graph = None

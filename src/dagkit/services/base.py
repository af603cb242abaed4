"""BaseService — shared plumbing for services that read graph files.

Every service receives a :class:`Workspace` at construction time and opens
graph files through it. Load failures become error ServiceResults here so
operations only deal with successfully loaded graphs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dagkit.infrastructure.graph.loader import GraphLoadError
from dagkit.infrastructure.workspace import node_id
from dagkit.services.depth_first import DepthFirst, depth_first
from dagkit.services.result import ServiceResult

if TYPE_CHECKING:
    from dagkit.infrastructure.graph.document import GraphDocument, NodeSpec
    from dagkit.infrastructure.graph.engine import GraphEngine
    from dagkit.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def check(self, path: Path) -> ServiceResult:
                engine, failure = self._open("check", path)
                if failure is not None:
                    return failure
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _open(
        self, op: str, path: Path | str
    ) -> tuple[GraphEngine, None] | tuple[None, ServiceResult]:
        """Load the graph at *path*, or return the error result for *op*."""
        engine = self._workspace.engine(path)
        try:
            engine.graph  # noqa: B018 — force the lazy load
        except GraphLoadError as exc:
            logger.debug("Load failed for %s", exc.path, exc_info=True)
            return None, ServiceResult.failure(op, exc.code, str(exc), path=str(exc.path))
        return engine, None

    def _algorithms(self, document: GraphDocument) -> DepthFirst[NodeSpec]:
        """DepthFirst bundle configured by the ``[graph]`` section."""
        return depth_first(
            node_id,
            self._workspace.comparator(document),
            index_edges=self._workspace.settings.graph.index_edges,
        )

    @staticmethod
    def _document_warnings(document: GraphDocument) -> list[str]:
        """Non-fatal anomalies that can change traversal results."""
        warnings: list[str] = []
        for dup in document.duplicate_ids():
            warnings.append(f"Node '{dup}' is declared more than once")
        for dangling in document.dangling_endpoints():
            warnings.append(f"Edge endpoint '{dangling}' is not a declared node")
        return warnings

    @staticmethod
    def _meta(engine: GraphEngine, **extra: Any) -> dict[str, Any]:
        return {"path": str(engine.path), **extra}

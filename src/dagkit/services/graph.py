"""GraphService — cycle checks, ordering, and diagrams for graph files.

Wraps the depth-first algorithms for one file at a time and shapes their
results into ServiceResult payloads keyed by node ID.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dagkit.domain.graph import CycleRecord, Edge
from dagkit.domain.plantuml import EdgeLabel, NodeLabel, plantuml_diagram
from dagkit.infrastructure.graph.document import NodeSpec
from dagkit.infrastructure.workspace import node_id
from dagkit.services.base import BaseService
from dagkit.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _cycle_payload(record: CycleRecord[NodeSpec]) -> dict[str, Any]:
    return {
        "nodes": [n.id for n in record.cycle_nodes],
        "edges": [[e.source.id, e.target.id] for e in record.cycle_edges],
    }


def _item(node: NodeSpec) -> dict[str, Any]:
    return {"id": node.id, "label": node.label or ""}


class GraphService(BaseService):
    """Graph file analysis operations."""

    # ------------------------------------------------------------------
    # check — acyclicity plus document anomalies
    # ------------------------------------------------------------------

    def check(self, path: Path | str) -> ServiceResult:
        """Report whether the graph is cyclical, with per-node issues.

        Duplicate IDs and dangling endpoints are warnings; a cycle is an
        error-severity issue. The result itself is always ok; callers
        decide whether errors should fail the run.
        """
        engine, failure = self._open("check", path)
        if failure is not None:
            return failure

        document, graph = engine.document, engine.graph
        cyclical = self._algorithms(document).is_cyclical(graph)

        issues: list[dict[str, Any]] = []
        for dup in document.duplicate_ids():
            issues.append(
                {
                    "category": "duplicate_id",
                    "severity": "warning",
                    "node_id": dup,
                    "message": "Declared more than once; occurrences merge during traversal",
                }
            )
        for dangling in document.dangling_endpoints():
            issues.append(
                {
                    "category": "dangling_endpoint",
                    "severity": "warning",
                    "node_id": dangling,
                    "message": "Edge endpoint is not a declared node",
                }
            )
        if cyclical:
            issues.append(
                {
                    "category": "cycle",
                    "severity": "error",
                    "node_id": None,
                    "message": "Graph contains a cycle (run 'dagkit cycles' for details)",
                }
            )

        logger.debug("Checked %s: cyclical=%s, %d issues", engine.path, cyclical, len(issues))
        return ServiceResult(
            ok=True,
            op="check",
            data={
                "cyclical": cyclical,
                "nodes": len(graph.nodes),
                "edges": len(graph.edges),
                "count": len(issues),
                "issues": issues,
            },
            meta=self._meta(engine),
        )

    # ------------------------------------------------------------------
    # cycles — one record per DFS root
    # ------------------------------------------------------------------

    def cycles(self, path: Path | str) -> ServiceResult:
        """List discovered cycles as ID paths."""
        engine, failure = self._open("cycles", path)
        if failure is not None:
            return failure

        records = self._algorithms(engine.document).cycles(engine.graph)
        payload = [_cycle_payload(r) for r in records]
        logger.debug("Found %d cycles in %s", len(payload), engine.path)
        return ServiceResult(
            ok=True,
            op="cycles",
            data={"count": len(payload), "cycles": payload},
            warnings=self._document_warnings(engine.document),
            meta=self._meta(engine),
        )

    # ------------------------------------------------------------------
    # sort — topological order
    # ------------------------------------------------------------------

    def sort(self, path: Path | str) -> ServiceResult:
        """Topologically order the graph's nodes.

        With ``sort.require_acyclic`` (the default) a cyclic graph is an
        error, since the order would be meaningless.
        """
        engine, failure = self._open("sort", path)
        if failure is not None:
            return failure

        dag = self._algorithms(engine.document)
        graph = engine.graph

        if self._workspace.settings.sort.require_acyclic:
            records = dag.cycles(graph)
            if records:
                return ServiceResult.failure(
                    "sort",
                    "CYCLIC_GRAPH",
                    "Graph contains a cycle; no topological order exists",
                    cycle=_cycle_payload(records[0]),
                )

        order = dag.topological_sort(graph)
        logger.debug("Sorted %s: %d nodes", engine.path, len(order))
        return ServiceResult(
            ok=True,
            op="sort",
            data={
                "count": len(order),
                "order": [n.id for n in order],
                "items": [_item(n) for n in order],
            },
            warnings=self._document_warnings(engine.document),
            meta=self._meta(engine),
        )

    # ------------------------------------------------------------------
    # deps — dependencies / dependents of one node
    # ------------------------------------------------------------------

    def deps(self, path: Path | str, target_id: str) -> ServiceResult:
        """Partition the graph around *target_id*.

        An undeclared target is still partitioned (by comparator order
        alone) and produces a warning rather than an error.
        """
        engine, failure = self._open("deps", path)
        if failure is not None:
            return failure

        document = engine.document
        warnings = self._document_warnings(document)
        target = next((n for n in document.nodes if n.id == target_id), None)
        if target is None:
            warnings.append(f"Node '{target_id}' is not declared; partition uses node order only")
            target = NodeSpec(id=target_id)

        partition = self._algorithms(document).deps(engine.graph, target)
        return ServiceResult(
            ok=True,
            op="deps",
            data={"id": target_id, **partition.as_dict(node_id)},
            warnings=warnings,
            meta=self._meta(engine),
        )

    # ------------------------------------------------------------------
    # diagram — PlantUML text
    # ------------------------------------------------------------------

    def diagram(self, path: Path | str, *, output: Path | None = None) -> ServiceResult:
        """Render the graph as PlantUML, optionally writing it to *output*."""
        engine, failure = self._open("diagram", path)
        if failure is not None:
            return failure

        cfg = self._workspace.settings.diagram
        edge_features = {(e.source, e.target): e.features for e in engine.document.edges}

        def node_label(node: NodeSpec) -> NodeLabel:
            if cfg.use_labels and node.label:
                text = f'{cfg.element} "{node.label}" as {node.id}'
            else:
                text = f"{cfg.element} {node.id}"
            return NodeLabel(text=text, features=node.features or cfg.node_features or None)

        def edge_label(edge: Edge[NodeSpec]) -> EdgeLabel:
            features = edge_features.get((edge.source.id, edge.target.id))
            return EdgeLabel(
                from_text=edge.source.id,
                to_text=edge.target.id,
                features=features or cfg.edge_features or None,
            )

        text = plantuml_diagram(engine.graph, node=node_label, edge=edge_label)
        data: dict[str, Any] = {
            "nodes": len(engine.graph.nodes),
            "edges": len(engine.graph.edges),
        }
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text + "\n", encoding="utf-8")
            data["path"] = str(output)
        else:
            data["diagram"] = text

        return ServiceResult(
            ok=True,
            op="diagram",
            data=data,
            warnings=self._document_warnings(engine.document),
            meta=self._meta(engine),
        )

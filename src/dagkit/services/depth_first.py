"""DepthFirst — the traversal algorithms bound to one identity and comparator.

This is the object most callers should use::

    dag = depth_first(lambda n: n.id, compare_by(lambda n: n.id))
    if not dag.is_cyclical(graph):
        order = dag.topological_sort(graph)

The module-level functions in :mod:`dagkit.services.traversal` and
:mod:`dagkit.services.dependencies` remain available when more
flexibility is needed.
"""

from __future__ import annotations

from dataclasses import dataclass

from dagkit.domain.graph import (
    CycleRecord,
    Dependencies,
    Graph,
    NodeComparator,
    NodeIdentitySupplier,
)
from dagkit.services.dependencies import dependencies
from dagkit.services.traversal import find_cycles, is_cyclical, topological_sort


@dataclass(frozen=True)
class DepthFirst[N]:
    """Depth-first algorithm bundle over nodes of one type."""

    identity: NodeIdentitySupplier[N]
    compare: NodeComparator[N]
    index_edges: bool = False

    def is_cyclical(self, graph: Graph[N]) -> bool:
        return is_cyclical(graph, self.identity, self.compare, index_edges=self.index_edges)

    def cycles(self, graph: Graph[N]) -> list[CycleRecord[N]]:
        return find_cycles(graph, self.identity, self.compare, index_edges=self.index_edges)

    def topological_sort(self, graph: Graph[N]) -> list[N]:
        return topological_sort(graph, self.identity, self.compare, index_edges=self.index_edges)

    def deps(self, graph: Graph[N], node: N) -> Dependencies[N]:
        return dependencies(
            graph,
            self.identity,
            self.compare,
            node,
            sort=lambda g, ident, cmp: topological_sort(
                g, ident, cmp, index_edges=self.index_edges
            ),
        )


def depth_first[N](
    identity: NodeIdentitySupplier[N],
    compare: NodeComparator[N],
    *,
    index_edges: bool = False,
) -> DepthFirst[N]:
    """Bind *identity* and *compare* once for all four operations."""
    return DepthFirst(identity=identity, compare=compare, index_edges=index_edges)

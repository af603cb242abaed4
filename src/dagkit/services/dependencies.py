"""Dependency partitioning over a topological order.

Given a target node, every other node is placed on one side of it:
nodes before the target in a topological order are its dependencies,
nodes after it are its dependents.

Nodes the sort did not place around the target (including every node
when the target itself is not in the sort) fall back to the comparator:
``compare(node, target) < 0`` is a dependency, ``> 0`` a dependent, and
``== 0`` is neither. A missing target is therefore not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable

from dagkit.domain.graph import Dependencies, Graph, NodeComparator, NodeIdentitySupplier
from dagkit.services.traversal import topological_sort

logger = logging.getLogger(__name__)

type TopologicalSortSupplier[N] = Callable[
    [Graph[N], NodeIdentitySupplier[N], NodeComparator[N]], list[N]
]


def dependencies[N](
    graph: Graph[N],
    identity: NodeIdentitySupplier[N],
    compare: NodeComparator[N],
    target: N,
    *,
    sort: TopologicalSortSupplier[N] = topological_sort,
) -> Dependencies[N]:
    """Partition *graph*'s nodes into dependencies and dependents of *target*.

    Args:
        graph: The graph to partition.
        identity: Node key function.
        compare: Three-way comparator agreeing with *identity*.
        target: The node to partition around.
        sort: Topological sort to position nodes with. Both sides keep
            the order this function returns.
    """
    order = sort(graph, identity, compare)
    position: dict[Hashable, int] = {identity(node): i for i, node in enumerate(order)}

    before: list[N] = []
    after: list[N] = []
    placed: set[Hashable] = set()

    target_index = position.get(identity(target))
    if target_index is not None:
        for node in order[:target_index]:
            placed.add(identity(node))
            before.append(node)
        for node in order[target_index + 1 :]:
            placed.add(identity(node))
            after.append(node)
    else:
        logger.debug("Target %r not in topological order; comparing all nodes", identity(target))

    for node in graph.nodes:
        if identity(node) in placed:
            continue
        ordering = compare(node, target)
        if ordering < 0:
            before.append(node)
        elif ordering > 0:
            after.append(node)

    return Dependencies(dependencies=tuple(before), dependents=tuple(after))

"""Comparator builders for the traversal algorithms.

Both builders return three-way comparators whose zero result agrees
with node identity, which the traversal engine relies on when it
matches edges to nodes.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any

from dagkit.domain.graph import NodeComparator, NodeIdentitySupplier


def compare_by[N](key: Callable[[N], Any]) -> NodeComparator[N]:
    """Comparator ordering nodes by ``key(node)``.

    Keys must be totally ordered and unique per node.
    """

    def compare(a: N, b: N) -> int:
        ka, kb = key(a), key(b)
        if ka < kb:
            return -1
        if ka > kb:
            return 1
        return 0

    return compare


def declaration_order[N](
    nodes: Iterable[N],
    identity: NodeIdentitySupplier[N],
) -> NodeComparator[N]:
    """Comparator ranking nodes by their first position in *nodes*.

    Nodes absent from *nodes* rank after every declared node; two
    undeclared nodes are ordered by ``str(identity(node))``.
    """
    rank: dict[Hashable, int] = {}
    for position, node in enumerate(nodes):
        rank.setdefault(identity(node), position)
    unranked = max(rank.values(), default=-1) + 1

    def key(node: N) -> tuple[int, str]:
        node_id = identity(node)
        position = rank.get(node_id)
        if position is None:
            return (unranked, str(node_id))
        return (position, "")

    return compare_by(key)

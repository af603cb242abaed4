"""Graph value types — nodes, edges, and algorithm results.

A node is any caller-defined object; the library never inspects it.
Identity and ordering come from functions supplied alongside the graph:

* ``identity(node) -> NodeID`` — a stable, hashable key.
* ``compare(a, b) -> int`` — a three-way comparator. Its zero result is
  used to select a node's outgoing edges, so ``compare(a, b) == 0`` must
  hold exactly when ``identity(a) == identity(b)``.

All types are frozen. A graph is read, never mutated, by every operation.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any

type NodeIdentitySupplier[N] = Callable[[N], Hashable]
type NodeComparator[N] = Callable[[N, N], int]


@dataclass(frozen=True, slots=True)
class Edge[N]:
    """Directed edge: *source* depends on *target*."""

    source: N
    target: N


@dataclass(frozen=True, slots=True)
class Graph[N]:
    """Immutable snapshot of nodes and edges.

    Edge endpoints are expected to appear in *nodes* but this is not
    checked. Node order seeds the depth-first start order.
    """

    nodes: tuple[N, ...] = ()
    edges: tuple[Edge[N], ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable; store tuples so the snapshot can't drift.
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def from_pairs(cls, nodes: Iterable[N], pairs: Iterable[tuple[N, N]]) -> Graph[N]:
        """Build a graph from ``(source, target)`` tuples."""
        return cls(nodes=tuple(nodes), edges=tuple(Edge(s, t) for s, t in pairs))


@dataclass(frozen=True, slots=True)
class CycleRecord[N]:
    """One discovered cycle: the DFS path at the moment a back-edge was found.

    ``cycle_edges`` ends with the back-edge. The path starts at the DFS
    root, so it is not necessarily minimal.
    """

    cycle_nodes: tuple[N, ...] = ()
    cycle_edges: tuple[Edge[N], ...] = ()


@dataclass(frozen=True, slots=True)
class Dependencies[N]:
    """Partition of a graph's nodes around a target node."""

    dependencies: tuple[N, ...] = field(default_factory=tuple)
    dependents: tuple[N, ...] = field(default_factory=tuple)

    def as_dict(self, key: Callable[[N], Any]) -> dict[str, list[Any]]:
        """Project both sides through *key* (e.g. an identity function)."""
        return {
            "dependencies": [key(n) for n in self.dependencies],
            "dependents": [key(n) for n in self.dependents],
        }

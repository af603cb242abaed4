"""Depth-first traversal — cycle detection, cycle enumeration, topological sort.

Every algorithm walks an explicit stack of ``_Frame`` objects instead of
recursing, so graph depth is bounded by memory rather than the interpreter's
recursion limit. Visitation order matches a recursive DFS exactly: roots in
``graph.nodes`` order, neighbours in ``graph.edges`` order.

A node's outgoing edges are the edges whose ``source`` compares equal to
it (``compare(edge.source, node) == 0``), found by scanning the full edge
list — O(V·E) overall. Pass ``index_edges=True`` to group edges by
``identity(edge.source)`` up front instead; neighbour order is unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass

from dagkit.domain.graph import (
    CycleRecord,
    Edge,
    Graph,
    NodeComparator,
    NodeIdentitySupplier,
)

logger = logging.getLogger(__name__)

type _EdgeSelector[N] = Callable[[N], Iterable[Edge[N]]]


@dataclass(slots=True)
class _Frame[N]:
    """One level of the DFS: a node and its pending outgoing edges."""

    node: N
    node_id: Hashable
    edges: Iterator[Edge[N]]


def outgoing_edges[N](
    graph: Graph[N],
    identity: NodeIdentitySupplier[N],
    compare: NodeComparator[N],
    *,
    index_edges: bool = False,
) -> _EdgeSelector[N]:
    """Return a function yielding a node's outgoing edges in edge order."""
    if not index_edges:

        def scan(node: N) -> Iterator[Edge[N]]:
            for edge in graph.edges:
                if compare(edge.source, node) == 0:
                    yield edge

        return scan

    index: dict[Hashable, list[Edge[N]]] = {}
    for edge in graph.edges:
        index.setdefault(identity(edge.source), []).append(edge)

    def lookup(node: N) -> Iterable[Edge[N]]:
        return index.get(identity(node), ())

    return lookup


# ---------------------------------------------------------------------------
# is_cyclical
# ---------------------------------------------------------------------------


def is_cyclical[N](
    graph: Graph[N],
    identity: NodeIdentitySupplier[N],
    compare: NodeComparator[N],
    *,
    index_edges: bool = False,
) -> bool:
    """Return True if any depth-first walk meets a back-edge.

    A self-loop counts as a cycle of length one.
    """
    edges_of = outgoing_edges(graph, identity, compare, index_edges=index_edges)
    visited: set[Hashable] = set()

    for root in graph.nodes:
        root_id = identity(root)
        if root_id in visited:
            continue

        visited.add(root_id)
        on_path: set[Hashable] = {root_id}
        frames = [_Frame(root, root_id, iter(edges_of(root)))]

        while frames:
            frame = frames[-1]
            edge = next(frame.edges, None)
            if edge is None:
                frames.pop()
                on_path.discard(frame.node_id)
                continue

            neighbour_id = identity(edge.target)
            if neighbour_id not in visited:
                visited.add(neighbour_id)
                on_path.add(neighbour_id)
                frames.append(_Frame(edge.target, neighbour_id, iter(edges_of(edge.target))))
            elif neighbour_id in on_path:
                logger.debug("Back-edge %r -> %r", frame.node_id, neighbour_id)
                return True

    return False


# ---------------------------------------------------------------------------
# find_cycles
# ---------------------------------------------------------------------------


def find_cycles[N](
    graph: Graph[N],
    identity: NodeIdentitySupplier[N],
    compare: NodeComparator[N],
    *,
    index_edges: bool = False,
) -> list[CycleRecord[N]]:
    """Return one cycle record per DFS root whose walk meets a back-edge.

    The record is the live path (nodes from the root down to the current
    node, and the edges between them ending with the back-edge). The walk
    from that root stops at the first back-edge, so further cycles reachable
    from the same root are not reported separately.
    """
    edges_of = outgoing_edges(graph, identity, compare, index_edges=index_edges)
    visited: set[Hashable] = set()
    records: list[CycleRecord[N]] = []

    for root in graph.nodes:
        root_id = identity(root)
        if root_id in visited:
            continue

        visited.add(root_id)
        on_path: set[Hashable] = {root_id}
        path_nodes: list[N] = [root]
        path_edges: list[Edge[N]] = []
        frames = [_Frame(root, root_id, iter(edges_of(root)))]

        while frames:
            frame = frames[-1]
            edge = next(frame.edges, None)
            if edge is None:
                frames.pop()
                on_path.discard(frame.node_id)
                path_nodes.pop()
                if frames:
                    # Drop the edge the parent followed into this frame.
                    path_edges.pop()
                continue

            path_edges.append(edge)
            neighbour_id = identity(edge.target)
            if neighbour_id not in visited:
                visited.add(neighbour_id)
                on_path.add(neighbour_id)
                path_nodes.append(edge.target)
                frames.append(_Frame(edge.target, neighbour_id, iter(edges_of(edge.target))))
            elif neighbour_id in on_path:
                records.append(CycleRecord(tuple(path_nodes), tuple(path_edges)))
                logger.debug("Cycle under root %r: %d edges", root_id, len(path_edges))
                break
            else:
                path_edges.pop()

    return records


# ---------------------------------------------------------------------------
# topological_sort
# ---------------------------------------------------------------------------


def topological_sort[N](
    graph: Graph[N],
    identity: NodeIdentitySupplier[N],
    compare: NodeComparator[N],
    *,
    index_edges: bool = False,
) -> list[N]:
    """Order nodes so every edge's source precedes its target.

    DFS postorder, reversed. The graph must be acyclic; this is not
    checked, and the order produced for a cyclic graph is unspecified.
    Call :func:`is_cyclical` first when a valid order must be guaranteed.
    """
    edges_of = outgoing_edges(graph, identity, compare, index_edges=index_edges)
    visited: set[Hashable] = set()
    postorder: list[N] = []

    for root in graph.nodes:
        root_id = identity(root)
        if root_id in visited:
            continue

        visited.add(root_id)
        frames = [_Frame(root, root_id, iter(edges_of(root)))]

        while frames:
            frame = frames[-1]
            edge = next(frame.edges, None)
            if edge is None:
                frames.pop()
                postorder.append(frame.node)
                continue

            neighbour_id = identity(edge.target)
            if neighbour_id not in visited:
                visited.add(neighbour_id)
                frames.append(_Frame(edge.target, neighbour_id, iter(edges_of(edge.target))))

    postorder.reverse()
    return postorder

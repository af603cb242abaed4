"""Conversion between NetworkX graphs and dagkit graphs.

NetworkX node keys become node IDs. The optional ``label`` and
``features`` node attributes, and the ``features`` edge attribute, carry
over to the document; all other attributes are dropped.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

import networkx as nx

from dagkit.domain.graph import Graph, NodeIdentitySupplier
from dagkit.infrastructure.graph.document import EdgeSpec, GraphDocument, NodeSpec


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def from_networkx(g: nx.Graph) -> GraphDocument:
    """Build a GraphDocument from a NetworkX graph, in insertion order.

    Undirected graphs contribute each edge once, in the orientation
    NetworkX reports it.
    """
    nodes = [
        NodeSpec(
            id=str(key),
            label=_optional_str(attrs.get("label")),
            features=_optional_str(attrs.get("features")),
        )
        for key, attrs in g.nodes(data=True)
    ]
    edges = [
        EdgeSpec(source=str(u), target=str(v), features=_optional_str(attrs.get("features")))
        for u, v, attrs in g.edges(data=True)
    ]
    return GraphDocument(nodes=nodes, edges=edges)


def to_networkx[N](graph: Graph[N], identity: NodeIdentitySupplier[N]) -> nx.DiGraph:
    """Build a DiGraph keyed by ``identity(node)``.

    Each node keeps the original object under the ``node`` attribute.
    Undeclared edge endpoints are added implicitly by NetworkX.
    """
    g = nx.DiGraph()
    for n in graph.nodes:
        key: Hashable = identity(n)
        g.add_node(key, node=n)
    for e in graph.edges:
        g.add_edge(identity(e.source), identity(e.target))
    return g

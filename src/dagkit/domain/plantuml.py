"""PlantUML text export for any Graph.

Labels come from caller-supplied functions; nothing checks that edge
labels match a declared node line. Nodes are written before edges, each
in input order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from dagkit.domain.graph import Edge, Graph

START_MARKER = "@startuml"
END_MARKER = "@enduml"


@dataclass(frozen=True, slots=True)
class NodeLabel:
    text: str
    features: str | None = None


@dataclass(frozen=True, slots=True)
class EdgeLabel:
    from_text: str
    to_text: str
    features: str | None = None


def _with_features(line: str, features: str | None) -> str:
    return f"{line} {features}" if features else line


def plantuml_diagram[N](
    graph: Graph[N],
    *,
    node: Callable[[N], NodeLabel],
    edge: Callable[[Edge[N]], EdgeLabel],
) -> str:
    """Render *graph* as a ``@startuml ... @enduml`` block."""
    node_lines: list[str] = []
    for n in graph.nodes:
        label = node(n)
        node_lines.append(_with_features(label.text, label.features))

    edge_lines: list[str] = []
    for e in graph.edges:
        label = edge(e)
        edge_lines.append(_with_features(f"{label.from_text} --> {label.to_text}", label.features))

    return "\n".join([START_MARKER, "\n".join(node_lines), "\n".join(edge_lines), END_MARKER])

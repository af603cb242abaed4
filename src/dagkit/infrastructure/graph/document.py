"""GraphDocument — the serialized form of a graph, as read from files.

Sparse contract: a node may be a bare string ID, an edge needs only its
two endpoints. ``from``/``to`` are accepted as aliases of ``source``/``target``.

Documents are validated for shape only. Dangling edge endpoints and
duplicate node IDs are reported, never rejected.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dagkit.domain.graph import Edge, Graph


def _coerce_id(value: Any) -> Any:
    # GraphML/GML and YAML may hand back ints for numeric IDs.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class NodeSpec(BaseModel):
    """A declared node."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str | None = None
    features: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_node_id(cls, value: Any) -> Any:
        return _coerce_id(value)

    @property
    def text(self) -> str:
        return self.label or self.id


class EdgeSpec(BaseModel):
    """A declared edge: *source* depends on *target*."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(validation_alias="from")
    target: str = Field(validation_alias="to")
    features: str | None = None

    @field_validator("source", "target", mode="before")
    @classmethod
    def _coerce_endpoint(cls, value: Any) -> Any:
        return _coerce_id(value)


class GraphDocument(BaseModel):
    """Nodes and edges as declared in a graph file."""

    model_config = ConfigDict(frozen=True)

    nodes: list[NodeSpec] = Field(default_factory=list)
    edges: list[EdgeSpec] = Field(default_factory=list)

    @field_validator("nodes", mode="before")
    @classmethod
    def _expand_bare_ids(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [{"id": str(item)} if isinstance(item, (str, int)) else item for item in value]

    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    def duplicate_ids(self) -> list[str]:
        """IDs declared more than once, in first-seen order."""
        counts = Counter(self.node_ids())
        return [node_id for node_id, count in counts.items() if count > 1]

    def dangling_endpoints(self) -> list[str]:
        """Edge endpoints with no declared node, in first-seen order."""
        declared = set(self.node_ids())
        seen: dict[str, None] = {}
        for e in self.edges:
            for endpoint in (e.source, e.target):
                if endpoint not in declared:
                    seen.setdefault(endpoint, None)
        return list(seen)

    def to_graph(self) -> Graph[NodeSpec]:
        """Resolve edge endpoints to node specs and freeze as a Graph.

        Endpoints resolve to the first node declared with that ID;
        undeclared endpoints become bare ``NodeSpec(id=...)`` values that
        are not added to the node list.
        """
        by_id: dict[str, NodeSpec] = {}
        for n in self.nodes:
            by_id.setdefault(n.id, n)

        def resolve(node_id: str) -> NodeSpec:
            return by_id.get(node_id) or NodeSpec(id=node_id)

        edges = tuple(Edge(resolve(e.source), resolve(e.target)) for e in self.edges)
        return Graph(nodes=tuple(self.nodes), edges=edges)

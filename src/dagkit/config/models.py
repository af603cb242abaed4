"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dagkit.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    # "declared": node order in the file; "id": lexical order of node IDs.
    compare: Literal["declared", "id"] = "declared"
    index_edges: bool = False


class SortConfig(BaseModel):
    """[sort] section."""

    model_config = {"frozen": True}

    require_acyclic: bool = True


class DiagramConfig(BaseModel):
    """[diagram] section."""

    model_config = {"frozen": True}

    # PlantUML element keyword written before each node.
    element: str = "rectangle"
    use_labels: bool = True
    node_features: str = ""
    edge_features: str = ""


class DagConfig(BaseModel):
    """Root config model (all sections)."""

    model_config = {"frozen": True}

    graph: GraphConfig = Field(default_factory=GraphConfig)
    sort: SortConfig = Field(default_factory=SortConfig)
    diagram: DiagramConfig = Field(default_factory=DiagramConfig)

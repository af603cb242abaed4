"""dagkit — depth-first algorithms for dependency graphs.

Cycle detection, cycle enumeration, topological sort and dependency
partitioning over any node type, plus PlantUML export. Callers supply
the node identity and comparator::

    from dagkit import Graph, compare_by, depth_first

    graph = Graph.from_pairs(["a", "b"], [("a", "b")])
    dag = depth_first(str, compare_by(str))
    dag.topological_sort(graph)  # ["a", "b"]
"""

from dagkit.domain.compare import compare_by, declaration_order
from dagkit.domain.graph import CycleRecord, Dependencies, Edge, Graph
from dagkit.domain.plantuml import EdgeLabel, NodeLabel, plantuml_diagram
from dagkit.services.dependencies import dependencies
from dagkit.services.depth_first import DepthFirst, depth_first
from dagkit.services.traversal import find_cycles, is_cyclical, topological_sort

__version__ = "0.1.0"

__all__ = [
    "CycleRecord",
    "Dependencies",
    "DepthFirst",
    "Edge",
    "EdgeLabel",
    "Graph",
    "NodeLabel",
    "__version__",
    "compare_by",
    "declaration_order",
    "dependencies",
    "depth_first",
    "find_cycles",
    "is_cyclical",
    "plantuml_diagram",
    "topological_sort",
]

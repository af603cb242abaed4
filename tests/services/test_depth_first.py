"""Tests for the DepthFirst facade."""

from __future__ import annotations

from dagkit import depth_first
from dagkit.services.dependencies import dependencies
from dagkit.services.depth_first import DepthFirst
from dagkit.services.traversal import find_cycles, is_cyclical, topological_sort
from tests.conftest import DIAMOND, compare, identity, make_graph

CYCLIC = make_graph("RABC", ["R>A", "A>B", "B>C", "C>A"])


class TestDepthFirst:
    def test_factory_binds_functions(self) -> None:
        dag = depth_first(identity, compare)
        assert isinstance(dag, DepthFirst)
        assert dag.identity is identity
        assert dag.compare is compare
        assert dag.index_edges is False

    def test_matches_module_functions(self) -> None:
        dag = depth_first(identity, compare)
        for g in (DIAMOND, CYCLIC):
            assert dag.is_cyclical(g) == is_cyclical(g, identity, compare)
            assert dag.cycles(g) == find_cycles(g, identity, compare)
            assert dag.topological_sort(g) == topological_sort(g, identity, compare)
        assert dag.deps(DIAMOND, "B") == dependencies(DIAMOND, identity, compare, "B")

    def test_indexed_bundle_same_results(self) -> None:
        plain = depth_first(identity, compare)
        indexed = depth_first(identity, compare, index_edges=True)
        for g in (DIAMOND, CYCLIC):
            assert indexed.is_cyclical(g) == plain.is_cyclical(g)
            assert indexed.cycles(g) == plain.cycles(g)
            assert indexed.topological_sort(g) == plain.topological_sort(g)
            for node in g.nodes:
                assert indexed.deps(g, node) == plain.deps(g, node)

    def test_workflow_check_then_sort(self) -> None:
        dag = depth_first(identity, compare)
        assert not dag.is_cyclical(DIAMOND)
        assert dag.topological_sort(DIAMOND)[0] == "A"
        assert dag.is_cyclical(CYCLIC)
        [record] = dag.cycles(CYCLIC)
        assert record.cycle_nodes == ("R", "A", "B", "C")

"""Tests for depth-first traversal: is_cyclical, find_cycles, topological_sort."""

from __future__ import annotations

import pytest

from dagkit.domain.compare import compare_by
from dagkit.domain.graph import CycleRecord, Edge, Graph
from dagkit.services.traversal import (
    find_cycles,
    is_cyclical,
    outgoing_edges,
    topological_sort,
)
from tests.conftest import DIAMOND, assert_topological, compare, identity, make_graph

# ---------------------------------------------------------------------------
# outgoing_edges
# ---------------------------------------------------------------------------


class TestOutgoingEdges:
    def test_scan_matches_by_comparator_in_edge_order(self) -> None:
        g = make_graph("ABC", ["A>C", "B>C", "A>B"])
        edges_of = outgoing_edges(g, identity, compare)
        assert list(edges_of("A")) == [Edge("A", "C"), Edge("A", "B")]
        assert list(edges_of("C")) == []

    def test_index_keeps_edge_order(self) -> None:
        g = make_graph("ABC", ["A>C", "B>C", "A>B"])
        edges_of = outgoing_edges(g, identity, compare, index_edges=True)
        assert list(edges_of("A")) == [Edge("A", "C"), Edge("A", "B")]
        assert list(edges_of("Z")) == []


# ---------------------------------------------------------------------------
# is_cyclical
# ---------------------------------------------------------------------------


class TestIsCyclical:
    def test_empty_graph(self) -> None:
        assert is_cyclical(Graph(), identity, compare) is False

    def test_chain_is_acyclic(self) -> None:
        g = make_graph("ABC", ["A>B", "B>C"])
        assert is_cyclical(g, identity, compare) is False

    def test_diamond_is_acyclic(self) -> None:
        # D is reached twice but never while on the current path.
        assert is_cyclical(DIAMOND, identity, compare) is False

    def test_self_loop(self) -> None:
        g = make_graph("A", ["A>A"])
        assert is_cyclical(g, identity, compare) is True

    def test_three_cycle(self) -> None:
        g = make_graph("ABC", ["A>B", "B>C", "C>A"])
        assert is_cyclical(g, identity, compare) is True

    def test_cycle_reached_from_later_root(self) -> None:
        g = make_graph("XAB", ["A>B", "B>A"])
        assert is_cyclical(g, identity, compare) is True

    def test_dangling_endpoint_is_traversed(self) -> None:
        g = Graph(nodes=("A",), edges=(Edge("A", "X"), Edge("X", "A")))
        assert is_cyclical(g, identity, compare) is True

    def test_finished_root_not_on_later_path(self) -> None:
        g = make_graph("ABC", ["A>B", "C>A"])
        assert is_cyclical(g, identity, compare) is False

    def test_indexed_agrees(self) -> None:
        g = make_graph("ABCD", ["A>B", "B>C", "C>D", "D>B"])
        assert is_cyclical(g, identity, compare, index_edges=True) is True
        assert is_cyclical(DIAMOND, identity, compare, index_edges=True) is False


# ---------------------------------------------------------------------------
# find_cycles
# ---------------------------------------------------------------------------


class TestFindCycles:
    def test_acyclic_has_no_records(self) -> None:
        assert find_cycles(DIAMOND, identity, compare) == []

    def test_self_loop_record(self) -> None:
        g = make_graph("A", ["A>A"])
        assert find_cycles(g, identity, compare) == [
            CycleRecord(cycle_nodes=("A",), cycle_edges=(Edge("A", "A"),))
        ]

    def test_three_cycle_closes_on_root(self) -> None:
        g = make_graph("ABC", ["A>B", "B>C", "C>A"])
        [record] = find_cycles(g, identity, compare)
        assert record.cycle_nodes == ("A", "B", "C")
        assert record.cycle_edges == (Edge("A", "B"), Edge("B", "C"), Edge("C", "A"))
        assert record.cycle_edges[-1].target == record.cycle_edges[0].source

    def test_record_includes_path_from_root(self) -> None:
        g = make_graph("RAB", ["R>A", "A>B", "B>A"])
        [record] = find_cycles(g, identity, compare)
        assert record.cycle_nodes == ("R", "A", "B")
        assert record.cycle_edges == (Edge("R", "A"), Edge("A", "B"), Edge("B", "A"))

    def test_explored_sibling_branch_is_dropped(self) -> None:
        g = make_graph("ABCD", ["A>B", "A>C", "C>D", "D>C"])
        [record] = find_cycles(g, identity, compare)
        assert record.cycle_nodes == ("A", "C", "D")
        assert record.cycle_edges == (Edge("A", "C"), Edge("C", "D"), Edge("D", "C"))

    def test_one_record_per_root(self) -> None:
        g = make_graph("RABCD", ["R>A", "A>B", "B>A", "R>C", "C>D", "D>C"])
        records = find_cycles(g, identity, compare)
        # The walk from R stops at A<->B; C<->D is found from root C.
        assert [r.cycle_nodes for r in records] == [("R", "A", "B"), ("C", "D")]

    def test_path_state_does_not_leak_between_roots(self) -> None:
        # C reaches A, which an earlier root already finished; not a cycle.
        g = make_graph("ABC", ["A>B", "B>A", "C>A"])
        records = find_cycles(g, identity, compare)
        assert [r.cycle_nodes for r in records] == [("A", "B")]

    def test_second_cycle_under_same_root_not_reported(self) -> None:
        g = make_graph("ABC", ["A>B", "B>A", "B>C", "C>B"])
        records = find_cycles(g, identity, compare)
        assert len(records) == 1
        assert records[0].cycle_edges == (Edge("A", "B"), Edge("B", "A"))

    def test_indexed_records_identical(self) -> None:
        g = make_graph("RABCD", ["R>A", "A>B", "B>A", "R>C", "C>D", "D>C"])
        assert find_cycles(g, identity, compare, index_edges=True) == find_cycles(
            g, identity, compare
        )


# ---------------------------------------------------------------------------
# topological_sort
# ---------------------------------------------------------------------------


class TestTopologicalSort:
    def test_chain(self) -> None:
        g = make_graph("CBA", ["A>B", "B>C"])
        assert topological_sort(g, identity, compare) == ["A", "B", "C"]

    def test_diamond_exact_order(self) -> None:
        order = topological_sort(DIAMOND, identity, compare)
        assert order == ["A", "C", "B", "D"]
        assert_topological(DIAMOND, order)

    def test_every_edge_points_forward(self) -> None:
        g = make_graph("HGFEDCBA", ["A>C", "B>C", "C>E", "D>E", "E>F", "G>H", "B>G"])
        order = topological_sort(g, identity, compare)
        assert sorted(order) == sorted(g.nodes)
        assert_topological(g, order)

    def test_deterministic(self) -> None:
        g = make_graph("ABCDE", ["A>B", "C>D", "B>E", "D>E"])
        assert topological_sort(g, identity, compare) == topological_sort(g, identity, compare)

    def test_isolated_nodes_kept(self) -> None:
        g = make_graph("XYZ", [])
        assert topological_sort(g, identity, compare) == ["Z", "Y", "X"]

    def test_dangling_endpoint_included(self) -> None:
        g = Graph(nodes=("A",), edges=(Edge("A", "X"),))
        assert topological_sort(g, identity, compare) == ["A", "X"]

    def test_duplicate_identities_collapse(self) -> None:
        nodes = (("a", 1), ("a", 2), ("b", 3))
        g = Graph(nodes=nodes)
        order = topological_sort(g, lambda n: n[0], compare_by(lambda n: n[0]))
        assert order == [("b", 3), ("a", 1)]

    def test_deep_chain_does_not_recurse(self) -> None:
        names = [f"n{i:05d}" for i in range(5000)]
        g = Graph.from_pairs(names, zip(names, names[1:], strict=False))
        order = topological_sort(g, identity, compare, index_edges=True)
        assert order == names
        assert is_cyclical(g, identity, compare, index_edges=True) is False


class TestCallerFunctionErrors:
    def test_compare_exception_propagates(self) -> None:
        def broken(a: str, b: str) -> int:
            raise ValueError("boom")

        g = make_graph("AB", ["A>B"])
        with pytest.raises(ValueError, match="boom"):
            topological_sort(g, identity, broken)

    def test_identity_exception_propagates(self) -> None:
        def broken(node: str) -> str:
            raise KeyError(node)

        with pytest.raises(KeyError):
            is_cyclical(make_graph("A", []), broken, compare)

"""Shared pytest fixtures and test helpers for dagkit tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator, Iterable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from dagkit.config.settings import DagSettings
from dagkit.domain.compare import compare_by
from dagkit.domain.graph import Edge, Graph
from dagkit.infrastructure.workspace import Workspace


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dagkit_logger = logging.getLogger("dagkit")
    dagkit_level = dagkit_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dagkit_logger.setLevel(dagkit_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's DAGKIT_* environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("DAGKIT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no dagkit.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[..., Path]:
    """Write a graph document as JSON and return its path."""

    def _write(data: dict[str, Any], name: str = "graph.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """Workspace with default settings rooted at a temp directory."""
    return Workspace(DagSettings.from_cli(root=tmp_path))


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def identity(node: str) -> str:
    return node


compare = compare_by(identity)


def make_graph(nodes: Iterable[str], edges: Iterable[str]) -> Graph[str]:
    """Build a string graph from ``"A>B"`` edge shorthand."""
    pairs = [tuple(e.split(">")) for e in edges]
    return Graph(nodes=tuple(nodes), edges=tuple(Edge(s, t) for s, t in pairs))


def assert_topological(graph: Graph[str], order: list[str]) -> None:
    """Every edge's source precedes its target."""
    position = {n: i for i, n in enumerate(order)}
    for e in graph.edges:
        assert position[e.source] < position[e.target], f"{e.source} !< {e.target}"


DIAMOND = make_graph("ABCD", ["A>B", "A>C", "B>D", "C>D"])

"""Graph file loading — dispatch on file suffix.

Supported formats:

* ``.json`` — ``{"nodes": [...], "edges": [...]}``
* ``.yaml`` / ``.yml`` — same shape, parsed with ruamel.yaml
* ``.toml`` — ``nodes = [...]`` and ``[[edges]]`` tables
* ``.graphml`` / ``.gml`` — read through NetworkX
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import networkx as nx
from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from dagkit.infrastructure.graph.bridge import from_networkx
from dagkit.infrastructure.graph.document import GraphDocument

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES: frozenset[str] = frozenset(
    {".json", ".yaml", ".yml", ".toml", ".graphml", ".gml"}
)


class GraphLoadError(Exception):
    """Raised when a graph file is missing, unreadable, or malformed."""

    def __init__(self, path: Path, message: str, *, code: str = "INVALID_GRAPH") -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.code = code


def _read_mapping(path: Path) -> Any:
    suffix = path.suffix.lower()
    raw = path.read_text(encoding="utf-8")
    if suffix == ".json":
        return json.loads(raw)
    if suffix in (".yaml", ".yml"):
        return YAML(typ="safe").load(raw)
    return tomllib.loads(raw)


def load_document(path: Path) -> GraphDocument:
    """Load and validate a graph document from *path*.

    Raises:
        GraphLoadError: ``NOT_FOUND`` if the file is missing,
            ``INVALID_GRAPH`` for unsupported suffixes, parse errors,
            or shape validation failures.
    """
    if not path.is_file():
        raise GraphLoadError(path, "file not found", code="NOT_FOUND")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        supported = ", ".join(sorted(SUPPORTED_SUFFIXES))
        raise GraphLoadError(path, f"unsupported format '{suffix}' (expected one of {supported})")

    if suffix == ".graphml":
        return _load_networkx(path, nx.read_graphml)
    if suffix == ".gml":
        return _load_networkx(path, nx.read_gml)

    try:
        data = _read_mapping(path)
    except (json.JSONDecodeError, YAMLError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise GraphLoadError(path, f"parse error: {exc}") from exc
    except OSError as exc:
        raise GraphLoadError(path, f"cannot read file: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GraphLoadError(path, "expected a mapping with 'nodes' and 'edges'")

    try:
        document = GraphDocument.model_validate(data)
    except ValidationError as exc:
        raise GraphLoadError(path, f"invalid graph: {exc.error_count()} error(s)\n{exc}") from exc

    logger.debug(
        "Loaded %s: %d nodes, %d edges", path, len(document.nodes), len(document.edges)
    )
    return document


def _load_networkx(path: Path, reader: Any) -> GraphDocument:
    try:
        g = reader(path)
    except (nx.NetworkXError, ValueError, SyntaxError) as exc:
        raise GraphLoadError(path, f"parse error: {exc}") from exc
    except OSError as exc:
        raise GraphLoadError(path, f"cannot read file: {exc}") from exc
    # Undirected files keep each edge once, oriented as NetworkX stores it.
    document = from_networkx(g)
    logger.debug(
        "Loaded %s via networkx: %d nodes, %d edges",
        path,
        len(document.nodes),
        len(document.edges),
    )
    return document

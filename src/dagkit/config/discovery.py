"""Config file discovery and loading.

Looks for ``dagkit.toml`` in the start directory and its parents; a
``pyproject.toml`` with a ``[tool.dagkit]`` table in the same directory
is used when no dagkit.toml exists there. ``DAGKIT_CONFIG`` overrides the
walk-up entirely.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from dagkit.config.models import DagConfig

CONFIG_FILENAME = "dagkit.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "DAGKIT_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return isinstance(data.get("tool", {}).get("dagkit"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file above *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_table(path: Path) -> dict[str, Any]:
    """Parse *path* and return the dagkit settings table.

    For ``pyproject.toml`` that is ``[tool.dagkit]``; for any other file
    it is the whole document. Raises ``tomllib.TOMLDecodeError``.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("dagkit", {})
        return table if isinstance(table, dict) else {}
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> DagConfig:
    """Load and validate config, falling back to defaults when none is found."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return DagConfig()
    return DagConfig.model_validate(read_config_table(path))

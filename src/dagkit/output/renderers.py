"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO. Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dagkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dagkit.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal, pipe-friendly output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "sort":
        return "\n".join(data.get("order", []))
    if result.op == "deps":
        # Dependencies, a blank line, then dependents.
        return "\n\n".join(
            "\n".join(data.get(side, [])) for side in ("dependencies", "dependents")
        )
    if result.op == "cycles":
        return "\n".join(_cycle_chain(c) for c in data.get("cycles", []))
    if result.op == "check":
        return "cyclical" if data.get("cyclical") else "acyclic"
    if result.op == "diagram":
        return str(data.get("diagram", data.get("path", "")))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _cycle_chain(cycle: dict[str, Any]) -> str:
    """``A -> B -> C -> A`` from a cycle's edge list."""
    edges = cycle.get("edges", [])
    if not edges:
        return " -> ".join(cycle.get("nodes", []))
    return " -> ".join([edges[0][0], *(target for _, target in edges)])


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="dag.ok")
    op = Text(f"  {result.op}", style="dag.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dag.key")
    style = "dag.id" if key == "id" or key.endswith("_id") else ""
    console.print(Text.assemble(k, Text(str(value), style=style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _id_list(console: Console, title: str, ids: list[str]) -> None:
    console.print(Text(f"{title} ({len(ids)})", style="bold"))
    if not ids:
        console.print(Text("  (none)", style="dim"))
    for node_id in ids:
        console.print(Text.assemble("  ", Text(node_id, style="dag.id")))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="dag.error"),
        Text(f"  {result.op}", style="dag.op"),
        Text(" — "),
        Text(msg),
    )

    if err and err.code == "CYCLIC_GRAPH" and "cycle" in err.detail:
        console.print(Text(f"  cycle: {_cycle_chain(err.detail['cycle'])}", style="dag.edge"))
    elif verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Graph renderers ───────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results with issues grouped by category."""
    data = result.data
    issues = data.get("issues", [])
    summary = f"{data.get('nodes', 0)} nodes, {data.get('edges', 0)} edges"

    if not data.get("cyclical") and not issues:
        console.print(Text.assemble(Text("OK", style="dag.ok"), f"  Acyclic ({summary})."))
        return

    state = Text("cyclical", style="dag.error") if data.get("cyclical") else Text("acyclic")
    console.print(Text.assemble("Graph is ", state, f" ({summary})."))

    severity_styles = {"error": "dag.error", "warning": "dag.warning"}
    by_category: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_category.setdefault(str(issue.get("category", "unknown")), []).append(issue)

    for cat, cat_issues in by_category.items():
        console.print()
        console.print(Text(cat, style="bold"))
        for issue in cat_issues:
            sev = str(issue.get("severity", "warning"))
            line = Text("  ")
            line.append(sev, style=severity_styles.get(sev, ""))
            if issue.get("node_id"):
                line.append(f" [{issue['node_id']}]")
            line.append(f": {issue.get('message', '')}")
            console.print(line)

    errors = sum(1 for i in issues if i.get("severity") == "error")
    console.print(f"\n{errors} errors, {len(issues) - errors} warnings")
    if verbose:
        _render_meta(console, result)


def _render_cycles(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render each cycle as an arrow chain."""
    cycles = result.data.get("cycles", [])
    if not cycles:
        console.print(Text.assemble(Text("OK", style="dag.ok"), "  No cycles found."))
        return

    for index, cycle in enumerate(cycles, start=1):
        console.print(Text.assemble(f"{index}. ", Text(_cycle_chain(cycle), style="dag.edge")))
        if verbose:
            console.print(Text(f"   path nodes: {', '.join(cycle.get('nodes', []))}", style="dim"))
    console.print(f"\n{len(cycles)} cycles")
    if verbose:
        _render_meta(console, result)


def _render_sort(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render topological order as a numbered table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="dag.id", no_wrap=True)
    table.add_column("Label", style="dag.label")
    for position, item in enumerate(items, start=1):
        table.add_row(str(position), str(item.get("id", "")), str(item.get("label", "")))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} nodes")
    if verbose:
        _render_meta(console, result)


def _render_deps(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the two sides of a dependency partition."""
    data = result.data
    console.print(Text.assemble("Partition around ", Text(str(data.get("id", "?")), style="dag.id")))
    console.print()
    _id_list(console, "dependencies", data.get("dependencies", []))
    console.print()
    _id_list(console, "dependents", data.get("dependents", []))
    if verbose:
        _render_meta(console, result)


def _render_diagram(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print the diagram text verbatim, or where it was written."""
    data = result.data
    if "diagram" in data:
        console.print(Text(data["diagram"]), soft_wrap=True)
        return
    _status_line(console, result)
    for key in ("path", "nodes", "edges"):
        if key in data:
            _field(console, key, data[key])
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "cycles": _render_cycles,
    "sort": _render_sort,
    "deps": _render_deps,
    "diagram": _render_diagram,
}

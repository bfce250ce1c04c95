"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from graphctl.output.console import create_console, get_output, swatch_for_color

if TYPE_CHECKING:
    from rich.console import Console

    from graphctl.services.result import ServiceResult

type Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Lists print one id per line, paths print their node ids separated by
    spaces, everything else prints the status line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    items = d.get("items")
    if isinstance(items, list):
        return "\n".join(_extract_id(item) for item in items if _extract_id(item))
    for key in ("path", "visited"):
        if isinstance(d.get(key), list):
            return " ".join(d[key])
    if "components" in d:
        return "\n".join(" ".join(c["members"]) for c in d["components"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    if isinstance(item, dict) and item.get("id") is not None:
        return str(item["id"])
    return ""


def _format_number(value: Any) -> str:
    if value is None:
        return "∞"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="graph.ok")
    op = Text(f"  {result.op}", style="graph.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="graph.key")
    if key in ("id", "source", "target", "start"):
        v = Text(str(value), style="graph.node")
    elif key == "label":
        v = Text(str(value), style="graph.label")
    elif key in ("weight", "distance"):
        v = Text(_format_number(value), style="graph.weight")
    elif key.endswith("_file"):
        v = Text(str(value), style="graph.path")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _chain(nodes: list[str], *, arrow: str = "→") -> str:
    return f" {arrow} ".join(f"[graph.node]{n}[/graph.node]" for n in nodes)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _edge_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", no_wrap=True)
    table.add_column("Source", style="graph.node")
    table.add_column("Target", style="graph.node")
    table.add_column("Weight", style="graph.weight", justify="right")
    table.add_column("Directed", style="graph.directed")
    for item in items:
        weight = item.get("weight")
        table.add_row(
            str(item.get("id", "")),
            str(item.get("source", "")),
            str(item.get("target", "")),
            _format_number(weight) if weight is not None else "-",
            "yes" if item.get("directed") else "no",
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="graph.error")
    op = Text(f"  {result.op}", style="graph.op")
    code = Text(f" [{err.code}]" if err else "", style="graph.key")
    console.print(label, op, code, Text(" — "), msg, sep="")
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Node and edge renderers ───────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render node/edge add, update and remove results."""
    _status_line(console, result)
    for key in (
        "id",
        "label",
        "previous_label",
        "source",
        "target",
        "weight",
        "directed",
        "edges_removed",
        "removed",
        "replaced",
    ):
        if key not in result.data:
            continue
        value = result.data[key]
        if key in ("removed", "replaced"):
            if value:
                _field(console, key, ", ".join(value))
            continue
        if key == "previous_label" and value == result.data.get("label"):
            continue
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_node(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single node as a panel with its neighborhood."""
    d = result.data
    lines = [f"degree: {d.get('degree', 0)}"]
    neighbors = d.get("neighbors", [])
    lines.append(f"neighbors: {', '.join(neighbors) if neighbors else '(none)'}")
    title = d.get("id", "?")
    if d.get("label"):
        title = f"{title} — {d['label']}"
    console.print(Panel("\n".join(lines), title=title, border_style="dim", expand=False))
    edges = d.get("edges", [])
    if edges:
        console.print(_edge_table(edges))
    if verbose:
        _render_meta(console, result)


def _render_node_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="graph.node", no_wrap=True)
    table.add_column("Label", style="graph.label")
    table.add_column("Degree", justify="right")
    for item in items:
        table.add_row(
            str(item.get("id", "")), str(item.get("label", "")), str(item.get("degree", 0))
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} nodes")


def _render_edge_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    console.print(_edge_table(items))
    console.print(f"\n{result.data.get('count', len(items))} edges")


# ── Analysis renderers ────────────────────────────────────────────────


def _render_properties(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the properties summary as a two-column table."""
    d = result.data
    table = Table(show_header=False, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Property", style="graph.key")
    table.add_column("Value")

    def yes_no(value: Any) -> str:
        if value is None:
            return "skipped"
        return "yes" if value else "no"

    rows = [
        ("Nodes", str(d.get("node_count", 0))),
        ("Edges", str(d.get("edge_count", 0))),
        ("Connected", yes_no(d.get("connected"))),
        ("Components", str(d.get("component_count", 0))),
        ("Tree", yes_no(d.get("is_tree"))),
        ("Radius", _format_number(d.get("radius"))),
        ("Diameter", _format_number(d.get("diameter"))),
        ("Eulerian cycle", yes_no(d.get("has_eulerian_cycle"))),
        ("Eulerian path", yes_no(d.get("has_eulerian_path"))),
        ("Hamiltonian cycle", yes_no(d.get("has_hamiltonian_cycle"))),
        ("Hamiltonian path", yes_no(d.get("has_hamiltonian_path"))),
        ("Chromatic number (greedy)", str(d.get("chromatic_number", 0))),
    ]
    for name, value in rows:
        table.add_row(name, value)
    console.print(table)

    if verbose and d.get("degrees"):
        console.print()
        for node_id, degree in d["degrees"].items():
            console.print(f"  [graph.node]{node_id}[/graph.node]: {degree}")
        _render_meta(console, result)


def _render_components(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    comps = result.data.get("components", [])
    for comp in comps:
        members = ", ".join(f"[graph.node]{m}[/graph.node]" for m in comp["members"])
        console.print(f"  {comp['index'] + 1}. ({comp['size']}) {members}")
    console.print(f"\n{result.data.get('count', len(comps))} components")


def _render_traverse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    heading = f"{str(d.get('order', '')).upper()} from {d.get('start', '?')}"
    console.print(Text(heading, style="bold"))
    console.print(_chain(d.get("visited", [])))
    console.print(f"\n{d.get('count', 0)} nodes visited")


def _render_path(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a shortest path as a chain with its total weight."""
    d = result.data
    path = d.get("path", [])
    if not path:
        console.print("No path found.")
        return
    console.print(_chain(path))
    console.print(f"\nDistance: {_format_number(d.get('distance'))}  ({d.get('hops', 0)} hops)")
    if verbose:
        _render_meta(console, result)


def _render_distances(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Node", style="graph.node", no_wrap=True)
    table.add_column("Distance", style="graph.weight", justify="right")
    table.add_column("Via", style="graph.node")
    table.add_column("Path")
    for item in d.get("items", []):
        table.add_row(
            str(item["id"]),
            _format_number(item.get("distance")),
            str(item.get("previous") or "-"),
            " → ".join(item.get("path", [])),
        )
    console.print(Text(f"Shortest distances from {d.get('source', '?')}", style="bold"))
    console.print(table)
    unreachable = d.get("unreachable", [])
    if unreachable:
        console.print(f"\n{len(unreachable)} unreachable: {', '.join(unreachable)}")
    if verbose:
        _render_meta(console, result)


def _render_walk(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render Eulerian and Hamiltonian walks."""
    d = result.data
    closed = d.get("is_cycle", d.get("cycle", False))
    kind = "Eulerian" if result.op == "eulerian" else "Hamiltonian"
    console.print(Text(f"{kind} {'cycle' if closed else 'path'}", style="bold"))
    console.print(_chain(d.get("path", [])))
    if verbose:
        _render_meta(console, result)


def _render_coloring(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Color", justify="right")
    table.add_column("Nodes")
    for color, members in enumerate(d.get("classes", [])):
        swatch = swatch_for_color(color)
        table.add_row(f"[{swatch}]■[/{swatch}] {color}", ", ".join(members))
    console.print(table)
    console.print(f"\nChromatic number (greedy upper bound): {d.get('chromatic_number', 0)}")


def _render_matrix(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    labels = result.data.get("labels", [])
    rows = result.data.get("rows", [])
    if not labels:
        console.print("Empty graph.")
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", style="graph.node", no_wrap=True)
    for label in labels:
        table.add_column(label, justify="right", style="graph.weight")
    for label, row in zip(labels, rows, strict=True):
        table.add_row(label, *(_format_number(v) if v else "·" for v in row))
    console.print(table)


# ── Export renderers ─────────────────────────────────────────────────


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render export/import results with file path and counts."""
    _status_line(console, result)
    d = result.data
    for key in ("output_file", "source_file", "format", "node_count", "edge_count"):
        if key in d:
            _field(console, key, d[key])
    skipped = d.get("skipped_edges") or []
    if skipped:
        _field(console, "skipped_edges", len(skipped))
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    # Mutations
    "add_node": _render_mutation,
    "remove_node": _render_mutation,
    "update_node": _render_mutation,
    "add_edge": _render_mutation,
    "remove_edge": _render_mutation,
    "update_edge": _render_mutation,
    # Lookups
    "get_node": _render_node,
    "list_nodes": _render_node_table,
    "list_edges": _render_edge_table,
    # Analysis
    "properties": _render_properties,
    "components": _render_components,
    "traverse": _render_traverse,
    "shortest_path": _render_path,
    "distances": _render_distances,
    "eulerian": _render_walk,
    "hamiltonian": _render_walk,
    "coloring": _render_coloring,
    "matrix": _render_matrix,
    # Export
    "export_snapshot": _render_export,
    "export_graph": _render_export,
    "import_snapshot": _render_export,
}

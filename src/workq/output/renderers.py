"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from workq.output.console import create_console, get_output, style_for_classification

if TYPE_CHECKING:
    from rich.console import Console

    from workq.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: descriptions only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    descriptions = result.data.get("descriptions")
    if descriptions:
        return "\n".join(descriptions)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="workq.ok"), Text(f"  {result.op}", style="workq.op"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, telemetry as a span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_telemetry_tree(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {span_data.get('name', '?')}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="workq.error"),
        Text(f"  {result.op}", style="workq.op"),
        Text(" — "),
        msg,
    )
    for description in result.data.get("descriptions", []):
        console.print(f"  {description}", markup=False, soft_wrap=True)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(f"    {key}: {value}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_run(result: ServiceResult, console: Console) -> None:
    """Live count, one line per executed item, live count again."""
    data = result.data
    before = str(data.get("live_before", "?"))
    console.print(Text.assemble("Number of objects = ", (before, "workq.count")))
    for description in data.get("descriptions", []):
        console.print(description, markup=False, soft_wrap=True)
    after = str(data.get("live_after", "?"))
    console.print(Text.assemble("Alive objects = ", (after, "workq.count")))


def _render_kinds(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Kind", style="workq.op", no_wrap=True)
    table.add_column("Type")
    table.add_column("Result-producing", justify="center")
    for item in result.data.get("items", []):
        producing = bool(item.get("result_producing"))
        table.add_row(
            str(item.get("kind", "")),
            str(item.get("type", "")),
            Text("yes" if producing else "no", style=style_for_classification(producing)),
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        console.print(Text.assemble((f"  {key}: ", "workq.key"), str(value)))


_OP_RENDERERS: dict[str, Renderer] = {
    "run": _render_run,
    "drain": _render_run,
    "kinds": _render_kinds,
}

"""Rich/JSON output for ServiceResult.

Human mode renders through a StringIO-backed Rich console; ``--json``
returns the serialized result unchanged.  Renderers are dispatched by
``result.op``; unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from monthpick.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from monthpick.services.result import ServiceResult


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    verbose: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        verbose: Include error detail in human mode.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="mp.ok")
    op = Text(f"  {result.op}", style="mp.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}:", style="mp.key")
    if key == "status":
        v = Text(str(value), style=style_for_status(str(value)))
    elif key in ("value", "text"):
        v = Text(str(value), style="mp.value")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_state(result: ServiceResult, console: Console) -> None:
    """Render parse/format results: value, text, status first."""
    _status_line(console, result)
    for key in ("input", "value", "text", "status", "reason"):
        value = result.data.get(key)
        if value is not None:
            _field(console, key, value)


def _render_describe(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = dict(result.data)
    i18n = data.pop("i18n", {})
    for key, value in data.items():
        _field(console, key, value)

    names = i18n.get("monthNames")
    labels = i18n.get("monthLabels")
    short_names = i18n.get("shortMonthNames")
    if names or labels or short_names:
        table = Table(title="Month vocabulary", show_edge=False)
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("Label")
        table.add_column("Short name")
        for index in range(12):
            table.add_row(
                str(index + 1),
                names[index] if names else "",
                labels[index] if labels else "",
                short_names[index] if short_names else "",
            )
        console.print(table)
    _field(console, "formats", i18n.get("formats", []))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="mp.error")
    op = Text(f"  {result.op}", style="mp.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


_OP_RENDERERS: dict[str, Any] = {
    "parse": _render_state,
    "format": _render_state,
    "describe": _render_describe,
}

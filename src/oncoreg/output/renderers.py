"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from oncoreg.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from oncoreg.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if result.op == "parse_field":
        return str(result.data.get("value", ""))
    if result.op == "list_codes":
        return "\n".join(c["code"] for c in result.data.get("codes", []))
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="onc.ok"), Text(f"  {result.op}", style="onc.op"))


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        console.print(Text(f"  {key}: ", style="onc.key"), _format_value(value), sep="")


def _render_codes(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(
        title=f"{result.data['name']} ({result.data['category']})",
        show_header=True,
        show_lines=False,
        pad_edge=False,
        expand=False,
    )
    table.add_column("Code", style="onc.code", no_wrap=True)
    table.add_column("Label")
    for entry in result.data["codes"]:
        table.add_row(entry["code"], entry["label"])
    console.print(table)


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="onc.error"),
        Text(f"  {result.op}", style="onc.op"),
        Text(" - "),
        msg,
        sep="",
    )
    if err is None:
        return
    field_errors = err.detail.get("errors") or ([err.detail] if "field" in err.detail else [])
    for field_error in field_errors:
        console.print(
            Text(f"  {field_error['field']}", style="onc.field"),
            f" {field_error['raw_input']!r}: {field_error['message']}",
            sep="",
        )


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "list_codes": _render_codes,
}

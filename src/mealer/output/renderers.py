"""Human-readable rendering of command outcomes.

``list_complaints`` gets a complaint table; any other op prints an OK line
followed by the outcome's fields.  Failures print one ERROR line.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.box import SIMPLE_HEAD
from rich.table import Table
from rich.text import Text

from mealer.output.console import render_to_text

if TYPE_CHECKING:
    from rich.console import Console


def render_result(
    op: str,
    ok: bool,
    data: Any,
    error: str | None,
    *,
    verbose: bool = False,
) -> str:
    """Render an outcome as text; *data* is the JSON-ready payload data."""

    def draw(console: Console) -> None:
        if not ok:
            _render_error(op, error, console)
            return
        _OP_RENDERERS.get(op, _render_generic)(op, data, console, verbose)

    return render_to_text(draw).rstrip("\n")


def render_quiet(op: str, ok: bool, data: Any, error: str | None) -> str:
    """One line per ID for lists, the ID for a single record, else OK/ERROR."""
    if not ok:
        return f"ERROR: {op}: {error or 'Unknown error'}"

    if isinstance(data, list):
        return "\n".join(str(item.get("id", "")) for item in data if isinstance(item, dict))
    if isinstance(data, dict) and data.get("id"):
        return str(data["id"])
    return f"OK: {op}"


def _status_line(console: Console, op: str) -> None:
    console.print(Text.assemble(("OK", "mealer.ok"), (f"  {op}", "mealer.op")))


_FIELD_STYLES = {
    "id": "mealer.id",
    "clientId": "mealer.id",
    "chefId": "mealer.id",
    "title": "mealer.title",
    "dateSubmitted": "mealer.date",
}


def _field(console: Console, key: str, value: Any) -> None:
    style = _FIELD_STYLES.get(key, "")
    console.print(Text.assemble((f"  {key}: ", "mealer.key"), (str(value), style)))


def _complaint_table(complaints: list[dict[str, Any]], *, verbose: bool) -> Table:
    """Complaints in store order; *verbose* adds the description column."""
    columns = [
        ("id", "ID", "mealer.id"),
        ("title", "Title", "mealer.title"),
        ("clientId", "Client", ""),
        ("chefId", "Chef", ""),
        ("dateSubmitted", "Submitted", "mealer.date"),
    ]
    if verbose:
        columns.append(("description", "Description", ""))

    table = Table(box=SIMPLE_HEAD, pad_edge=False)
    for _, header, style in columns:
        table.add_column(header, style=style, no_wrap=header == "ID")

    for item in complaints:
        table.add_row(*(str(item.get(key) or "") for key, _, _ in columns))
    return table


def _render_generic(op: str, data: Any, console: Console, verbose: bool) -> None:
    _status_line(console, op)
    if isinstance(data, dict):
        for key, value in data.items():
            _field(console, key, value)


def _render_complaint_list(op: str, data: Any, console: Console, verbose: bool) -> None:
    complaints = data if isinstance(data, list) else []
    _status_line(console, op)
    if not complaints:
        console.print(Text("  No complaints.", style="dim"))
        return
    console.print(_complaint_table(complaints, verbose=verbose))
    console.print(Text(f"  {len(complaints)} complaint(s)", style="dim"))


def _render_error(op: str, error: str | None, console: Console) -> None:
    console.print(
        Text.assemble(
            ("ERROR", "mealer.error"), (f"  {op}", "mealer.op"), f": {error or 'Unknown error'}"
        )
    )


_OP_RENDERERS: dict[str, Callable[[str, Any, Console, bool], None]] = {
    "list_complaints": _render_complaint_list,
}

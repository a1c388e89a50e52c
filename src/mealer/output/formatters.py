"""Rich/JSON output helpers.

The CLI renders a command outcome (a :class:`Result` or :class:`Response`
tagged with an operation name) for humans (Rich output) or machines
(--json).  JSON payloads share one envelope::

    {"ok": true, "op": "add_complaint", "data": {...}, "error": null}
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from mealer.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from mealer.services.result import Response, Result


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def to_jsonable(value: Any) -> Any:
    """Convert models (and lists/dicts of them) into JSON-ready data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def to_payload(op: str, outcome: Result[Any] | Response) -> dict[str, Any]:
    """Build the JSON envelope for an outcome."""
    data = getattr(outcome, "value", None)
    return {
        "ok": outcome.ok,
        "op": op,
        "data": to_jsonable(data),
        "error": outcome.error.model_dump(mode="json") if outcome.error else None,
    }


def format_result(
    op: str,
    outcome: Result[Any] | Response,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format an outcome for display according to *settings*."""
    settings = settings or OutputSettings()
    payload = to_payload(op, outcome)
    if settings.json_output:
        return _json.dumps(payload, indent=2)
    if settings.quiet:
        return render_quiet(op, outcome.ok, payload["data"], outcome.message)
    return render_result(op, outcome.ok, payload["data"], outcome.message, verbose=settings.verbose)

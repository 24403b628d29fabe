"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from datectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from datectl.services.result import ServiceResult

    Renderer = Callable[..., None]


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

    Successful parses print just the primary value so the output can be
    piped (the UTC instant, the rendered text, or the duration).
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if "text" in d:
        return str(d["text"])
    if "duration" in d:
        return str(d["duration"]["human_readable"])
    if "parsed" in d:
        return str(d["parsed"])
    if "path" in d:
        return str(d["path"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="dt.ok")
    op = Text(f"  {result.op}", style="dt.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dt.key")
    if key in ("parsed", "instant"):
        v = Text(str(value), style="dt.instant")
    elif key in ("detected_format", "format"):
        v = Text(str(value), style="dt.format")
    elif key in ("path", "expected_path"):
        v = Text(str(value), style="dt.path")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _mapping_table(title: str, mapping: dict[str, Any], *, key_header: str = "Format") -> Table:
    table = Table(title=title, show_header=True, pad_edge=False, expand=False)
    table.add_column(key_header, style="dt.format", no_wrap=True)
    table.add_column("Value")
    for key, value in mapping.items():
        table.add_row(str(key), str(value))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dt.error")
    op = Text(f"  {result.op}", style="dt.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Date renderers ────────────────────────────────────────────────────


def _render_date(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render validate_date / validate_month results."""
    d = result.data
    _status_line(console, result)
    for key in ("original_input", "parsed", "detected_format", "timezone"):
        if key in d:
            _field(console, key, d[key])
    if "month_info" in d:
        info = d["month_info"]
        _field(console, "month", f"{info['month_name']} {info['year']} ({info['month']})")
    for name, text in d.get("formatted", {}).items():
        _field(console, name, text)


def _render_range(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "start", f"{d['start']['parsed']} ({d['start']['format']})")
    _field(console, "end", f"{d['end']['parsed']} ({d['end']['format']})")
    duration = d["duration"]
    k = Text("  duration: ", style="dt.key")
    v = Text(duration["human_readable"], style="dt.duration")
    console.print(k, v, sep="", end="")
    console.print()
    if verbose:
        _field(console, "total_hours", duration["total_hours"])
        _field(console, "timezone", d["timezone"])


def _render_format(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "text", d["text"])
    if verbose:
        for key in ("instant", "format", "timezone"):
            _field(console, key, d[key])


def _render_catalog(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Priority", justify="right")
    table.add_column("Format", style="dt.format", no_wrap=True)
    table.add_column("Pattern")
    table.add_column("Example")
    for position, fid in enumerate(d["month_priority"]):
        table.add_row(str(position), fid, d["formats"][fid], d["examples"].get(fid, ""))
    console.print(table)


def _render_examples(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(_mapping_table(f"Today in {d['timezone']}", d["examples"]))


def _render_page(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    title = d.get("date") or d.get("month") or "page"
    console.print(Panel(d["content"].rstrip(), title=str(title), border_style="dim", expand=False))
    if verbose:
        _field(console, "path", d["path"])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "validate_date": _render_date,
    "validate_month": _render_date,
    "validate_range": _render_range,
    "format_date": _render_format,
    "list_formats": _render_catalog,
    "format_examples": _render_examples,
    "get_daily_page": _render_page,
    "get_monthly_overview": _render_page,
}

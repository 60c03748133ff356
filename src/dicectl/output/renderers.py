"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dicectl.output.console import create_console, get_output, style_for_outcome

if TYPE_CHECKING:
    from rich.console import Console

    from dicectl.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "roll":
        return str(result.data.get("total", ""))
    if result.op == "roll_many":
        return "\n".join(str(r.get("total", "")) for r in result.data.get("rolls", []))
    if result.op == "parse":
        return str(result.data.get("notation", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="dice.ok")
    op = Text(f"  {result.op}", style="dice.op")
    console.print(label, op, end="")
    console.print()


_FIELD_STYLES: dict[str, str] = {
    "notation": "dice.notation",
    "total": "dice.total",
}


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="dice.key")
    line.append(str(value), style=_FIELD_STYLES.get(key, ""))
    console.print(line)


def _outcomes_text(outcomes: list[int], sides: int) -> Text:
    text = Text()
    for i, value in enumerate(outcomes):
        if i:
            text.append(", ")
        text.append(str(value), style=style_for_outcome(value, sides))
    return text


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dice.error")
    op = Text(f"  {result.op}", style="dice.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))
    if verbose and err is not None:
        console.print(Text(f"  code: {err.code}", style="dice.key"))
        if err.detail:
            console.print(Text("  detail:", style="dice.key"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Roll renderers ────────────────────────────────────────────────────


def _render_roll(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single roll: the renderer's display string, then fields when verbose."""
    d = result.data
    console.print(Text(str(d.get("rendered", ""))))
    if verbose:
        console.print()
        _status_line(console, result)
        _field(console, "notation", d.get("notation", ""))
        line = Text("  outcomes: ", style="dice.key")
        line.append_text(_outcomes_text(d.get("outcomes", []), d.get("sides", 0)))
        console.print(line)
        _field(console, "modifier", d.get("modifier", 0))
        _field(console, "total", d.get("total", ""))
        _render_meta(console, result)


def _render_roll_many(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render a batch of rolls as a table followed by the session summary."""
    _status_line(console, result)
    rolls = result.data.get("rolls", [])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Notation", style="dice.notation", no_wrap=True)
    table.add_column("Outcomes")
    table.add_column("Total", style="dice.total", justify="right")
    for i, roll in enumerate(rolls, start=1):
        table.add_row(
            str(i),
            str(roll.get("notation", "")),
            _outcomes_text(roll.get("outcomes", []), roll.get("sides", 0)),
            str(roll.get("total", "")),
        )
    console.print(table)

    summary = result.data.get("summary", {})
    for key in ("rolls", "lowest", "highest", "mean"):
        if key in summary:
            _field(console, key, summary[key])

    if verbose:
        for roll in rolls:
            console.print()
            console.print(Text(str(roll.get("rendered", ""))))
        _render_meta(console, result)


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a parsed specification."""
    _status_line(console, result)
    for key in ("notation", "count", "sides", "modifier"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs.

    Handles any op without an entry in ``_OP_RENDERERS``.
    """
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "roll": _render_roll,
    "roll_many": _render_roll_many,
    "parse": _render_parse,
}

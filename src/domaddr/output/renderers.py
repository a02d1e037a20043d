"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from domaddr.output.console import create_console, get_output, style_for_tld_type

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from domaddr.services.result import ServiceResult

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

    One line per item where the op produces items, otherwise a single line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    d = result.data
    if result.op == "parse":
        return str(d.get("rendered", ""))
    if result.op == "validate":
        return "\n".join(f"{'valid' if i['valid'] else 'invalid'}\t{i['input']}" for i in d.get("items", []))
    if result.op == "tld_check":
        return "\n".join(f"{'known' if i['known'] else 'unknown'}\t{i['code']}" for i in d.get("items", []))
    if result.op == "tld_list":
        return "\n".join(str(i["code"]) for i in d.get("items", []))
    if result.op == "tld_show":
        return str(d.get("code", ""))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="dom.ok"), Text(f"  {result.op}", style="dom.op"))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dom.key")
    v = Text("-" if value is None else str(value), style=style)
    console.print(k, v, sep="")


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


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 100:
        style = "bold red"
    elif duration > 10:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>9.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _tld_text(tld: dict[str, Any] | None) -> Text:
    if tld is None:
        return Text("-")
    text = Text(tld["code"], style="dom.tld")
    text.append(f" ({tld['type']})", style=style_for_tld_type(tld["type"]))
    return text


def _entry_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table of TLD entries; date columns appear when present."""
    with_dates = any("last_updated_on" in item for item in items)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="dom.tld", no_wrap=True)
    table.add_column("Type")
    table.add_column("Provider")
    if with_dates:
        table.add_column("Registered", style="dim")
        table.add_column("Updated", style="dim")

    for item in items:
        row = [
            Text(item["code"]),
            Text(item["type"], style=style_for_tld_type(item["type"])),
            Text(item.get("provider") or ""),
        ]
        if with_dates:
            row.append(Text(item.get("registered_on") or ""))
            row.append(Text(item.get("last_updated_on") or ""))
        table.add_row(*row)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dom.error")
    op = Text(f"  {result.op}", style="dom.op")
    console.print(label, op, Text(": "), Text(msg), sep="")
    if err is not None:
        console.print(Text(f"  code: {err.code}", style="dim"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
    if verbose:
        _render_meta(console, result)


# ── Parse renderers ───────────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the components of a parsed ``host[:port]``."""
    d = result.data
    _status_line(console, result)
    _field(console, "domain", d["domain"], style="dom.domain")
    if d.get("subdomains"):
        _field(console, "subdomains", ", ".join(d["subdomains"]), style="dom.label")
    if d.get("name") is not None:
        _field(console, "name", d["name"], style="dom.label")
    _field(console, "sld", d["sld"], style="dom.label")
    console.print(Text("  tld: ", style="dom.key"), _tld_text(d.get("tld")), sep="")
    port = d.get("port")
    if port is not None:
        _field(console, "port", f"{port['number']} ({port['type']})", style="dom.port")
    _field(console, "local", "yes" if d.get("local") else "no")
    if verbose:
        _field(console, "input", d.get("input"))
        _field(console, "address_name", d.get("address_name"))
        _render_meta(console, result)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input")
    table.add_column("Valid")
    table.add_column("Code")
    if verbose:
        table.add_column("Segment", style="dim")
    for item in d.get("items", []):
        valid = item["valid"]
        row = [
            Text(item["input"]),
            Text("yes" if valid else "no", style="dom.valid" if valid else "dom.invalid"),
            Text(item.get("code") or ""),
        ]
        if verbose:
            row.append(Text(item.get("segment") or ""))
        table.add_row(*row)
    console.print(table)
    _field(console, "valid", d.get("valid_count", 0))
    _field(console, "invalid", d.get("invalid_count", 0))
    if verbose:
        _render_meta(console, result)


# ── Registry renderers ────────────────────────────────────────────────


def _render_tld_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "code", d["code"], style="dom.tld")
    _field(console, "type", d["type"], style=style_for_tld_type(d["type"]))
    _field(console, "provider", d.get("provider"))
    if "last_updated_on" in d:
        _field(console, "registered_on", d.get("registered_on"))
        _field(console, "last_updated_on", d.get("last_updated_on"))
    if verbose:
        _render_meta(console, result)


def _render_tld_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    items = d.get("items", [])
    if items:
        console.print(_entry_table(items))
    _field(console, "count", f"{d.get('count', 0)} of {d.get('total', 0)}")
    if verbose:
        _render_meta(console, result)


def _render_tld_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", no_wrap=True)
    table.add_column("Syntax")
    table.add_column("Known")
    table.add_column("Type")
    for item in d.get("items", []):
        syntax_ok = item["syntax_ok"]
        known = item["known"]
        table.add_row(
            Text(item["code"]),
            Text("ok" if syntax_ok else "bad", style="dom.valid" if syntax_ok else "dom.invalid"),
            Text("yes" if known else "no", style="dom.valid" if known else "dom.invalid"),
            Text(item.get("type") or "", style=style_for_tld_type(item.get("type"))),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Fallback ──────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "parse": _render_parse,
    "validate": _render_validate,
    "tld_show": _render_tld_show,
    "tld_list": _render_tld_list,
    "tld_check": _render_tld_check,
}

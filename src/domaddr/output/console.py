"""Rich Console factory and theme for domaddr output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
the color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DOMADDR_THEME = Theme(
    {
        "dom.ok": "bold green",
        "dom.error": "bold red",
        "dom.warning": "bold yellow",
        "dom.op": "bold cyan",
        "dom.key": "dim",
        "dom.domain": "bold",
        "dom.label": "blue",
        "dom.tld": "magenta",
        "dom.port": "cyan",
        "dom.valid": "green",
        "dom.invalid": "red",
        "dom.type.generic": "green",
        "dom.type.sponsored": "blue",
        "dom.type.country-code": "yellow",
        "dom.type.infrastructure": "cyan",
        "dom.type.generic-restricted": "magenta",
        "dom.type.test": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width for stable output.
    """
    return Console(
        file=StringIO(),
        theme=DOMADDR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tld_type(tld_type: str | None) -> str:
    """Return the Rich style name for a TLD type value."""
    if not tld_type:
        return ""
    return f"dom.type.{tld_type}"

"""Command group: inspect the TLD registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domaddr.commands._base import DomaddrGroup
from domaddr.domain.types import TLDType

if TYPE_CHECKING:
    from domaddr.commands._context import AppContext


@click.group(
    cls=DomaddrGroup,
    examples="""\
  domaddr tld show com
  domaddr tld list --type sponsored
  domaddr tld check uk xyz notarealtld""",
)
def tld() -> None:
    """Look up, list, and check top-level domains."""


@tld.command(
    examples="""\
  domaddr tld show com
  domaddr tld show UK
  domaddr --json tld show io""",
)
@click.argument("code")
@click.pass_obj
def show(app: AppContext, code: str) -> None:
    """Show the registry entry for CODE."""
    app.emit(app.registry_service().show(code))


@tld.command(
    "list",
    examples="""\
  domaddr tld list
  domaddr tld list --type country-code
  domaddr tld list --limit 20""",
)
@click.option(
    "--type",
    "tld_type",
    type=click.Choice([t.value for t in TLDType]),
    default=None,
    help="Only entries of this type.",
)
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum entries to show (0 for all). Defaults to [registry] list_limit.",
)
@click.pass_obj
def list_cmd(app: AppContext, tld_type: str | None, limit: int | None) -> None:
    """List registered TLDs sorted by code."""
    selected = TLDType(tld_type) if tld_type else None
    app.emit(app.registry_service().list_entries(tld_type=selected, limit=limit))


@tld.command(
    examples="""\
  domaddr tld check com
  domaddr tld check co uk notarealtld c0m""",
)
@click.argument("codes", nargs=-1, required=True)
@click.pass_obj
def check(app: AppContext, codes: tuple[str, ...]) -> None:
    """Check syntax and registration for each of CODES."""
    app.emit(app.registry_service().check(codes))

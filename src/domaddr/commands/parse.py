"""Command: parse a single ``host[:port]``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domaddr.commands._base import DomaddrCommand

if TYPE_CHECKING:
    from domaddr.commands._context import AppContext


@click.command(
    cls=DomaddrCommand,
    examples="""\
  domaddr parse www.example.com
  domaddr parse example.co.uk
  domaddr parse api.localhost:8080
  domaddr --json parse '*.example.com:443'""",
)
@click.argument("address")
@click.pass_obj
def parse(app: AppContext, address: str) -> None:
    """Parse ADDRESS into subdomains, name, SLD, TLD, and port."""
    app.emit(app.parse_service().parse(address))

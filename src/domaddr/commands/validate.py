"""Command: validate one or more ``host[:port]`` inputs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domaddr.commands._base import DomaddrCommand

if TYPE_CHECKING:
    from domaddr.commands._context import AppContext


@click.command(
    cls=DomaddrCommand,
    examples="""\
  domaddr validate example.com
  domaddr validate example.com example.notarealtld localhost:99999
  domaddr validate --strict www.example.org api.example.io
  domaddr -q validate a.com b.org""",
)
@click.argument("addresses", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Exit 1 if any input is invalid.")
@click.pass_obj
def validate(app: AppContext, addresses: tuple[str, ...], strict: bool) -> None:
    """Report whether each of ADDRESSES is a valid domain."""
    app.emit(app.parse_service().validate(addresses, strict=strict))

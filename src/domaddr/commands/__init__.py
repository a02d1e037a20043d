"""Subcommand modules for domaddr.

Provides register_commands() which uses deferred imports to keep
``domaddr --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``tld`` group and the standalone commands on the root group."""
    # --- Groups ---
    from domaddr.commands.tld import tld

    cli.add_command(tld)

    # --- Standalone commands ---
    from domaddr.commands.parse import parse
    from domaddr.commands.validate import validate

    cli.add_command(parse)
    cli.add_command(validate)

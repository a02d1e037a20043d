"""``domaddr`` entry point: global output flags, settings, and subcommands."""

from __future__ import annotations

import click

from domaddr import __version__
from domaddr.commands import register_commands
from domaddr.commands._context import AppContext
from domaddr.config.settings import DomaddrSettings


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="domaddr")
@click.option("--json", "json_output", is_flag=True, help="Emit the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One line per item.")
@click.option("-v", "--verbose", is_flag=True, help="Extra fields plus timing spans; DEBUG logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read settings from this TOML file instead of searching for domaddr.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Parse host[:port] strings and query the embedded TLD registry."""
    ctx.obj = AppContext(
        DomaddrSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

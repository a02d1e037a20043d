"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds services from the resolved settings and owns
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domaddr.config.logging import configure_logging
from domaddr.output.formatters import OutputSettings, format_result
from domaddr.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from domaddr.config.settings import DomaddrSettings
    from domaddr.services.parse import ParseService
    from domaddr.services.registry import RegistryService
    from domaddr.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DomaddrSettings) -> None:
        self.settings = settings

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    def parse_service(self) -> ParseService:
        from domaddr.services.parse import ParseService

        return ParseService(self.settings.to_config())

    def registry_service(self) -> RegistryService:
        from domaddr.services.registry import RegistryService

        return RegistryService(self.settings.to_config())

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they stay out of piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

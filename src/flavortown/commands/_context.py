"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy FlavortownClient construction and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flavortown.output.formatters import OutputSettings, format_result
from flavortown.services.result import ServiceResult

if TYPE_CHECKING:
    from flavortown.config.settings import FlavortownSettings
    from flavortown.infrastructure.api import FlavortownClient


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The API client is created on first use so ``--help``, ``setup``
    and ``whoami`` never open a connection.
    """

    def __init__(self, settings: FlavortownSettings) -> None:
        self.settings = settings
        self._client: FlavortownClient | None = None

        from flavortown.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def client(self) -> FlavortownClient:
        """The API client (created lazily on first access)."""
        if self._client is None:
            from flavortown.infrastructure.api import FlavortownClient

            self._client = FlavortownClient(
                base_url=self.settings.api.base_url,
                api_key=self.settings.api_key,
                timeout=self.settings.api.timeout,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def require_api_key(self, op: str) -> None:
        """Emit a NOT_AUTHENTICATED error and exit 1 when no key is configured."""
        if not self.settings.api_key:
            self.emit(ServiceResult.failure(op, "NOT_AUTHENTICATED", "API Key not found!"))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
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

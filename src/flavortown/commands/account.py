"""Standalone commands: setup, whoami, logout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flavortown.commands._base import FtCommand
from flavortown.output.renderers import render_setup_instructions
from flavortown.services.account import clear_api_key, describe_api_key, save_api_key

if TYPE_CHECKING:
    from flavortown.commands._context import AppContext


@click.command(
    cls=FtCommand,
    examples="""\
  flavortown setup
  flavortown setup --key ft_xxxxxxxxxxxx""",
)
@click.option("--key", default=None, help="API key (prompted for when omitted).")
@click.pass_obj
def setup(app: AppContext, key: str | None) -> None:
    """Configure your API key."""
    if key is None:
        if not app.settings.json_output:
            click.echo(render_setup_instructions())
        key = click.prompt("Enter your API key", default="", show_default=False, hide_input=True)
    app.emit(save_api_key(app.settings.credentials_path, key))


@click.command(cls=FtCommand, examples="  flavortown whoami")
@click.pass_obj
def whoami(app: AppContext) -> None:
    """Show current configuration."""
    app.emit(describe_api_key(app.settings.api_key))


@click.command(cls=FtCommand, examples="  flavortown logout")
@click.pass_obj
def logout(app: AppContext) -> None:
    """Clear your API key."""
    app.emit(clear_api_key(app.settings.credentials_path))

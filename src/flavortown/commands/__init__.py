"""Subcommand modules for flavortown.

Provides register_commands() which uses deferred imports to keep
``flavortown --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the store, projects and devlogs groups and the account commands."""
    from flavortown.commands.account import logout, setup, whoami
    from flavortown.commands.devlogs import devlogs
    from flavortown.commands.projects import projects
    from flavortown.commands.store import store

    cli.add_command(store)
    cli.add_command(projects)
    cli.add_command(devlogs)
    cli.add_command(setup)
    cli.add_command(whoami)
    cli.add_command(logout)

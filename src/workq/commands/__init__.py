"""Subcommand modules for workq.

Provides register_commands(), which imports command modules lazily so
``workq --help`` stays cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from workq.commands.kinds import kinds
    from workq.commands.run import run

    cli.add_command(run)
    cli.add_command(kinds)

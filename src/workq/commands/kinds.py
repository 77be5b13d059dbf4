"""Command: list work item kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from workq.commands._base import WorkqCommand

if TYPE_CHECKING:
    from workq.commands._context import AppContext


@click.command(
    cls=WorkqCommand,
    examples="""\
  workq kinds
  workq --json kinds""",
)
@click.pass_obj
def kinds(app: AppContext) -> None:
    """List work item kinds and whether each produces a result."""
    from workq.services.kinds import list_kinds

    app.emit(list_kinds())

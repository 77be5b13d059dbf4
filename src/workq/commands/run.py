"""Command: build the demo sequence and drain it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from workq.commands._base import WorkqCommand

if TYPE_CHECKING:
    from workq.commands._context import AppContext


@click.command(
    cls=WorkqCommand,
    examples="""\
  workq run                      # drain the demo sequence, LIFO
  workq run --keep-going         # record failing items as warnings
  workq --json run               # machine-readable result
  workq -q run                   # descriptions only
  workq -v --log-json run        # debug logs and span tree""",
)
@click.option(
    "--keep-going/--fail-fast",
    default=None,
    help="Continue past failing items (default from [drain] keep_going).",
)
@click.pass_obj
def run(app: AppContext, keep_going: bool | None) -> None:
    """Execute the demo work items and print their descriptions."""
    from workq.domain.container import TaskContainer
    from workq.services.drain import DrainService
    from workq.services.sequence import build_demo_sequence

    drain_config = app.settings.drain
    svc = DrainService(
        plugins=app.plugins,
        keep_going=drain_config.keep_going if keep_going is None else keep_going,
        report_discarded=drain_config.report_discarded,
    )
    container = build_demo_sequence(TaskContainer())
    app.emit(svc.drain(container, op="run"))

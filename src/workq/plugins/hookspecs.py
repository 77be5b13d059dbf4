"""Pluggy hook specifications for work queue drain events.

Hooks are called synchronously from the drain loop, in LIFO order.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("workq")


class WorkqHookSpec:
    """Hook specifications for the workq plugin system."""

    @hookspec
    def post_execute(
        self,
        kind: str,
        description: str,
        result_producing: bool,
    ) -> None:
        """Called after a work item executed, with its post-execution description."""

    @hookspec
    def post_drain(
        self,
        descriptions: list[str],
        live_after: int,
    ) -> None:
        """Called once the container is empty and has been released."""

"""DrainService — pop-and-execute loop over the shared container.

The loop always takes the most recently inserted item (LIFO), executes
it, and keeps only its description.  Items may grow or shrink the
container while it is being drained; items removed by another item are
counted as *discarded* and reported, never restored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from workq.domain.errors import WorkQueueError
from workq.domain.registry import live_objects
from workq.services.result import ServiceResult
from workq.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from workq.domain.container import TaskContainer
    from workq.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


@dataclass
class _DrainState:
    descriptions: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    executed: int = 0
    failed: int = 0
    discarded: int = 0

    def data(self, **extra: Any) -> dict[str, Any]:
        return {
            "descriptions": list(self.descriptions),
            "executed": self.executed,
            "failed": self.failed,
            "discarded": self.discarded,
            **extra,
        }


class DrainService:
    """Executes every item of a container until it is empty.

    Args:
        plugins: Receives ``post_execute`` / ``post_drain`` hooks when given.
        keep_going: Record a failing item as a warning and continue,
            instead of stopping with an error result.
        report_discarded: Add a warning whenever an item removes pending items.
    """

    def __init__(
        self,
        *,
        plugins: PluginManager | None = None,
        keep_going: bool = False,
        report_discarded: bool = True,
    ) -> None:
        self._plugins = plugins
        self._keep_going = keep_going
        self._report_discarded = report_discarded

    @traced
    def drain(self, container: TaskContainer, *, op: str = "drain") -> ServiceResult:
        """Pop and execute until *container* is empty.

        ``data`` carries ``live_before``/``live_after`` registry counts taken
        before the first pop and after the container has been released.
        """
        state = _DrainState()
        live_before = live_objects()
        logger.debug("Draining %d item(s), %d live object(s)", len(container), live_before)

        error: tuple[str, str] | None = None
        while container:
            try:
                self._step(container, state)
            except WorkQueueError as exc:
                error = (exc.code, str(exc))
                break

        if error is not None:
            code, message = error
            logger.warning(
                "Drain stopped (%s): %s; %d item(s) left", code, message, len(container)
            )
            return ServiceResult.failure(
                op,
                code,
                message,
                data=state.data(live_before=live_before, live_after=live_objects()),
                warnings=state.warnings,
                detail={"remaining": len(container), "executed": state.executed},
            )

        container.clear()
        live_after = live_objects()
        if self._plugins is not None:
            self._plugins.dispatch(
                "post_drain",
                state.warnings,
                descriptions=list(state.descriptions),
                live_after=live_after,
            )
        logger.debug("Drained %d item(s), %d live object(s)", state.executed, live_after)
        return ServiceResult.success(
            op,
            state.data(live_before=live_before, live_after=live_after),
            warnings=state.warnings,
        )

    def _step(self, container: TaskContainer, state: _DrainState) -> None:
        # The popped item is released when this frame returns.
        item = container.pop()
        kind = str(item.KIND)
        pending = len(container)

        with trace_span(f"execute.{kind}") as span:
            if span is not None:
                span.annotate("kind", kind)
            try:
                item.execute()
            except WorkQueueError as exc:
                if not self._keep_going:
                    raise
                state.failed += 1
                state.warnings.append(f"{type(item).__name__} failed: {exc}")
                logger.warning("%s failed (%s): %s", kind, exc.code, exc)
                return

        state.executed += 1
        description = item.describe()
        state.descriptions.append(description)
        logger.debug("Executed %s: %s", kind, description)

        removed = pending - len(container)
        if removed > 0:
            state.discarded += removed
            logger.warning("%s discarded %d pending item(s)", kind, removed)
            if self._report_discarded:
                state.warnings.append(
                    f"{type(item).__name__} removed {removed} pending item(s) before they ran"
                )

        if self._plugins is not None:
            self._plugins.dispatch(
                "post_execute",
                state.warnings,
                kind=kind,
                description=description,
                result_producing=item.is_result_producing(),
            )

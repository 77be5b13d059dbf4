"""Catalog of the work item kinds."""

from __future__ import annotations

from workq.domain.lifecycle import SINGLE_USE_TRANSITIONS
from workq.domain.tasks import TASK_TYPES
from workq.services.result import ServiceResult


def list_kinds() -> ServiceResult:
    """One entry per concrete work item type, in declaration order."""
    items = [
        {
            "kind": str(kind),
            "type": task_type.__name__,
            "result_producing": task_type.RESULT_PRODUCING,
            "single_use": task_type.TRANSITIONS is SINGLE_USE_TRANSITIONS,
        }
        for kind, task_type in TASK_TYPES.items()
    ]
    return ServiceResult.success("kinds", {"items": items, "count": len(items)})

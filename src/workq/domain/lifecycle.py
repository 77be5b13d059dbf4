"""Work item kinds, execution states, and transition maps.

Every work item starts ``unexecuted`` and moves to ``executed`` on its
first successful ``execute()``.  Reentrant kinds may execute again and
stay ``executed`` with refreshed state; single-use kinds reject it.
"""

from __future__ import annotations

from enum import StrEnum


class TaskState(StrEnum):
    """Execution state of a work item."""

    UNEXECUTED = "unexecuted"
    EXECUTED = "executed"


class TaskKind(StrEnum):
    """Closed set of concrete work item types."""

    BINARY = "binary"
    ENQUEUE = "enqueue"
    COUNT_SIZE = "count_size"
    COUNT_RESULT_PRODUCING = "count_result_producing"
    CLEAR = "clear"
    COUNT_LIVE = "count_live"


# --- Transition maps ---

REENTRANT_TRANSITIONS: dict[str, list[str]] = {
    "unexecuted": ["executed"],
    "executed": ["executed"],
}

SINGLE_USE_TRANSITIONS: dict[str, list[str]] = {
    "unexecuted": ["executed"],
    "executed": [],
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]],
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed

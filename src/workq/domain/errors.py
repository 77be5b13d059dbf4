"""Error taxonomy of the work queue core.

Errors are never handled inside the domain layer; they propagate to
whoever drives the queue.
"""

from __future__ import annotations


class WorkQueueError(Exception):
    """Base for all work queue errors."""

    code = "WORK_QUEUE_ERROR"


class InvalidArgumentError(WorkQueueError, ValueError):
    """A work item was constructed with a missing or unusable argument."""

    code = "INVALID_ARGUMENT"


class InvalidStateError(WorkQueueError, RuntimeError):
    """A work item was asked to do something its current state forbids."""

    code = "INVALID_STATE"

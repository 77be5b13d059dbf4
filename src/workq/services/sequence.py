"""The demo sequence: eight work items exercising every kind.

Drained LIFO, ``CountLiveObjectsTask`` runs first and the ``Plus`` item at
the bottom never runs: ``ClearContainerTask`` removes it first.
"""

from __future__ import annotations

from workq.domain.container import TaskContainer
from workq.domain.operations import get_operation
from workq.domain.tasks import (
    BinaryOperationTask,
    ClearContainerTask,
    CountContainerSizeTask,
    CountLiveObjectsTask,
    CountResultProducingTask,
    EnqueueTask,
)


def build_demo_sequence(container: TaskContainer) -> TaskContainer:
    """Append the demo work items to *container* and return it."""
    container.push(BinaryOperationTask("Plus", get_operation("add"), 3, 7))
    container.push(ClearContainerTask(container))
    container.push(CountContainerSizeTask(container))
    container.push(BinaryOperationTask("Minus", get_operation("subtract"), 412, 42))
    multiplication = BinaryOperationTask("Multiplication", get_operation("multiply"), 31, 72)
    container.push(EnqueueTask(container, multiplication))
    container.push(CountResultProducingTask(container))
    container.push(BinaryOperationTask("Division", get_operation("divide"), 34, 7))
    container.push(CountLiveObjectsTask())
    return container

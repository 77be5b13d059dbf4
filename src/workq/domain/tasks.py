"""Work items — the polymorphic unit-of-work contract and its six kinds.

Contract shared by every :class:`WorkItem`:

- ``execute()``: perform the unit of work, mutating internal state.
- ``is_result_producing()``: type-level classification, callable at any time.
- ``describe()``: text rendering of the current state.

Every work item is a :class:`~workq.domain.registry.Tracked` entity.
Items that operate on the shared container hold a
:class:`~workq.domain.container.ContainerRef`, never the container itself.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self

from workq.domain.capabilities import Named
from workq.domain.container import ContainerRef, TaskContainer
from workq.domain.errors import InvalidArgumentError, InvalidStateError
from workq.domain.lifecycle import (
    REENTRANT_TRANSITIONS,
    SINGLE_USE_TRANSITIONS,
    TaskKind,
    TaskState,
    is_valid_transition,
)
from workq.domain.operations import BinaryOperation, format_number
from workq.domain.registry import LIFETIME_REGISTRY, Tracked

_NOT_RUN = " wasn't running yet."


class WorkItem(Tracked, ABC):
    """Abstract unit of deferred, explicitly invoked computation.

    Subclasses set ``KIND`` and ``RESULT_PRODUCING`` and implement
    :meth:`_run` and :meth:`describe`.
    """

    KIND: ClassVar[TaskKind]
    RESULT_PRODUCING: ClassVar[bool]
    TRANSITIONS: ClassVar[dict[str, list[str]]] = REENTRANT_TRANSITIONS

    def __init__(self) -> None:
        super().__init__()
        self._state = TaskState.UNEXECUTED

    @property
    def state(self) -> TaskState:
        return self._state

    @property
    def executed(self) -> bool:
        return self._state is TaskState.EXECUTED

    def execute(self) -> None:
        """Run the unit of work.

        Raises:
            InvalidStateError: If this kind does not allow another execution.
        """
        if not is_valid_transition(self._state, TaskState.EXECUTED, self.TRANSITIONS):
            msg = f"{type(self).__name__} already executed."
            raise InvalidStateError(msg)
        self._run()
        self._state = TaskState.EXECUTED

    def is_result_producing(self) -> bool:
        return type(self).RESULT_PRODUCING

    @abstractmethod
    def _run(self) -> None:
        """Kind-specific work; called by :meth:`execute`."""

    @abstractmethod
    def describe(self) -> str:
        """Describe the item's current state."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._state}>"


def _counter_description(title: str, value: int | None) -> str:
    if value is None:
        return title + _NOT_RUN
    return f"{title} result = {value}"


# ---------------------------------------------------------------------------
# Concrete work items
# ---------------------------------------------------------------------------


class BinaryOperationTask(WorkItem):
    """Named binary float operation over two fixed operands."""

    KIND = TaskKind.BINARY
    RESULT_PRODUCING = True

    def __init__(
        self,
        name: str | Named,
        operation: BinaryOperation,
        first: float,
        second: float,
    ) -> None:
        super().__init__()
        self._named = copy.copy(name) if isinstance(name, Named) else Named(name)
        self._operation = operation
        self._first = float(first)
        self._second = float(second)
        self._result: float | None = None

    @property
    def name(self) -> str:
        return self._named.label

    @property
    def operands(self) -> tuple[float, float]:
        return self._first, self._second

    @property
    def result(self) -> float | None:
        return self._result

    def __copy__(self) -> Self:
        clone = super().__copy__()
        clone._named = copy.copy(self._named)
        return clone

    def assign(self, other: Self) -> Self:
        """Take *other*'s operands, operation and result; the name is assigned in place."""
        named = self._named
        super().assign(other)
        self._named = named
        named.assign(other._named)
        return self

    def _run(self) -> None:
        self._result = self._operation(self._first, self._second)

    def describe(self) -> str:
        info = (
            f"{self._named.describe()}, binary operation with arguments = "
            f"({format_number(self._first)}, {format_number(self._second)})"
        )
        if self._result is not None:
            info += f" Result = {format_number(self._result)}"
        return info


class EnqueueTask(WorkItem):
    """Moves one held work item to the back of the shared container.

    Single use: the held slot is empty after the first execution. The item
    has exactly one owner, so the task cannot be copied or assigned.
    """

    KIND = TaskKind.ENQUEUE
    RESULT_PRODUCING = False
    TRANSITIONS = SINGLE_USE_TRANSITIONS

    def __init__(self, container: TaskContainer, item: WorkItem | None) -> None:
        if item is None:
            msg = "Empty task in EnqueueTask constructor."
            raise InvalidArgumentError(msg)
        super().__init__()
        self._container = ContainerRef(container)
        self._item: WorkItem | None = item
        # Frozen at construction; later changes to the item are not reflected.
        self._item_description = item.describe()

    @property
    def pending_item(self) -> WorkItem | None:
        return self._item

    def __copy__(self) -> Self:
        msg = "EnqueueTask owns its pending item and cannot be copied"
        raise TypeError(msg)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.__copy__()

    def assign(self, other: Self) -> Self:
        msg = "EnqueueTask owns its pending item and cannot be assigned"
        raise TypeError(msg)

    def _run(self) -> None:
        if self._item is None:
            msg = "EnqueueTask already executed."
            raise InvalidStateError(msg)
        self._container.get().push(self._item)
        self._item = None

    def describe(self) -> str:
        return f"EnqueueTask adds task [{self._item_description}]"


class CountContainerSizeTask(WorkItem):
    """Captures how many items the shared container holds."""

    KIND = TaskKind.COUNT_SIZE
    RESULT_PRODUCING = True

    def __init__(self, container: TaskContainer) -> None:
        super().__init__()
        self._container = ContainerRef(container)
        self._count: int | None = None

    @property
    def result(self) -> int | None:
        return self._count

    def _run(self) -> None:
        self._count = len(self._container.get())

    def describe(self) -> str:
        return _counter_description("CountContainerSizeTask", self._count)


class CountResultProducingTask(WorkItem):
    """Counts result-producing items currently in the shared container.

    Includes itself when it is still inside the container at execution time.
    """

    KIND = TaskKind.COUNT_RESULT_PRODUCING
    RESULT_PRODUCING = True

    def __init__(self, container: TaskContainer) -> None:
        super().__init__()
        self._container = ContainerRef(container)
        self._count: int | None = None

    @property
    def result(self) -> int | None:
        return self._count

    def _run(self) -> None:
        self._count = sum(1 for item in self._container.get() if item.is_result_producing())

    def describe(self) -> str:
        return _counter_description("CountResultProducingTask", self._count)


class ClearContainerTask(WorkItem):
    """Removes every item from the shared container.

    Removed items are released immediately, including ones the driver has
    not executed yet.
    """

    KIND = TaskKind.CLEAR
    RESULT_PRODUCING = False

    def __init__(self, container: TaskContainer) -> None:
        super().__init__()
        self._container = ContainerRef(container)

    def _run(self) -> None:
        self._container.get().clear()

    def describe(self) -> str:
        return "ClearContainerTask"


class CountLiveObjectsTask(WorkItem):
    """Captures the process-wide lifetime registry count."""

    KIND = TaskKind.COUNT_LIVE
    RESULT_PRODUCING = True

    def __init__(self) -> None:
        super().__init__()
        self._count: int | None = None

    @property
    def result(self) -> int | None:
        return self._count

    def _run(self) -> None:
        self._count = LIFETIME_REGISTRY.count()

    def describe(self) -> str:
        return _counter_description("CountLiveObjectsTask", self._count)


TASK_TYPES: dict[TaskKind, type[WorkItem]] = {
    TaskKind.BINARY: BinaryOperationTask,
    TaskKind.ENQUEUE: EnqueueTask,
    TaskKind.COUNT_SIZE: CountContainerSizeTask,
    TaskKind.COUNT_RESULT_PRODUCING: CountResultProducingTask,
    TaskKind.CLEAR: ClearContainerTask,
    TaskKind.COUNT_LIVE: CountLiveObjectsTask,
}

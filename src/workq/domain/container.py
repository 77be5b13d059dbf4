"""The shared container — pending work that is also a mutation target.

The driver owns a :class:`TaskContainer` and every item inside it.
Work items that read or mutate it hold a weak reference only, so they
never keep the container (or its elements) alive.  Nothing stops a work
item from removing elements the driver still means to execute; see
:class:`~workq.domain.tasks.ClearContainerTask`.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from workq.domain.errors import InvalidStateError

if TYPE_CHECKING:
    from workq.domain.tasks import WorkItem


class TaskContainer:
    """Ordered sequence of work items; the back is the most recent insert."""

    def __init__(self, items: Iterable[WorkItem] = ()) -> None:
        self._items: list[WorkItem] = list(items)

    def push(self, item: WorkItem) -> None:
        self._items.append(item)

    def extend(self, items: Iterable[WorkItem]) -> None:
        self._items.extend(items)

    def pop(self) -> WorkItem:
        """Remove and return the most recently inserted item.

        Raises:
            IndexError: If the container is empty.
        """
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[WorkItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> WorkItem:
        return self._items[index]

    def __repr__(self) -> str:
        return f"TaskContainer(size={len(self._items)})"


class ContainerRef:
    """Non-owning handle on a :class:`TaskContainer`."""

    def __init__(self, container: TaskContainer) -> None:
        self._ref = weakref.ref(container)

    def get(self) -> TaskContainer:
        """Resolve the container.

        Raises:
            InvalidStateError: If the container has already been destroyed.
        """
        container = self._ref()
        if container is None:
            msg = "Shared container no longer exists."
            raise InvalidStateError(msg)
        return container

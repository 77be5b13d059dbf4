"""Process-wide lifetime accounting for tracked entities.

The registry is a single counter that starts at zero when the process
starts and is adjusted by tracked entities:

- +1 on construction and on ``copy.copy`` / ``copy.deepcopy``.
- -1 when a tracked instance is destroyed (weakref finalizer).
- +1 on :meth:`Tracked.assign`, with no matching decrement.

The last rule makes the counter a cumulative activity counter rather
than a strict live-object count: it only equals the number of live
tracked instances while ``assign`` has never been called.
"""

from __future__ import annotations

import copy
import weakref
from typing import Any, Self


class LifetimeRegistry:
    """Counter of currently tracked instances."""

    def __init__(self) -> None:
        self._count = 0

    def register(self) -> None:
        self._count += 1

    def unregister(self) -> None:
        self._count -= 1

    def count(self) -> int:
        return self._count

    def track(self, obj: object) -> None:
        """Register *obj* and unregister it exactly once when it is destroyed."""
        self.register()
        weakref.finalize(obj, self.unregister)


LIFETIME_REGISTRY = LifetimeRegistry()


def live_objects() -> int:
    """Current value of the process-wide registry."""
    return LIFETIME_REGISTRY.count()


class Tracked:
    """Base for every entity that participates in lifetime accounting.

    Subclasses must call ``super().__init__()``.
    """

    def __init__(self) -> None:
        LIFETIME_REGISTRY.track(self)

    def __copy__(self) -> Self:
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        LIFETIME_REGISTRY.track(clone)
        return clone

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        for key, value in self.__dict__.items():
            clone.__dict__[key] = copy.deepcopy(value, memo)
        LIFETIME_REGISTRY.track(clone)
        return clone

    def assign(self, other: Self) -> Self:
        """Overwrite this instance's state with *other*'s.

        Counts as one more registration even though no instance is created.
        """
        if not isinstance(other, type(self)):
            msg = f"cannot assign {type(other).__name__} to {type(self).__name__}"
            raise TypeError(msg)
        if other is not self:
            self.__dict__.update(other.__dict__)
        LIFETIME_REGISTRY.register()
        return self

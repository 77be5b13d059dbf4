"""Capabilities shared by work items: describing and naming."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from workq.domain.registry import Tracked


@runtime_checkable
class Describable(Protocol):
    """Anything that can render its current state as text."""

    def describe(self) -> str: ...


class Named(Tracked):
    """A tracked label, composed into work items that carry a name."""

    def __init__(self, label: str) -> None:
        super().__init__()
        self._label = label

    @property
    def label(self) -> str:
        return self._label

    def describe(self) -> str:
        return f"Object name {self._label}"

    def __repr__(self) -> str:
        return f"Named({self._label!r})"

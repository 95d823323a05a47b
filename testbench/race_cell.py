"""Shareable mutable containers that make race conditions observable.

A :class:`RaceCell` keeps two separate copies of its value and updates them
one after the other, so that a write is never a single indivisible step. A
reader that compares both copies can therefore tell when it observed the cell
in the middle of a write, which helps detect failures of the synchronization
protocol protecting the cell.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

__all__ = ["Consistent", "Inconsistent", "RaceCell", "Racey"]

T = TypeVar("T")


@dataclass(frozen=True)
class Consistent(Generic[T]):
    """The cell was internally consistent; ``value`` is a copy of its content."""

    value: T


@dataclass(frozen=True)
class Inconsistent:
    """The cell was internally inconsistent: a data race has occurred."""


Racey = Union[Consistent[Any], Inconsistent]


class RaceCell(Generic[T]):
    """Mutable container that is never read or written in a single step."""

    __slots__ = ("_local", "_remote")

    def __init__(self, value: T) -> None:
        self._local = copy.copy(value)
        self._remote = value

    def set(self, value: T) -> None:
        """Update both copies of the content, one after the other."""
        self._local = copy.copy(value)
        self._remote = value

    def get(self) -> Racey:
        """Read the content, reporting a race if the two copies disagree."""
        local = self._local
        remote = self._remote
        if local == remote:
            return Consistent(local)
        return Inconsistent()

    def clone(self) -> RaceCell[T]:
        """Return a new cell holding both copies as-is, even if inconsistent."""
        twin = RaceCell.__new__(RaceCell)
        twin._local = copy.copy(self._local)
        twin._remote = copy.copy(self._remote)
        return twin

    def __copy__(self) -> RaceCell[T]:
        return self.clone()

    def __repr__(self) -> str:
        return f"RaceCell(local={self._local!r}, remote={self._remote!r})"
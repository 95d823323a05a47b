"""Call barriers for handing callables to testing and benchmarking code.

These helpers invoke a callable through a separate function frame, so a
callable can be passed around and run without the caller knowing what it is.
Exceptions raised by the callable propagate unchanged.
"""

from __future__ import annotations

from typing import Callable, TypeVar

__all__ = ["call_once", "call_mut", "call"]

T = TypeVar("T")


def call_once(callable: Callable[[], T]) -> T:
    """Invoke a callable that is meant to run a single time, returning its result."""
    return callable()


def call_mut(callable: Callable[[], T]) -> T:
    """Invoke a callable that may update its own state, returning its result."""
    return callable()


def call(callable: Callable[[], T]) -> T:
    """Invoke a stateless callable, returning its result."""
    return callable()
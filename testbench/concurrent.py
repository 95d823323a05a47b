"""Run operations concurrently to test and benchmark thread-safe code.

Code meant for several threads must be checked while its operations really
overlap, not only one after the other. The helpers here start the given
callables on separate threads, release them together through a barrier, and
re-raise in the calling thread any exception one of them raised.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, TypeVar

from testbench import noinline

__all__ = ["concurrent_test_2", "concurrent_test_3", "run_under_contention"]

R = TypeVar("R")


class _Worker(threading.Thread):
    """Thread that keeps the exception its target raised, if any."""

    def __init__(self, target: Callable[[], Any]) -> None:
        super().__init__(daemon=True)
        self._job = target
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            self._job()
        except BaseException as exc:  # re-raised by the thread that joins us
            self.error = exc


def _join_all(workers: list[_Worker], main_error: BaseException | None) -> None:
    """Wait for every worker, then raise the first error that occurred."""
    for worker in workers:
        worker.join()
    if main_error is not None:
        raise main_error
    for worker in workers:
        if worker.error is not None:
            raise worker.error


def _run_concurrently(*callables: Callable[[], Any]) -> None:
    """Run all callables at once; the last one runs on the calling thread."""
    *background, foreground = callables
    barrier = threading.Barrier(len(callables))

    def released(func: Callable[[], Any]) -> Callable[[], None]:
        def job() -> None:
            barrier.wait()
            noinline.call_once(func)

        return job

    workers = [_Worker(released(func)) for func in background]
    for worker in workers:
        worker.start()

    main_error: BaseException | None = None
    try:
        barrier.wait()
        noinline.call_once(foreground)
    except BaseException as exc:
        main_error = exc
    _join_all(workers, main_error)


def concurrent_test_2(f1: Callable[[], Any], f2: Callable[[], Any]) -> None:
    """Run two operations concurrently and wait for both to finish.

    ``f1`` runs on a new thread and ``f2`` on the calling one; both start
    together. Any exception raised by either is re-raised here once both
    have finished, the calling thread's own exception taking precedence.
    """
    _run_concurrently(f1, f2)


def concurrent_test_3(
    f1: Callable[[], Any], f2: Callable[[], Any], f3: Callable[[], Any]
) -> None:
    """Run three operations concurrently and wait for all of them to finish.

    ``f1`` and ``f2`` run on new threads and ``f3`` on the calling one.
    Exceptions are re-raised as in :func:`concurrent_test_2`.
    """
    _run_concurrently(f1, f2, f3)


def run_under_contention(
    antagonist: Callable[[], Any], benchmark: Callable[[], R]
) -> R:
    """Run ``benchmark`` while ``antagonist`` is called in a loop on another thread.

    The antagonist loop starts together with the benchmark and stops once the
    benchmark has returned. The benchmark's result is returned. An exception
    from the benchmark, or else one that ended the antagonist loop, is
    re-raised after the antagonist thread has stopped.
    """
    start_barrier = threading.Barrier(2)
    keep_going = threading.Event()
    keep_going.set()

    def contend() -> None:
        start_barrier.wait()
        while keep_going.is_set():
            antagonist()

    worker = _Worker(contend)
    worker.start()

    main_error: BaseException | None = None
    result: R | None = None
    try:
        start_barrier.wait()
        result = benchmark()
    except BaseException as exc:
        main_error = exc
    finally:
        keep_going.clear()
    _join_all([worker], main_error)
    return result  # type: ignore[return-value]
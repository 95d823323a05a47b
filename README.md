# testbench

Testing and benchmarking tools for concurrent Python code.

`testbench` collects a few small utilities for testing and benchmarking
thread synchronization primitives. It has no dependencies outside the
standard library and runs on Python 3.10 and later.

## Installation

```
pip install testbench
```

## Running operations concurrently

`testbench.concurrent.concurrent_test_2(f1, f2)` and
`concurrent_test_3(f1, f2, f3)` run two or three callables that take no
arguments at the same time. The last callable runs on the calling thread and
the others each on a new thread; a barrier releases all of them together.
Both functions return once every callable has finished.

If any callable raises, the exception is re-raised in the caller after all
threads have been joined. An exception from the callable run on the calling
thread takes precedence; otherwise the first background callable's exception,
in argument order, is raised.

```python
import threading
from testbench.concurrent import concurrent_test_2

lock = threading.Lock()
counter = [0]

def bump():
    for _ in range(10_000):
        with lock:
            counter[0] += 1

concurrent_test_2(bump, bump)
assert counter[0] == 20_000
```

## Benchmarking under contention

`run_under_contention(antagonist, benchmark)` calls `antagonist` over and
over on a background thread while `benchmark` runs on the calling thread.
Both start together. Once the benchmark returns, the antagonist loop is told
to stop, its thread is joined, and the benchmark's result is returned.

An exception raised by the benchmark is re-raised after the antagonist thread
has stopped; otherwise an exception that ended the antagonist loop is
re-raised.

```python
import time
from testbench.concurrent import run_under_contention

calls = [0]

def antagonist():
    calls[0] += 1

result = run_under_contention(antagonist, lambda: time.sleep(0.1) or "done")
assert result == "done"
assert calls[0] > 0
```

## Detecting races with RaceCell

`testbench.race_cell.RaceCell` stores two copies of a value and updates them
one after the other, so that a write is never a single step. `get()` returns
`Consistent(value)` when both copies compare equal, or `Inconsistent()` when
they differ, which means the read overlapped a write. `Racey` is the type
alias for either result. This makes it easy to check that a synchronization
protocol never exposes a half-finished update.

```python
from testbench.race_cell import Consistent, Inconsistent, RaceCell

cell = RaceCell(-42)
assert cell.get() == Consistent(-42)

cell.set(7)
match cell.get():
    case Consistent(value):
        print("read", value)
    case Inconsistent():
        print("race detected")
```

A cell can be duplicated with `cell.clone()` or `copy.copy(cell)`; the
duplicate keeps both copies as they were, including an inconsistent state.

Values are compared with `==`, so any value whose equality is meaningful can
be stored.

## Call barriers

`testbench.noinline` offers `call_once`, `call_mut` and `call`. Each invokes
the callable given to it with no arguments, returns its result, and lets any
exception it raises propagate unchanged. The concurrent helpers run their
callables through `call_once`.

## Running the tests

```
pip install testbench[test]
pytest
```
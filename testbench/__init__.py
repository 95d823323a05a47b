"""Testing and benchmarking tools for concurrent code: concurrent runners, race-detecting cells and call barriers."""

__version__ = "1.0.1"
__all__ = ["concurrent", "noinline", "race_cell"]
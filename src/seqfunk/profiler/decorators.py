"""Decorators for easy profiling."""

import functools
from typing import Any, Callable, Optional

from seqfunk.config import config
from seqfunk.profiler.profiler import ProfilingReport
from seqfunk.sequences import Sequence


def profiled(name: Optional[str] = None,
             on_report: Optional[Callable[[ProfilingReport], None]] = None) -> Callable:
    """
    Decorator for functions that build a pipeline.

    While ``config.enable_profiling`` is set, the returned iterable is wrapped
    in a lazily profiled Sequence; otherwise it is returned untouched.

    Example:
        @profiled(name="evens")
        def evens(numbers):
            return lazily.filter(numbers, lambda n: n % 2 == 0)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            result = func(*args, **kwargs)
            if not config.enable_profiling:
                return result

            def record(report: ProfilingReport) -> None:
                # Store report on function for access
                wrapper.last_report = report
                if on_report is not None:
                    on_report(report)

            return Sequence(result).profiled(name or func.__name__, on_report=record)

        wrapper.last_report = None
        return wrapper

    return decorator

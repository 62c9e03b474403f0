"""Profiling for lazy pipelines."""

from seqfunk.profiler.profiler import (
    PipelineProfiler,
    ProfiledCursor,
    ProfilingReport,
)
from seqfunk.profiler.decorators import profiled

__all__ = [
    "PipelineProfiler",
    "ProfiledCursor",
    "ProfilingReport",
    "profiled",
]

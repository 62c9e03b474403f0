"""
Pipeline profiler: measure what a traversal of a lazy sequence costs.

Features:
- Per-pull latency statistics (mean, median, p95, max)
- Process RSS sampled while pulling
- Traced allocation peak for eager profiling runs
- Warnings when a traversal grows memory past the configured threshold
"""

import json
import logging
import time
import tracemalloc
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

import numpy as np
import psutil

from seqfunk.config import config
from seqfunk.cursors import Cursor
from seqfunk.errors import check_non_negative
from seqfunk.sequences import Sequence

T = TypeVar('T')

logger = logging.getLogger(__name__)


@dataclass
class ProfilingReport:
    """Outcome of one profiled traversal."""
    name: str
    timestamp: str
    elements: int
    duration: float
    mean_latency: float
    median_latency: float
    p95_latency: float
    max_latency: float
    rss_start: int
    rss_end: int
    rss_peak: int
    traced_peak: Optional[int]
    summary: str

    @property
    def rss_growth(self) -> int:
        return self.rss_end - self.rss_start

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary."""
        return asdict(self)

    def save(self, path: str) -> None:
        """Save report to JSON file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


def _latency_stats(latencies: List[float]) -> Dict[str, float]:
    if not latencies:
        return {"mean": 0.0, "median": 0.0, "p95": 0.0, "max": 0.0}
    values = np.asarray(latencies, dtype=float)
    return {
        "mean": float(values.mean()),
        "median": float(np.percentile(values, 50)),
        "p95": float(np.percentile(values, 95)),
        "max": float(values.max()),
    }


def _generate_summary(name: str, elements: int, duration: float,
                      stats: Dict[str, float], rss_growth: int) -> str:
    """Generate human-readable summary."""
    summary_parts = [
        f"Pipeline Profile: {name}",
        f"Elements: {elements}",
        f"Duration: {duration:.4f}s",
        f"Latency mean/p95/max: {stats['mean'] * 1e6:.1f}us / "
        f"{stats['p95'] * 1e6:.1f}us / {stats['max'] * 1e6:.1f}us",
        f"RSS growth: {config.format_bytes(rss_growth)}",
    ]
    if rss_growth > config.memory_warning_threshold:
        summary_parts.append("Memory grew during traversal; check for materializing steps")
    return "\n".join(summary_parts)


class ProfiledCursor(Cursor[T]):
    """
    Pass-through cursor that times each pull.

    Measurement starts with the first pull. When the upstream reports
    exhaustion a ``ProfilingReport`` is logged and handed to ``on_report``.
    A cursor that is abandoned early never reports.
    """

    def __init__(self, cursor: Cursor[T], name: Optional[str] = None,
                 on_report: Optional[Callable[[ProfilingReport], None]] = None,
                 sample_interval: Optional[int] = None):
        self._upstream = cursor
        self.name = name or "pipeline"
        self._on_report = on_report
        self._sample_interval = max(1, sample_interval or config.profile_sample_interval)
        self._latencies: List[float] = []
        self._process: Optional[psutil.Process] = None
        self._start_time = 0.0
        self._rss_start = 0
        self._rss_peak = 0
        self.report: Optional[ProfilingReport] = None

    def _start(self) -> None:
        self._process = psutil.Process()
        self._rss_start = self._rss_peak = self._process.memory_info().rss
        self._start_time = time.perf_counter()

    def _sample(self) -> int:
        rss = self._process.memory_info().rss
        self._rss_peak = max(self._rss_peak, rss)
        return rss

    def _finish(self) -> None:
        duration = time.perf_counter() - self._start_time
        rss_end = self._sample()
        stats = _latency_stats(self._latencies)
        rss_growth = rss_end - self._rss_start

        self.report = ProfilingReport(
            name=self.name,
            timestamp=datetime.now().isoformat(),
            elements=len(self._latencies),
            duration=duration,
            mean_latency=stats["mean"],
            median_latency=stats["median"],
            p95_latency=stats["p95"],
            max_latency=stats["max"],
            rss_start=self._rss_start,
            rss_end=rss_end,
            rss_peak=self._rss_peak,
            traced_peak=None,
            summary=_generate_summary(self.name, len(self._latencies), duration, stats, rss_growth),
        )

        logger.info("Profiled %s: %d elements in %.4fs", self.name, self.report.elements, duration)
        if rss_growth > config.memory_warning_threshold:
            logger.warning("%s grew RSS by %s while iterating",
                           self.name, config.format_bytes(rss_growth))
        if self._rss_peak > config.memory_limit:
            logger.warning("%s peaked at %s, above the memory limit of %s",
                           self.name, config.format_bytes(self._rss_peak),
                           config.format_bytes(config.memory_limit))

        if self._on_report is not None:
            self._on_report(self.report)

    def has_next(self) -> bool:
        if self._process is None:
            self._start()
        available = self._upstream.has_next()
        if not available and self.report is None:
            self._finish()
        return available

    def next(self) -> T:
        started = time.perf_counter()
        if not self.has_next():
            raise self._exhausted()
        item = self._upstream.next()
        self._latencies.append(time.perf_counter() - started)
        if len(self._latencies) % self._sample_interval == 0:
            self._sample()
        return item


class PipelineProfiler:
    """Drive a sequence to exhaustion and report on the traversal."""

    def __init__(self, sample_interval: Optional[int] = None):
        self.sample_interval = sample_interval or config.profile_sample_interval

    def profile(self, sequence: Iterable[T], limit: Optional[int] = None,
                name: Optional[str] = None) -> ProfilingReport:
        """
        Pull up to ``limit`` elements (all if None) without keeping them.

        Args:
            sequence: Any iterable or Sequence
            limit: Maximum number of elements to pull; required for infinite sequences
            name: Label used in the report and log lines
        """
        source = Sequence(sequence)
        if limit is not None:
            check_non_negative(limit, "Cannot profile a negative number of elements.")
            source = source.take(limit)

        cursor = ProfiledCursor(iter(source), name=name, sample_interval=self.sample_interval)
        started_tracing = not tracemalloc.is_tracing()
        if started_tracing:
            tracemalloc.start()
        try:
            for _ in cursor:
                pass
            traced_peak = tracemalloc.get_traced_memory()[1]
        finally:
            if started_tracing:
                tracemalloc.stop()

        cursor.report.traced_peak = traced_peak
        return cursor.report

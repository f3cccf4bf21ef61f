"""Timing backend: runs a closure repeatedly and records a duration distribution."""

from __future__ import annotations

import gc
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from ..utils.stats import Statistics, coefficient_of_variation, compute_statistics
from .config import BenchConfig

logger = logging.getLogger(__name__)

Closure = Callable[[], Any]

# Upper bound for auto-calibration so a very cheap closure cannot spin forever.
MAX_ITERATIONS = 1 << 24


@dataclass
class TimingDistribution:
    """Per-iteration durations of one benchmark.

    Attributes:
        samples_ns: Mean nanoseconds per closure call, one value per sample.
        iterations: Closure calls that made up each sample.
    """

    samples_ns: list[float]
    iterations: int
    stats: Statistics = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.stats = compute_statistics(self.samples_ns)

    @property
    def median_ns(self) -> float:
        return self.stats.median

    @property
    def cv(self) -> float:
        """Coefficient of variation across samples."""
        return coefficient_of_variation(self.samples_ns)

    def to_dict(self) -> dict[str, Any]:
        return {
            "iterations": self.iterations,
            "samples_ns": list(self.samples_ns),
            "stats": self.stats.to_dict(),
            "cv": self.cv,
        }


def time_batch(closure: Closure, iterations: int) -> int:
    """Call ``closure`` ``iterations`` times and return elapsed nanoseconds.

    Garbage collection is suspended for the batch, as ``timeit`` does, and
    restored to its previous state afterwards.
    """
    gc_was_enabled = gc.isenabled()
    gc.disable()
    try:
        start = time.perf_counter_ns()
        for _ in range(iterations):
            closure()
        return time.perf_counter_ns() - start
    finally:
        if gc_was_enabled:
            gc.enable()


class Bencher:
    """Measure zero-argument closures according to a ``BenchConfig``.

    Example:
        >>> bencher = Bencher(BenchConfig(measured_runs=5, iterations=100))
        >>> dist = bencher.measure(lambda: sum(range(100)))
        >>> len(dist.samples_ns)
        5
    """

    def __init__(self, config: BenchConfig | None = None) -> None:
        self.config = config or BenchConfig()

    def calibrate(self, closure: Closure) -> int:
        """Find an iteration count whose batch lasts at least ``min_sample_ns``."""
        iterations = 1
        while iterations < MAX_ITERATIONS:
            elapsed = time_batch(closure, iterations)
            if elapsed >= self.config.min_sample_ns:
                break
            iterations *= 2
        return min(iterations, MAX_ITERATIONS)

    def measure(self, closure: Closure) -> TimingDistribution:
        """Warm up, then collect ``measured_runs`` samples of ``closure``.

        Exceptions raised by the closure propagate unchanged.
        """
        for _ in range(self.config.warmup_runs):
            closure()

        iterations = self.config.iterations
        if iterations is None:
            iterations = self.calibrate(closure)
            logger.debug(f"Calibrated to {iterations} iterations per sample")

        samples = []
        for _ in range(self.config.measured_runs):
            elapsed = time_batch(closure, iterations)
            samples.append(elapsed / iterations)

        return TimingDistribution(samples_ns=samples, iterations=iterations)

"""Statistical summaries of timing samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(slots=True)
class Statistics:
    """Container for computed statistics."""

    count: int
    min: float
    max: float
    mean: float
    std: float
    median: float
    p25: float
    p75: float
    p90: float
    p99: float

    def to_dict(self) -> dict[str, float]:
        return {
            "count": self.count,
            "min": self.min,
            "max": self.max,
            "mean": self.mean,
            "std": self.std,
            "median": self.median,
            "p25": self.p25,
            "p75": self.p75,
            "p90": self.p90,
            "p99": self.p99,
        }


def compute_statistics(values: Sequence[float]) -> Statistics:
    """Compute summary statistics for a sequence of values.

    Args:
        values: Sequence of numeric values.

    Returns:
        Statistics object with all computed metrics.
    """
    if len(values) == 0:
        return Statistics(
            count=0,
            min=0.0,
            max=0.0,
            mean=0.0,
            std=0.0,
            median=0.0,
            p25=0.0,
            p75=0.0,
            p90=0.0,
            p99=0.0,
        )

    arr = np.array(values, dtype=np.float64)

    return Statistics(
        count=len(arr),
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        mean=float(np.mean(arr)),
        std=float(np.std(arr)),
        median=float(np.median(arr)),
        p25=float(np.percentile(arr, 25)),
        p75=float(np.percentile(arr, 75)),
        p90=float(np.percentile(arr, 90)),
        p99=float(np.percentile(arr, 99)),
    )


def coefficient_of_variation(values: Sequence[float]) -> float:
    """Compute coefficient of variation (std / mean).

    Used as a relative noise indicator for a timing distribution.

    Returns:
        Coefficient of variation, or 0.0 if mean is zero.
    """
    if len(values) == 0:
        return 0.0

    arr = np.array(values, dtype=np.float64)
    mean = np.mean(arr)

    if mean == 0:
        return 0.0

    return float(np.std(arr) / mean)

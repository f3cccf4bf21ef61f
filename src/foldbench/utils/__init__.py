"""Utility functions for statistics and progress reporting."""

from __future__ import annotations

from .progress import ProgressTask, create_progress
from .stats import Statistics, coefficient_of_variation, compute_statistics

__all__ = [
    # Statistics
    "Statistics",
    "coefficient_of_variation",
    "compute_statistics",
    # Progress reporting
    "ProgressTask",
    "create_progress",
]

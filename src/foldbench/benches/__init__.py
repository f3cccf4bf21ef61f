"""Benchmark bodies. Each factory does its setup and returns the timed closure."""

from __future__ import annotations

from .comparison import COMPARISONS, bench_compare, count_matches, partial_permute
from .constructor import CONSTRUCTORS, bench_construct
from .lookup import LOOKUPS, bench_lookup, count_hits, strided_sample

__all__ = [
    "COMPARISONS",
    "CONSTRUCTORS",
    "LOOKUPS",
    "bench_compare",
    "bench_construct",
    "bench_lookup",
    "count_hits",
    "count_matches",
    "partial_permute",
    "strided_sample",
]

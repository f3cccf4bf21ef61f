"""Lookup benchmark: hash-set membership of prebuilt probe keys.

The table and the probes are sampled from the corpus with different strides,
so some probes are in the table and others are not.
"""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from ..core.barrier import sink
from ..core.strategy import ComparableKey, KeySource, source_name, transform_all
from ..core.timing import Closure
from .comparison import COMPARISONS

T = TypeVar("T")

# name -> key source for table and probes. Same functions as the comparison group.
LOOKUPS: dict[str, KeySource] = dict(COMPARISONS)

TABLE_STRIDE = 2
PROBE_STRIDE = 3


def strided_sample(items: Sequence[T], stride: int) -> list[T]:
    """Every ``stride``-th element, starting with the first.

    Raises:
        ValueError: If ``stride`` is less than 1.
    """
    if stride < 1:
        raise ValueError(f"stride must be at least 1, got {stride}")
    return list(items[::stride])


def count_hits(table: set[ComparableKey], probes: Iterable[ComparableKey]) -> int:
    """Number of probes found in ``table``."""
    return sum(1 for probe in probes if probe in table)


def build_table_and_probes(
    words: Sequence[str],
    source: KeySource,
    table_stride: int = TABLE_STRIDE,
    probe_stride: int = PROBE_STRIDE,
) -> tuple[set[ComparableKey], list[ComparableKey]]:
    """Build the lookup table and the probe list.

    Raises:
        ValueError: If the strides are equal or not positive.
    """
    if table_stride == probe_stride:
        raise ValueError(f"table and probe strides must differ, both are {table_stride}")
    table = set(transform_all(strided_sample(words, table_stride), source))
    probes = transform_all(strided_sample(words, probe_stride), source)
    return table, probes


def bench_lookup(
    words: Sequence[str],
    source: KeySource,
    table_stride: int = TABLE_STRIDE,
    probe_stride: int = PROBE_STRIDE,
) -> Closure:
    """Return a closure that queries the table once per probe.

    The set and the probes are built here, before timing starts. The closure
    only performs membership tests.

    Raises:
        ValueError: If every probe hits or every probe misses.
    """
    table, probes = build_table_and_probes(words, source, table_stride, probe_stride)

    hits = count_hits(table, probes)
    if hits == 0 or hits == len(probes):
        raise ValueError(
            f"lookup with {source_name(source)} over {len(probes)} probes "
            f"is one-sided: {hits} hits"
        )

    def run() -> None:
        for probe in probes:
            sink(probe in table)

    return run

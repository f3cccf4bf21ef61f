"""Comparison benchmark: pairwise equality of prebuilt keys.

The right-hand sequence is a partially permuted copy of the left one, built
with the same key source, so the timed loop sees both equal and unequal pairs
instead of one branch only.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from ..core.barrier import sink
from ..core.strategy import ComparableKey, KeySource, Strategy, source_name, transform_all
from ..core.timing import Closure
from ..keys import UniCase

T = TypeVar("T")

# name -> key source used on both sides. Registration order is report order.
COMPARISONS: dict[str, KeySource] = {
    "fast_path_lower": Strategy.FAST_PATH_LOWER,
    "full_fold_lower": Strategy.FULL_FOLD_LOWER,
    "fast_path_upper": Strategy.FAST_PATH_UPPER,
    "full_fold_upper": Strategy.FULL_FOLD_UPPER,
    "unicase_new": UniCase.new,
}

SWAP_STEP = 2


def partial_permute(items: Sequence[T]) -> list[T]:
    """Return a copy with every other element of the first half mirrored.

    For ``i`` in ``0, 2, 4, ...`` below ``len // 2`` the elements at ``i`` and
    ``len - i - 1`` are swapped. Odd positions of the first half and the
    middle stay in place, so the copy matches the original only partly.
    """
    permuted = list(items)
    n = len(permuted)
    for i in range(0, n // 2, SWAP_STEP):
        j = n - i - 1
        permuted[i], permuted[j] = permuted[j], permuted[i]
    return permuted


def count_matches(left: Sequence[ComparableKey], right: Sequence[ComparableKey]) -> int:
    """Count equal pairs when zipping ``left`` with ``right``.

    Raises:
        ValueError: If the sequences differ in length.
    """
    return sum(1 for a, b in zip(left, right, strict=True) if a == b)


def build_pair(
    words: Sequence[str],
    source: KeySource,
) -> tuple[list[ComparableKey], list[ComparableKey]]:
    """Build the left keys in corpus order and the permuted right keys."""
    return transform_all(words, source), partial_permute(transform_all(words, source))


def bench_compare(words: Sequence[str], source: KeySource) -> Closure:
    """Return a closure that counts equal pairs between two key sequences.

    Keys are built here, before timing starts. The closure only compares.

    Args:
        words: Corpus words.
        source: Strategy or key constructor used for both sequences.

    Raises:
        ValueError: If every pair is equal or every pair differs.
    """
    left_keys, right_keys = build_pair(words, source)

    matches = count_matches(left_keys, right_keys)
    if matches == 0 or matches == len(left_keys):
        raise ValueError(
            f"comparison with {source_name(source)} over {len(left_keys)} words "
            f"is one-sided: {matches} matches"
        )

    def run() -> None:
        count = 0
        for a, b in zip(left_keys, right_keys):
            if a == b:
                count += 1
        sink(count)

    return run

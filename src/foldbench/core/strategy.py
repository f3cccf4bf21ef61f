"""Key construction strategies used by the comparison and lookup benchmarks."""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Callable, Sequence, Union

from ..keys import Ascii, UniCase

ComparableKey = Union[Ascii, UniCase]

# Builds one key from one word, e.g. ``UniCase.new``.
KeyBuilder = Callable[[str], ComparableKey]


class Strategy(str, Enum):
    """How a raw word is turned into a comparable key.

    ``*_UPPER`` variants upper-case the word with full Unicode case mapping
    (``"ß".upper() == "SS"``) before wrapping it, which produces keys whose
    case differs from the corpus.
    """

    FAST_PATH_LOWER = "fast_path_lower"
    FULL_FOLD_LOWER = "full_fold_lower"
    FAST_PATH_UPPER = "fast_path_upper"
    FULL_FOLD_UPPER = "full_fold_upper"


# Either a strategy variant or a plain key constructor.
KeySource = Union[Strategy, KeyBuilder]


def transform(word: str, variant: Strategy) -> ComparableKey:
    """Build a comparable key for ``word`` under ``variant``.

    The key owns its own copy of the text. The same word and variant always
    produce equal keys with identical backing bytes.

    Args:
        word: Raw word from a corpus.
        variant: Construction strategy.

    Returns:
        An ``Ascii`` key for the fast-path variants, a ``UniCase`` key with
        full folding for the others.

    Raises:
        ValueError: If ``variant`` is not a known strategy.
    """
    if variant is Strategy.FAST_PATH_LOWER:
        return Ascii(word)
    elif variant is Strategy.FULL_FOLD_LOWER:
        return UniCase.unicode(word)
    elif variant is Strategy.FAST_PATH_UPPER:
        return Ascii(word.upper())
    elif variant is Strategy.FULL_FOLD_UPPER:
        return UniCase.unicode(word.upper())
    else:
        raise ValueError(f"Unknown strategy: {variant!r}")


def key_builder(source: KeySource) -> KeyBuilder:
    """Return a one-word key constructor for a strategy or a constructor."""
    if isinstance(source, Strategy):
        return partial(transform, variant=source)
    return source


def transform_all(words: Sequence[str], source: KeySource) -> list[ComparableKey]:
    """Build keys for every word, preserving order."""
    make = key_builder(source)
    return [make(word) for word in words]


def source_name(source: KeySource) -> str:
    """Short name of a key source for log and error messages."""
    if isinstance(source, Strategy):
        return source.value
    return getattr(source, "__qualname__", repr(source))

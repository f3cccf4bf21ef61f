"""Construction benchmark: the cost of building a key for every word."""

from __future__ import annotations

from typing import Callable, Sequence

from ..core.barrier import sink
from ..core.strategy import ComparableKey
from ..core.timing import Closure
from ..keys import Ascii, UniCase

Constructor = Callable[[str], ComparableKey]

# Registration order is report order.
CONSTRUCTORS: dict[str, Constructor] = {
    "ascii": Ascii,
    "unicase_new": UniCase.new,
    "unicase_unicode": UniCase.unicode,
}


def bench_construct(words: Sequence[str], constructor: Constructor) -> Closure:
    """Return a closure that builds and discards one key per word.

    Each key is sunk as soon as it is built and released when the next one
    replaces it, so nothing survives from one call to the next.
    """

    def run() -> None:
        for word in words:
            sink(constructor(word))

    return run

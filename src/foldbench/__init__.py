"""foldbench - Case-insensitive string comparison benchmarks.

foldbench measures how much case-insensitive keys cost to build, compare and
look up, for an ASCII-only fast path and for full Unicode case folding, over
a mostly-ASCII English corpus and a fully Cyrillic Bulgarian corpus.

Example:
    >>> import foldbench as fb
    >>> fb.transform("Straße", fb.Strategy.FULL_FOLD_LOWER) == fb.transform(
    ...     "strasse", fb.Strategy.FULL_FOLD_UPPER
    ... )
    True

Running everything:
    >>> from foldbench.core.runner import default_runner
    >>> results = default_runner().run(fb.corpus_params())
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version


def _resolve_version() -> str:
    """Resolve the installed package version."""
    try:
        return _pkg_version("foldbench")
    except PackageNotFoundError:
        # Source checkout without an installed distribution.
        return "0.0.0"


__version__ = _resolve_version()

from .keys import Ascii, UniCase
from .core.barrier import sink
from .core.config import BenchConfig
from .core.corpus import WordList, all_corpora, bulgarian, english
from .core.display import Labeled, corpus_params
from .core.errors import BenchmarkError
from .core.strategy import Strategy, transform
from .core.timing import Bencher, TimingDistribution

from . import benches
from . import core
from . import output

__all__ = [
    "__version__",
    "Ascii",
    "UniCase",
    "BenchConfig",
    "Bencher",
    "BenchmarkError",
    "Labeled",
    "Strategy",
    "TimingDistribution",
    "WordList",
    "all_corpora",
    "bulgarian",
    "corpus_params",
    "english",
    "sink",
    "transform",
    "benches",
    "core",
    "output",
]

"""Core data structures: corpora, strategies, configuration and timing.

Import the runner from ``foldbench.core.runner``; it depends on
``foldbench.benches`` and is not re-exported here.
"""

from __future__ import annotations

from .barrier import sink
from .config import BenchConfig
from .corpus import WordList, all_corpora, bulgarian, english, load_word_list
from .display import Labeled, corpus_params
from .errors import BenchmarkError
from .strategy import ComparableKey, KeyBuilder, KeySource, Strategy, key_builder, transform, transform_all
from .timing import Bencher, TimingDistribution

__all__ = [
    "BenchConfig",
    "Bencher",
    "BenchmarkError",
    "ComparableKey",
    "KeyBuilder",
    "KeySource",
    "Labeled",
    "Strategy",
    "TimingDistribution",
    "WordList",
    "all_corpora",
    "bulgarian",
    "corpus_params",
    "english",
    "key_builder",
    "load_word_list",
    "sink",
    "transform",
    "transform_all",
]

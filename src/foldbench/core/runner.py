"""Parameterized runner: groups of named benchmark functions over corpora.

Example:
    >>> from foldbench.core.display import corpus_params
    >>> runner = default_runner()
    >>> results = runner.run(corpus_params())
    >>> [group.name for group in runner.groups]
    ['Constructor', 'Comparison', 'Lookup']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterator, Sequence

from ..benches.comparison import COMPARISONS, bench_compare
from ..benches.constructor import CONSTRUCTORS, Constructor, bench_construct
from ..benches.lookup import LOOKUPS, bench_lookup
from ..utils.progress import create_progress
from .display import Labeled
from .errors import BenchmarkError
from .strategy import KeySource
from .timing import Bencher, Closure, TimingDistribution

logger = logging.getLogger(__name__)

# Builds the timed closure from the corpus words. Setup happens here, outside timing.
BenchFactory = Callable[[Sequence[str]], Closure]

GROUP_ORDER = ("Constructor", "Comparison", "Lookup")


@dataclass
class BenchmarkResult:
    """Timing of one (group, function, parameter) combination."""

    group: str
    function: str
    parameter: str
    distribution: TimingDistribution

    def to_dict(self) -> dict[str, object]:
        return {
            "group": self.group,
            "function": self.function,
            "parameter": self.parameter,
            **self.distribution.to_dict(),
        }


@dataclass
class BenchmarkGroup:
    """A named set of benchmark functions and the results they produced.

    Attributes:
        name: Group name, e.g. "Lookup".
        functions: Registered (name, factory) pairs in registration order.
        entries: (function name, corpus label) -> timing distribution.
    """

    name: str
    functions: list[tuple[str, BenchFactory]] = field(default_factory=list)
    entries: dict[tuple[str, str], TimingDistribution] = field(default_factory=dict)

    def bench_function(self, name: str, factory: BenchFactory) -> BenchmarkGroup:
        """Register a benchmark function under ``name``.

        Raises:
            ValueError: If the name is already registered in this group.
        """
        if any(existing == name for existing, _ in self.functions):
            raise ValueError(f"{self.name}: function {name!r} already registered")
        self.functions.append((name, factory))
        return self

    def results(self) -> Iterator[BenchmarkResult]:
        for (function, parameter), distribution in self.entries.items():
            yield BenchmarkResult(self.name, function, parameter, distribution)


class Runner:
    """Runs every registered function of every group once per parameter.

    Groups, functions and parameters are visited strictly in registration
    order, one at a time. The first failure aborts the whole run.
    """

    def __init__(self, bencher: Bencher | None = None, show_progress: bool = False) -> None:
        self.bencher = bencher or Bencher()
        self.show_progress = show_progress
        self.groups: list[BenchmarkGroup] = []

    def group(self, name: str) -> BenchmarkGroup:
        """Return the group called ``name``, creating it if needed."""
        for group in self.groups:
            if group.name == name:
                return group
        group = BenchmarkGroup(name=name)
        self.groups.append(group)
        return group

    def run(self, params: Sequence[Labeled]) -> list[BenchmarkResult]:
        """Measure every (group, function, parameter) combination.

        Returns:
            Results in execution order.

        Raises:
            BenchmarkError: If any factory or closure raises.
        """
        total = sum(len(group.functions) for group in self.groups) * len(params)
        results: list[BenchmarkResult] = []

        with create_progress("Benchmarking", total=total, enabled=self.show_progress) as progress:
            for group in self.groups:
                logger.info(f"Running group {group.name} ({len(group.functions)} functions)")
                for function, factory in group.functions:
                    for param in params:
                        progress.set_description(f"{group.name}/{function}/{param}")
                        distribution = self._measure(group, function, factory, param)
                        group.entries[(function, param.name)] = distribution
                        results.append(BenchmarkResult(group.name, function, param.name, distribution))
                        progress.update()

        return results

    def _measure(
        self,
        group: BenchmarkGroup,
        function: str,
        factory: BenchFactory,
        param: Labeled,
    ) -> TimingDistribution:
        try:
            closure = factory(param.words)
            distribution = self.bencher.measure(closure)
        except Exception as e:
            raise BenchmarkError(group.name, function, param.name, f"{type(e).__name__}: {e}") from e

        logger.debug(
            f"{group.name}/{function}/{param}: median {distribution.median_ns:.0f} ns "
            f"({distribution.iterations} iterations/sample)"
        )
        return distribution


def register_defaults(runner: Runner) -> Runner:
    """Register the Constructor, Comparison and Lookup groups, in that order."""
    constructor = runner.group("Constructor")
    for name, make in CONSTRUCTORS.items():
        constructor.bench_function(name, partial(_construct_factory, make))

    comparison = runner.group("Comparison")
    for name, source in COMPARISONS.items():
        comparison.bench_function(name, partial(_compare_factory, source))

    lookup = runner.group("Lookup")
    for name, source in LOOKUPS.items():
        lookup.bench_function(name, partial(_lookup_factory, source))

    return runner


def default_runner(bencher: Bencher | None = None, show_progress: bool = False) -> Runner:
    """A runner with all standard groups registered."""
    return register_defaults(Runner(bencher, show_progress=show_progress))


def _construct_factory(constructor: Constructor, words: Sequence[str]) -> Closure:
    return bench_construct(words, constructor)


def _compare_factory(source: KeySource, words: Sequence[str]) -> Closure:
    return bench_compare(words, source)


def _lookup_factory(source: KeySource, words: Sequence[str]) -> Closure:
    return bench_lookup(words, source)

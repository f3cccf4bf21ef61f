"""Exceptions raised by the benchmark harness."""

from __future__ import annotations


class BenchmarkError(RuntimeError):
    """A benchmark failed and the run cannot produce meaningful timings.

    Attributes:
        group: Benchmark group name (e.g. "Lookup").
        function: Registered function name within the group.
        parameter: Corpus label the function was running against.
    """

    def __init__(self, group: str, function: str, parameter: str, reason: str) -> None:
        self.group = group
        self.function = function
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"{group}/{function}/{parameter}: {reason}")

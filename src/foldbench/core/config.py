"""Configuration for the timing and reporting backend."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

ENV_PREFIX = "FOLDBENCH_"


@dataclass
class BenchConfig:
    """Settings read by the timing backend and the reporter.

    The benchmarks themselves are not configurable; these values only decide
    how long each one is measured and where results go.

    Attributes:
        warmup_runs: Untimed calls of each closure before sampling.
        measured_runs: Number of timed samples per benchmark.
        iterations: Closure calls per sample. None calibrates automatically.
        min_sample_ns: Minimum duration of one sample when calibrating.
        report_dir: Directory for a JSON report. None disables the file.
        verbose: Enable debug logging.
    """

    warmup_runs: int = 1
    measured_runs: int = 10
    iterations: int | None = None
    min_sample_ns: int = 5_000_000
    report_dir: Path | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.warmup_runs < 0:
            raise ValueError("warmup_runs must be non-negative")
        if self.measured_runs < 1:
            raise ValueError("measured_runs must be at least 1")
        if self.iterations is not None and self.iterations < 1:
            raise ValueError("iterations must be at least 1")
        if self.min_sample_ns <= 0:
            raise ValueError("min_sample_ns must be positive")
        if self.report_dir is not None:
            self.report_dir = Path(self.report_dir)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "warmup_runs": self.warmup_runs,
            "measured_runs": self.measured_runs,
            "iterations": self.iterations,
            "min_sample_ns": self.min_sample_ns,
            "report_dir": str(self.report_dir) if self.report_dir is not None else None,
            "verbose": self.verbose,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BenchConfig:
        """Create configuration from dictionary."""
        return cls(
            warmup_runs=data.get("warmup_runs", 1),
            measured_runs=data.get("measured_runs", 10),
            iterations=data.get("iterations"),
            min_sample_ns=data.get("min_sample_ns", 5_000_000),
            report_dir=data.get("report_dir"),
            verbose=data.get("verbose", False),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BenchConfig:
        """Create configuration from ``FOLDBENCH_*`` environment variables.

        Unset or empty variables keep their defaults.

        Raises:
            ValueError: If a variable holds a malformed value.
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}

        for key in ("warmup_runs", "measured_runs", "iterations", "min_sample_ns"):
            raw = env.get(ENV_PREFIX + key.upper(), "")
            if raw:
                data[key] = _parse_int(ENV_PREFIX + key.upper(), raw)

        report_dir = env.get(ENV_PREFIX + "REPORT_DIR", "")
        if report_dir:
            data["report_dir"] = Path(report_dir)

        verbose = env.get(ENV_PREFIX + "VERBOSE", "")
        if verbose:
            data["verbose"] = verbose.lower() in ("1", "true", "yes", "on")

        return cls.from_dict(data)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

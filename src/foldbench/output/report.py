"""Console and JSON reporting of benchmark results."""

from __future__ import annotations

import json
import platform
import sys
from datetime import datetime, timezone
from itertools import groupby
from pathlib import Path
from typing import Any, Sequence

from rich.console import Console
from rich.table import Table

from ..core.config import BenchConfig
from ..core.runner import BenchmarkResult


def format_duration(ns: float) -> str:
    """Format nanoseconds with a readable unit."""
    if ns >= 1e9:
        return f"{ns / 1e9:.2f} s"
    if ns >= 1e6:
        return f"{ns / 1e6:.2f} ms"
    if ns >= 1e3:
        return f"{ns / 1e3:.2f} µs"
    return f"{ns:.0f} ns"


def build_table(group: str, results: Sequence[BenchmarkResult]) -> Table:
    """One table per group, one row per (function, corpus)."""
    table = Table(title=group, title_justify="left")
    table.add_column("Function", style="cyan")
    table.add_column("Corpus")
    table.add_column("Median", justify="right", style="bold")
    table.add_column("Mean", justify="right")
    table.add_column("Std", justify="right")
    table.add_column("p90", justify="right")
    table.add_column("CV", justify="right")
    table.add_column("Iter/sample", justify="right")

    for result in results:
        stats = result.distribution.stats
        table.add_row(
            result.function,
            result.parameter,
            format_duration(stats.median),
            format_duration(stats.mean),
            format_duration(stats.std),
            format_duration(stats.p90),
            f"{result.distribution.cv:.1%}",
            f"{result.distribution.iterations:,}",
        )
    return table


def render_report(results: Sequence[BenchmarkResult], console: Console | None = None) -> None:
    """Print one table per group, in the order the groups ran."""
    console = console or Console()
    for group, group_results in groupby(results, key=lambda r: r.group):
        console.print(build_table(group, list(group_results)))
        console.print()


def build_report(results: Sequence[BenchmarkResult], config: BenchConfig) -> dict[str, Any]:
    """Report dictionary with run metadata and every result."""
    from .. import __version__

    return {
        "foldbench_version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python": sys.version.split()[0],
        "implementation": platform.python_implementation(),
        "platform": platform.platform(),
        "config": config.to_dict(),
        "results": [r.to_dict() for r in results],
    }


def save_report(
    results: Sequence[BenchmarkResult],
    config: BenchConfig,
    directory: str | Path,
) -> Path:
    """Write the results to ``foldbench_<timestamp>.json`` in ``directory``.

    Existing reports are never overwritten.

    Returns:
        Path to the report file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    report_path = directory / f"foldbench_{timestamp}.json"
    suffix = 1
    while report_path.exists():
        report_path = directory / f"foldbench_{timestamp}_{suffix}.json"
        suffix += 1
    report_path.write_text(
        json.dumps(build_report(results, config), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return report_path

"""Progress bar utilities for foldbench."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressTask:
    """Thin handle over a single rich progress task."""

    def __init__(self, progress: Progress, task_id: int) -> None:
        self._progress = progress
        self._task_id = task_id

    def update(self, advance: int = 1) -> None:
        self._progress.update(self._task_id, advance=advance)

    def set_description(self, text: str) -> None:
        self._progress.update(self._task_id, description=text)


@contextmanager
def create_progress(
    description: str = "Benchmarking",
    total: int | None = None,
    console: Console | None = None,
    enabled: bool = True,
) -> Iterator[ProgressTask]:
    """Create a progress bar context manager.

    Args:
        description: Text description for the progress bar.
        total: Total number of benchmarks (None for indeterminate).
        console: Console to draw on. Defaults to stderr.
        enabled: Whether to draw anything at all.

    Yields:
        ProgressTask with update() and set_description().
    """
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=40),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console or Console(stderr=True),
        transient=True,
        disable=not enabled,
    )
    with progress:
        task_id = progress.add_task(description, total=total)
        yield ProgressTask(progress, task_id)

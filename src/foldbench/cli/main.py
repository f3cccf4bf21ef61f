"""Command-line interface for foldbench."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

from .. import __version__
from ..core.config import BenchConfig
from ..core.display import corpus_params
from ..core.errors import BenchmarkError
from ..core.runner import default_runner
from ..core.timing import Bencher
from ..output.report import render_report, save_report

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.version_option(version=__version__, prog_name="foldbench")
def cli() -> None:
    """foldbench: case-insensitive string comparison benchmarks.

    Runs the Constructor, Comparison and Lookup groups over the English and
    Bulgarian corpora and prints one table per group. Measurement settings
    come from FOLDBENCH_* environment variables.
    """
    try:
        config = BenchConfig.from_env()
    except ValueError as e:
        raise click.ClickException(str(e))

    setup_logging(config.verbose)
    logger.debug(f"Configuration: {config.to_dict()}")

    runner = default_runner(Bencher(config), show_progress=sys.stderr.isatty())
    try:
        results = runner.run(corpus_params())
    except BenchmarkError as e:
        raise click.ClickException(str(e))

    render_report(results, Console())

    if config.report_dir is not None:
        report_path = save_report(results, config, config.report_dir)
        click.echo(f"Report saved to: {report_path}", err=True)


def main() -> None:
    """Entry point for ``python -m foldbench``."""
    cli()


if __name__ == "__main__":
    main()

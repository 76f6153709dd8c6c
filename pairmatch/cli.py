"""
pairmatch CLI
=============

Command-line interface for matched-pairs resampling.

Usage:
    pairmatch INPUT --iterations N [OPTIONS]

Examples:
    pairmatch data.csv -i 1000
    pairmatch data.csv -i 1000 --seed 7 -o runs/iterations.parquet
    pairmatch data.csv -i 500 --reference-label Control --strict
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pairmatch.__version__ import __version__
from pairmatch.api.resampling import resample_file
from pairmatch.core.config import ResamplingConfig
from pairmatch.core.errors import PairMatchError
from pairmatch.core.names import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_REFERENCE_LABEL,
    DEFAULT_SIGNIFICANCE_LEVEL,
)
from pairmatch.reporting.summary import SummaryReporter

logger = logging.getLogger("pairmatch")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler on stderr."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="pairmatch",
        description="Sample and run statistics on the sample data: "
        "randomized greedy matched-pairs resampling with a paired t-test.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input columns:
  condition   group label; rows equal to --reference-label form the matched-against group
  mid, pre, gain, final
              numeric measurements (final is the post-treatment value)

Examples:
  pairmatch data.csv -i 1000
  pairmatch data.csv -i 1000 --seed 7 -o runs/iterations.parquet
        """,
    )

    parser.add_argument("input", help="Filename to run statistics on")
    parser.add_argument(
        "--iterations",
        "-i",
        type=int,
        required=True,
        metavar="N",
        help="Number of iterations to run",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=DEFAULT_OUTPUT_PATH,
        help=f"Iteration table destination; .parquet/.pq writes Parquet (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random generator (default: fresh entropy)",
    )
    parser.add_argument(
        "--reference-label",
        default=DEFAULT_REFERENCE_LABEL,
        help=f"Label of the matched-against group (default: {DEFAULT_REFERENCE_LABEL})",
    )
    parser.add_argument(
        "--significance-level",
        type=float,
        default=DEFAULT_SIGNIFICANCE_LEVEL,
        help=f"Threshold for proportion_significant (default: {DEFAULT_SIGNIFICANCE_LEVEL})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on degenerate t-tests instead of recording NaN/inf",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return create_parser().parse_args(args)


def config_from_args(args: argparse.Namespace) -> ResamplingConfig:
    """Build the run configuration from parsed arguments."""
    return ResamplingConfig(
        iterations=args.iterations,
        seed=args.seed,
        reference_label=args.reference_label,
        significance_level=args.significance_level,
        strict=args.strict,
        output=args.output,
    )


def main(args: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point; returns the process exit code."""
    parsed = parse_args(args)
    setup_logging(parsed.verbose)
    console = console or Console()

    try:
        config = config_from_args(parsed)
        result = resample_file(parsed.input, config)
    except (PairMatchError, ValueError, OSError) as exc:
        logger.debug("Run aborted", exc_info=True)
        console.print(f"[red]error:[/red] {escape(str(exc))}", highlight=False)
        return 1
    except KeyboardInterrupt:
        console.print("\n[red]Run aborted by user.[/red]")
        return 130

    SummaryReporter(result.summary).print(console)
    return 0


if __name__ == "__main__":
    sys.exit(main())

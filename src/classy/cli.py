"""Command-line interface for classy."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from classy import __version__
from classy.config import (
    APP_NAME,
    CLASSY_NAMES_ENV,
    CLASSY_THRESHOLD_ENV,
    DEFAULT_MIN_COUNT,
    DEFAULT_MIN_WORDS,
    read_env_int,
)
from classy.exceptions import ClassyError, ConfigError
from classy.pipeline import ScanOptions, build_report
from classy.report import render_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        usage="%(prog)s [options] <source dir>",
        description="Find longest common class name combinations.",
        epilog=(
            f"Flags not given on the command line fall back to {CLASSY_NAMES_ENV} "
            f"and {CLASSY_THRESHOLD_ENV}."
        ),
    )
    parser.add_argument("source_dir", metavar="<source dir>", help="Directory of HTML files to scan")
    parser.add_argument(
        "--names",
        "-names",
        type=int,
        default=None,
        help=f"Minimum number of spaces in a class combination (default: {DEFAULT_MIN_WORDS})",
    )
    parser.add_argument(
        "--threshold",
        "-threshold",
        type=int,
        default=None,
        help=f"Minimum number of occurrences to report (default: {DEFAULT_MIN_COUNT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_options(
    argv: Sequence[str] | None = None,
) -> tuple[Path, ScanOptions, bool]:
    """Parse arguments, filling unset thresholds from the environment.

    Exits with status 2 on malformed arguments or environment values.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        min_words = args.names
        if min_words is None:
            min_words = read_env_int(CLASSY_NAMES_ENV, DEFAULT_MIN_WORDS)
        min_count = args.threshold
        if min_count is None:
            min_count = read_env_int(CLASSY_THRESHOLD_ENV, DEFAULT_MIN_COUNT)
    except ConfigError as exc:
        parser.error(str(exc))

    options = ScanOptions(min_words=min_words, min_count=min_count)
    return Path(args.source_dir), options, args.verbose


def main(argv: Sequence[str] | None = None) -> int:
    """Run classy and return the process exit status."""
    source_dir, options, verbose = parse_options(argv)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug(
        "Scanning %s (min_words=%d, min_count=%d)",
        source_dir,
        options.min_words,
        options.min_count,
    )

    try:
        entries = build_report(source_dir, options)
    except ClassyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _write_report(render_report(entries))
    return 0


def _write_report(text: str) -> None:
    """Write the report to stdout as UTF-8 regardless of the locale encoding."""
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    buffer.write(text.encode("utf-8"))
    buffer.flush()

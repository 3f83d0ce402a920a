#!/usr/bin/env python3
"""satrange/main.py — CLI entry-point for the saturating-add comparison.

Usage examples
--------------
    # Reference configuration: width 6, direct vs decomposed
    python -m satrange

    # Width as a positional argument
    python -m satrange 4

    # Smaller width, labelled output
    python -m satrange --width 3 --format labeled

    # Compare against the exclusive-bound variant on four processes
    python -m satrange -w 5 --candidate decomposed-exclusive --workers 4

    # Write JSON counters to a file
    python -m satrange --format json --output counters.json

Exit codes
----------
    0   Success.
    2   Invalid configuration, unwritable output, or a range-domain
        contract violation.
  130   Interrupted.

The module doubles as ``python -m satrange`` via the companion
``satrange/__main__.py`` which simply calls :func:`main`.
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path
from typing import Optional, Sequence, TextIO

from satrange import __version__
from satrange.config import DEFAULT_WIDTH, HarnessConfig, algorithm_names
from satrange.errors import ConfigError, ErrorCodes, SatRangeError
from satrange.harness import run_partitioned
from satrange.report import FORMATTERS, write_report

_log = logging.getLogger("satrange")

# Exit codes ----------------------------------------------------------------

EXIT_OK: int = 0
EXIT_INFRA: int = 2
EXIT_INTERRUPTED: int = 130


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``satrange`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("satrange")
    root.setLevel(level)
    root.handlers[:] = [handler]


def _open_output(dest: Optional[str]) -> TextIO:
    """Return a writable text stream.

    *dest* ``None`` or ``"-"`` → ``sys.stdout``; otherwise open the path
    for writing (creating parent directories as needed).  A destination
    that cannot be opened raises :class:`ConfigError` with code
    ``SATR-2003``.
    """
    if dest is None or dest == "-":
        return sys.stdout
    p = Path(dest).expanduser().resolve()
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        return open(p, "w", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(
            f"cannot open output {p}: {exc.strerror or exc}",
            code=ErrorCodes.OUTPUT_UNWRITABLE,
            hint="pass a writable file path, or '-' for stdout",
        ) from exc


# ===========================================================================
# Command
# ===========================================================================

def cmd_compare(args: argparse.Namespace) -> int:
    """Run the exhaustive comparison and write the report."""
    config = HarnessConfig.from_args(args)
    stream = _open_output(args.output)
    try:
        counters = run_partitioned(config)
        if not counters.is_conserved():
            _log.error("Counter totals do not add up: %s", counters.as_dict())
            return EXIT_INFRA
        if counters.incomparable:
            _log.warning(
                "%d pair(s) had non-overlapping results; one algorithm is unsound",
                counters.incomparable,
            )
        write_report(counters, stream, args.format)
    finally:
        if stream is not sys.stdout:
            stream.close()
    if stream is not sys.stdout:
        _log.info("Wrote report to %s", args.output)
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="satrange",
        description=(
            "Exhaustively compare the precision of two unsigned saturating-add "
            "algorithms over the constant-range domain."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            output (plain format), one value per line:
              total pairs, equal, decomposed better, decomposed worse,
              incomparable
        """),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "width_pos",
        nargs="?",
        type=int,
        metavar="WIDTH",
        help="bit width, same as --width",
    )
    parser.add_argument(
        "-w", "--width",
        type=int,
        default=None,
        help=f"bit width of the ranges, 1-32 (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--reference",
        choices=algorithm_names(),
        default="direct",
        help="algorithm whose results are the baseline (default: direct)",
    )
    parser.add_argument(
        "--candidate",
        choices=algorithm_names(),
        default="decomposed",
        help="algorithm being measured (default: decomposed)",
    )
    parser.add_argument(
        "-j", "--workers",
        type=int,
        default=1,
        help="worker processes for the outer loop (default: 1)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=sorted(FORMATTERS),
        default="plain",
        help="report format (default: plain)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="write the report here instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (-v info, -vv debug)",
    )
    parser.set_defaults(func=cmd_compare)
    return parser


# ===========================================================================
# Main entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the satrange CLI.

    Parameters
    ----------
    argv:
        Command-line arguments.  ``None`` → ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code (see module docstring for semantics).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.width_pos is not None:
        if args.width is not None and args.width != args.width_pos:
            parser.error(
                f"conflicting widths: WIDTH {args.width_pos} and --width {args.width}"
            )
        args.width = args.width_pos
    elif args.width is None:
        args.width = DEFAULT_WIDTH

    _configure_logging(args.verbose)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        _log.info("Interrupted by user.")
        return EXIT_INTERRUPTED
    except SatRangeError as exc:
        _log.error("%s", exc)
        return EXIT_INFRA


if __name__ == "__main__":
    raise SystemExit(main())

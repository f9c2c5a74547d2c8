"""Command line interface.

    procstats [options] input.csv

Prints the statistics report to stdout and writes one frequency polygon per
sample into the output directory. Log records and error messages go to stderr.

Exit status:
  0  every sample summarised and charted
  1  fatal error (input unreadable, parse error, output directory missing)
  2  usage error
  3  report printed, but at least one sample failed
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from procstats.config import RunConfig
from procstats.errors import InputFileError, ParseError, ProcStatsError, UsageError
from procstats.measurements import DEFAULT_COLUMN, DEFAULT_DELIMITER
from procstats.pipeline import run
from procstats.report import DEFAULT_PRECISION
from procstats.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_USAGE = 2
EXIT_PARTIAL = 3


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="procstats",
        usage="%(prog)s [options] input.csv",
        description="Descriptive statistics and frequency polygons for one column of a CSV file.",
    )
    p.add_argument("input", nargs="?", help="Input CSV file with a header row")
    p.add_argument(
        "-d", "--output-directory",
        metavar="DIR",
        default=".",
        help="Graph output folder (default: current directory)",
    )
    p.add_argument(
        "--column", type=int, default=DEFAULT_COLUMN,
        help=f"0-based index of the measurement field (default: {DEFAULT_COLUMN})",
    )
    p.add_argument(
        "--delimiter", default=DEFAULT_DELIMITER,
        help=f"Field separator (default: {DEFAULT_DELIMITER!r})",
    )
    p.add_argument(
        "--precision", type=int, default=DEFAULT_PRECISION,
        help=f"Decimal places printed for each statistic (default: {DEFAULT_PRECISION})",
    )
    p.add_argument(
        "--round-decimals", type=int, default=None, metavar="K",
        help="Round values to K decimals before counting frequencies (default: exact values)",
    )
    p.add_argument("--no-charts", action="store_true", help="Do not write chart files")
    p.add_argument("--html", action="store_true", help="Also write interactive Plotly HTML charts")
    p.add_argument(
        "--jobs", type=int, default=1,
        help="Run the sample pipelines on this many threads (default: 1)",
    )
    p.add_argument(
        "--log-level", default=None,
        help="Logging level for stderr (default: $PROCSTATS_LOG_LEVEL or WARNING)",
    )
    return p


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Build a RunConfig from parsed arguments.

    Raises:
        UsageError: If no input file was given.
    """
    if not args.input:
        raise UsageError("no input file specified")
    return RunConfig(
        input_path=Path(args.input),
        output_dir=Path(args.output_directory),
        column=args.column,
        delimiter=args.delimiter,
        precision=args.precision,
        round_decimals=args.round_decimals,
        charts=not args.no_charts,
        html=args.html,
        jobs=args.jobs,
        log_level=args.log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    # argparse exits with status 0 for -h and 2 for unknown flags.
    args = parser.parse_args(argv)
    configure_logging(args.log_level, force=True)

    try:
        config = config_from_args(args)
        report, results = run(config)
    except UsageError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"procstats: error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (InputFileError, ParseError) as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"procstats: error: {e}", file=sys.stderr)
        return EXIT_FATAL
    except ProcStatsError as e:
        logger.exception("unexpected procstats error")
        print(f"procstats: error: {e}", file=sys.stderr)
        return EXIT_FATAL

    print(report)

    failed = [r for r in results if not r.ok]
    for r in failed:
        err = r.error or r.chart_error
        print(f"procstats: sample {r.spec.name!r} failed: {err}", file=sys.stderr)
    return EXIT_PARTIAL if failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

"""Generate a per-metric comparison report from a measurement export."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import pandas as pd

from .analyzer.dataset import DatasetAnalyzer
from .demo import load_demo
from .engine import P_VALUE_METHODS
from .errors import ParseError
from .extractor import read_records
from .schema import DEFAULT_SCHEMA

logger = logging.getLogger(__name__)


def build_report(
    path: str | None = None, *, method: str = "approximate"
) -> pd.DataFrame:
    """Return the summary table for the export at *path* (demo data if ``None``)."""
    groups = load_demo() if path is None else read_records(path)
    analyzer = DatasetAnalyzer(groups, group_labels=DEFAULT_SCHEMA.group_labels)
    return analyzer.summary(method)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bondstats",
        description="Compare two wire-bond tools metric by metric.",
    )
    parser.add_argument("path", nargs="?", help="comma-separated export to analyze")
    parser.add_argument("-o", "--output", help="write the report as CSV to this file")
    parser.add_argument("--demo", action="store_true", help="analyze the bundled demo dataset")
    parser.add_argument(
        "--method",
        choices=sorted(P_VALUE_METHODS),
        default="approximate",
        help="p-value routine (default: approximate)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``bondstats`` console script."""
    parser = _parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.path is None and not args.demo:
        parser.error("a PATH or --demo is required")

    try:
        report = build_report(None if args.demo else args.path, method=args.method)
    except ParseError as exc:
        print(f"Failed to parse CSV: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Failed to read {args.path}: {exc}", file=sys.stderr)
        return 1

    if args.output:
        report.to_csv(args.output, index=False)
        logger.info("wrote %d metrics to %s", len(report), args.output)
    else:
        print(report.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())

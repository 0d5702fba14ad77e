#!/usr/bin/env python3
"""
Pair analysis CLI.

Loads two vendor export files, aligns them by trading date and computes
rolling correlation, moving averages and (optionally) ratio series.
Prints a summary and optionally writes the records to CSV/JSON.
"""

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from paircorr.analysis.builder import run_analysis
from paircorr.analysis.config import AnalysisConfig
from paircorr.analysis.config_loader import load_config_from_yaml
from paircorr.analysis.export import write_records
from paircorr.analysis.regime import correlation_snapshot, regimes_for_prices
from paircorr.data.alignment import align_by_date, clean_date_key
from paircorr.data.loader import ExportLoader
from paircorr.shared.errors import PairAnalysisError


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """
    Setup logging to stdout.

    Args:
        verbose: If True, use DEBUG level, otherwise WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def _parse_windows(text: str) -> tuple:
    try:
        return tuple(int(w.strip()) for w in text.split(",") if w.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"windows must be comma-separated integers, got '{text}'")


def build_config(args: argparse.Namespace) -> AnalysisConfig:
    """Base config from --config (or defaults), overridden by explicit flags."""
    config = load_config_from_yaml(args.config) if args.config else AnalysisConfig()
    overrides = {}
    if args.windows is not None:
        overrides["windows"] = args.windows
    if args.ratio:
        overrides["ratio_mode"] = True
    if args.no_ma:
        overrides["include_moving_averages"] = False
    if args.start is not None:
        overrides["start_date"] = args.start
    if args.end is not None:
        overrides["end_date"] = args.end
    if args.persian_digits:
        overrides["persian_digits"] = True
    return dataclasses.replace(config, **overrides) if overrides else config


def _fmt(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.4f}"


def _write_output(records, output: Optional[str]) -> int:
    if not output:
        return 0
    try:
        path = write_records(records, output)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(f"Wrote {len(records)} record(s) to {path}")
    logger.info(f"Output written to {path}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two instruments: rolling correlation, MA100/MA200, ratio and distance from trend.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Correlation over 30/60/90 common trading days
  python -m cli.analyze first.csv second.csv

  # Ratio mode for Jalali year 1402, written to CSV
  python -m cli.analyze first.csv second.csv --ratio --start 1402/01/01 --end 1402/12/29 -o out.csv
        """,
    )
    parser.add_argument("first", type=str, help="Vendor export file for the first instrument")
    parser.add_argument("second", type=str, help="Vendor export file for the second instrument")
    parser.add_argument(
        "--windows",
        "-w",
        type=_parse_windows,
        default=None,
        help="Comma-separated correlation windows (default: 30,60,90 or from --config)",
    )
    parser.add_argument("--ratio", action="store_true", help="Add price1/price2 ratio series and its trend")
    parser.add_argument("--no-ma", action="store_true", help="Skip MA100/MA200 for the price series")
    parser.add_argument("--start", type=str, default=None, help="Jalali start date, inclusive (e.g. 1402/01/01)")
    parser.add_argument("--end", type=str, default=None, help="Jalali end date, inclusive")
    parser.add_argument("--config", type=str, default=None, help="YAML analysis config")
    parser.add_argument("--output", "-o", type=str, default=None, help="Write records to .csv or .json")
    parser.add_argument("--persian-digits", action="store_true", help="Render display dates with Persian numerals")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging (DEBUG level)")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_config(args)
        first = ExportLoader(args.first).load()
        second = ExportLoader(args.second).load()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except PairAnalysisError as e:
        print(f"Error ({e.kind.value}): {e}", file=sys.stderr)
        return 1

    print(f"Instruments: {first.name} ({len(first.points)} days) vs {second.name} ({len(second.points)} days)")

    try:
        records = run_analysis(first.points, second.points, config)
    except PairAnalysisError as e:
        print(f"Error ({e.kind.value}): {e}", file=sys.stderr)
        return 1

    print(f"Records: {len(records)} (windows {', '.join(str(w) for w in config.windows)})")
    if not records:
        return _write_output(records, args.output)

    last = records[-1]
    print(f"Last date: {last.display_date}")
    for window in config.windows:
        print(f"  corr_{window}: {_fmt(last.correlations[window])}")

    # Snapshot and regimes are taken as of the last reported record
    merged = align_by_date(first.points, second.points)
    as_of = next(i for i, m in enumerate(merged) if m.date == last.date)
    snapshot = correlation_snapshot(merged, index=as_of)
    print(
        f"Correlation {snapshot.short_window}d/{snapshot.long_window}d: "
        f"{_fmt(snapshot.short)} / {_fmt(snapshot.long)}"
        f"{' [anomaly]' if snapshot.anomaly else ''}"
    )
    for parsed in (first, second):
        regimes = regimes_for_prices(
            [p.close for p in parsed.points if clean_date_key(p.date) <= last.date],
            entry_threshold=config.regime_entry_threshold,
            exit_threshold=config.regime_exit_threshold,
            confirm_days=config.regime_confirm_days,
        )
        if regimes:
            print(f"Regime {parsed.name}: {regimes[-1].value}")

    return _write_output(records, args.output)


if __name__ == "__main__":
    sys.exit(main())

"""Command-line entry point: resolve years for date strings and print JSON lines.

Usage:
    python -m year_parsing "ca. 1790" "17uu" "between 300 and 150 B.C."
    cat dates.txt | python -m year_parsing --today 2020-06-01
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from datetime import date
from typing import Iterable, TextIO

from year_parsing.clock import FixedClock, SystemClock
from year_parsing.config import load_year_parsing_config
from year_parsing.context import ResolveContext
from year_parsing.errors import YearRangeError
from year_parsing.year_parser import YearParser


logger = logging.getLogger(__name__)


def _parse_today(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"--today must be YYYY-MM-DD, got {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="year-parsing",
        description="Resolve earliest/latest years from free-form date strings.",
    )
    p.add_argument("dates", nargs="*", help="Date strings (default: read one per line from stdin)")
    p.add_argument("--today", type=_parse_today, default=None, help="Pretend today is YYYY-MM-DD")
    p.add_argument("--lower-bound", type=int, default=None, help="Exclusive lower bound for a valid year")
    p.add_argument("--no-years", action="store_true", help="Omit the materialized year list")
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows matched rules)")
    return p


def build_year_parser(args: argparse.Namespace) -> YearParser:
    config = load_year_parsing_config()
    if args.lower_bound is not None:
        config = replace(config, lower_bound=args.lower_bound)
    clock = FixedClock(args.today) if args.today else SystemClock()
    return YearParser(ResolveContext(clock=clock, config=config))


def describe(parser: YearParser, text: str, *, include_years: bool = True) -> dict:
    """Resolve one date string into a JSON-serializable record."""
    span = parser.parse_span(text)
    record: dict = {
        "text": text,
        "earliest": span.earliest,
        "latest": span.latest,
        "earliest_rule": span.earliest_resolution.extractor.name if span.earliest is not None else None,
        "latest_rule": span.latest_resolution.extractor.name if span.latest is not None else None,
    }
    try:
        years = parser.years_for_span(span)
    except YearRangeError as e:
        record["error"] = str(e)
        years = None
    if include_years:
        record["years"] = years
    return record


def run(parser: YearParser, texts: Iterable[str], out: TextIO, *, include_years: bool = True) -> int:
    """Write one JSON line per text. Returns 1 if any text was contradictory."""
    status = 0
    for text in texts:
        record = describe(parser, text, include_years=include_years)
        if "error" in record:
            status = 1
        out.write(json.dumps(record, ensure_ascii=False) + "\n")
    return status


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s\t%(name)s\t%(message)s")

    parser = build_year_parser(args)
    if args.dates:
        texts: Iterable[str] = args.dates
    else:
        texts = (line.rstrip("\n") for line in sys.stdin if line.strip())

    status = run(parser, texts, sys.stdout, include_years=not args.no_years)
    if status:
        logger.info("some date strings had contradictory ranges")
    return status


if __name__ == "__main__":
    raise SystemExit(main())

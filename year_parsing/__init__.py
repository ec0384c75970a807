"""Year parsing module for archival and bibliographic date strings.

This module resolves the earliest and latest calendar year implied by
free-form date strings ("ca. 1790", "17uu", "between 1694 and 1799",
"5th century B.C.") and expands them into inclusive year ranges.
"""

from __future__ import annotations

from typing import List

from year_parsing.clock import Clock, FixedClock, SystemClock
from year_parsing.config import YearParsingConfig, load_year_parsing_config
from year_parsing.context import ResolveContext
from year_parsing.errors import YearCoercionError, YearParsingError, YearRangeError
from year_parsing.factory import YearExtractorFactory, YearExtractors
from year_parsing.resolution import YearBound, YearResolution
from year_parsing.year_parser import YearParser
from year_parsing.year_span import YearSpan

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "YearParsingConfig",
    "load_year_parsing_config",
    "ResolveContext",
    "YearParsingError",
    "YearRangeError",
    "YearCoercionError",
    "YearExtractors",
    "YearExtractorFactory",
    "YearBound",
    "YearResolution",
    "YearParser",
    "YearSpan",
    "resolve_earliest",
    "resolve_latest",
    "is_valid_year",
    "is_valid_range",
    "parse_range",
    "materialize_range",
]


def resolve_earliest(text: str | None) -> int | None:
    return YearParser().resolve_earliest(text)


def resolve_latest(text: str | None) -> int | None:
    return YearParser().resolve_latest(text)


def is_valid_year(year: object) -> bool:
    return YearParser().is_valid_year(year)


def is_valid_range(first_year: int, last_year: int) -> bool:
    return YearParser().is_valid_range(first_year, last_year)


def parse_range(text: str | None) -> List[int] | None:
    return YearParser().parse_range(text)


def materialize_range(first_year: int | str | None, last_year: int | str | None) -> List[int]:
    return YearParser().materialize_range(first_year, last_year)

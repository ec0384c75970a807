"""Configuration loading for year parsing."""

from __future__ import annotations

import os
from dataclasses import dataclass


_DEFAULT_LOWER_BOUND = -1000
_DEFAULT_FUTURE_SLACK = 2
_DEFAULT_UNKNOWN_DATES = ("0000-00-00",)


@dataclass(frozen=True)
class YearParsingConfig:
    # Exclusive lower bound for a single year. -1666 is rejected, -999 is not.
    lower_bound: int = _DEFAULT_LOWER_BOUND
    # Years past the current year: single years must be below it, range
    # endpoints may equal it.
    future_slack: int = _DEFAULT_FUTURE_SLACK
    unknown_dates: tuple[str, ...] = _DEFAULT_UNKNOWN_DATES


def _parse_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


def _parse_sentinels(value: str | None) -> tuple[str, ...]:
    if value is None or not value.strip():
        return _DEFAULT_UNKNOWN_DATES
    return tuple(item.strip() for item in value.split(",") if item.strip())


def load_year_parsing_config() -> YearParsingConfig:
    """Load year parsing configuration from environment variables."""
    return YearParsingConfig(
        lower_bound=_parse_int(os.getenv("YEAR_PARSING_LOWER_BOUND"), _DEFAULT_LOWER_BOUND),
        future_slack=_parse_int(os.getenv("YEAR_PARSING_FUTURE_SLACK"), _DEFAULT_FUTURE_SLACK),
        unknown_dates=_parse_sentinels(os.getenv("YEAR_PARSING_UNKNOWN_DATES")),
    )

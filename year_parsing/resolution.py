"""Dataclasses describing the outcome of a single year resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from year_parsing.factory import YearExtractors


class YearBound(Enum):
    """Which end of a date string a resolution is after."""
    EARLIEST = auto()
    LATEST = auto()


@dataclass(frozen=True)
class YearResolution:
    """A candidate year and the rule that produced it.

    is_valid is False only for a latest-year candidate that the cascade
    locked onto but that failed single-year validity; callers use it to tell
    an out-of-bounds endpoint from a string with no year at all.
    """
    year: int
    extractor: YearExtractors
    bound: YearBound
    text: str
    is_valid: bool = True

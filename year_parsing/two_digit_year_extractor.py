"""Extractor for calendar dates with a two-digit year: m/d/yy and m-d-yy."""

from datetime import date

from year_parsing.context import ResolveContext
from year_parsing.patterns import (
    MONTH_DAY_YY_HYPHEN_FULL_RE,
    MONTH_DAY_YY_HYPHEN_RE,
    MONTH_DAY_YY_SLASH_FULL_RE,
    MONTH_DAY_YY_SLASH_RE,
)
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class TwoDigitYearExtractor(YearExtractorStrategy):
    """Parses m/d/yy or m-d-yy, choosing the century from today's date.

    The year is read as 20yy; if that date is after today it is moved back
    to 19yy. With today in 2020: 1/1/17 -> 2017, 1/1/27 -> 1927.

    The date must open the string; trailing markers are ignored, so 1/2/79?
    and 5-1-59] still read. Impossible dates (2/30/20, 13/1/20) give None.
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        if MONTH_DAY_YY_SLASH_RE.search(text):
            m = MONTH_DAY_YY_SLASH_FULL_RE.match(text)
        elif MONTH_DAY_YY_HYPHEN_RE.search(text):
            m = MONTH_DAY_YY_HYPHEN_FULL_RE.match(text)
        else:
            return None
        if not m:
            return None

        try:
            d = date(2000 + int(m.group("yy")), int(m.group("month")), int(m.group("day")))
        except ValueError:
            return None

        if d > context.today():
            return d.year - 100
        return d.year

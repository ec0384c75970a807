"""Extractors for single-century forms like '5th century', '17uu' or '17--'."""

from year_parsing.centuries import (
    bc_century_first_year,
    bc_century_last_year,
    ordinal_century_first_year,
    ordinal_century_last_year,
    token_century_first_year,
    token_century_last_year,
)
from year_parsing.context import ResolveContext
from year_parsing.patterns import CENTURY_4CHAR_RE, CENTURY_BC_RE, CENTURY_RANGE_RE, CENTURY_WORD_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class BcCenturyExtractor(YearExtractorStrategy):
    """Parses an ordinal century followed by a B.C. marker.

    Example: 5th century B.C. -> -599 (earliest), -500 (latest)
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        m = CENTURY_BC_RE.search(text)
        if not m:
            return None
        nth = int(m.group("nth"))
        if bound == YearBound.EARLIEST:
            return bc_century_first_year(nth)
        return bc_century_last_year(nth)


class CenturyExtractor(YearExtractorStrategy):
    """Parses century forms.

    Matches patterns like:
    - 17uu, 17--, 17--?, [17--]  -> 1700 / 1799
    - 18th century CE            -> 1700 / 1799
    - 1st century A.D.           -> 0 / 99
    - 17th or 18th century       -> 1600 (earliest only; the latest end is
                                    handled by CenturyRangeExtractor)

    B.C. centuries are checked first so the ordinal pattern does not read
    "5th century B.C." as 400.
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        bc_year = BcCenturyExtractor().extract(text, bound, context)
        if bc_year is not None:
            return bc_year

        m = CENTURY_4CHAR_RE.search(text)
        if m:
            yy = int(m.group("yy"))
            if bound == YearBound.EARLIEST:
                return token_century_first_year(yy)
            return token_century_last_year(yy)

        if bound == YearBound.EARLIEST:
            m = CENTURY_RANGE_RE.search(text)
            if m:
                return ordinal_century_first_year(int(m.group("first")))

        m = CENTURY_WORD_RE.search(text)
        if m:
            nth = int(m.group("nth"))
            if bound == YearBound.EARLIEST:
                return ordinal_century_first_year(nth)
            return ordinal_century_last_year(nth)

        return None

"""Extractors for multi-century spans like '17th or 18th century' or '17--?-18--?'."""

from year_parsing.centuries import (
    bc_century_first_year,
    bc_century_last_year,
    ordinal_century_first_year,
    ordinal_century_last_year,
    token_century_first_year,
    token_century_last_year,
)
from year_parsing.context import ResolveContext
from year_parsing.patterns import CENTURY_HYPHEN_RANGE_RE, CENTURY_RANGE_BC_RE, CENTURY_RANGE_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class CenturyRangeExtractor(YearExtractorStrategy):
    """Parses ordinal century ranges.

    Matches patterns like:
    - 17th or 18th century       -> 1600 / 1799
    - ca. 5th–6th century A.D.   -> 400 / 599
    - ca. 9th–8th century B.C.   -> -999 / -800   (era_bc=True)

    For B.C. the first ordinal gives the earliest year and the last ordinal
    the latest, each with B.C. century arithmetic.
    """

    def __init__(self, era_bc: bool = False):
        self.era_bc = era_bc

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        pattern = CENTURY_RANGE_BC_RE if self.era_bc else CENTURY_RANGE_RE
        m = pattern.search(text)
        if not m:
            return None

        if bound == YearBound.EARLIEST:
            nth = int(m.group("first"))
            return bc_century_first_year(nth) if self.era_bc else ordinal_century_first_year(nth)

        nth = int(m.group("last"))
        return bc_century_last_year(nth) if self.era_bc else ordinal_century_last_year(nth)


class HyphenCenturyRangeExtractor(YearExtractorStrategy):
    """Parses ranges between two century tokens.

    Example: 17--? - 18--? -> 1700 / 1899
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        m = CENTURY_HYPHEN_RANGE_RE.search(text)
        if not m:
            return None
        if bound == YearBound.EARLIEST:
            return token_century_first_year(self.leading_int(m.group("first")))
        return token_century_last_year(self.leading_int(m.group("last")))

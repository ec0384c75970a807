"""Extractor for single years with a B.C. marker."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import YEAR_BC_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class BcYearExtractor(YearExtractorStrategy):
    """Parses a 1-4 digit year followed by a B.C. marker.

    Matches patterns like:
    - 800 B.C.
    - 75 BC
    - 3 B. C.

    The year is the plain negation of the written digits (800 B.C. -> -800),
    for both bounds.
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        m = YEAR_BC_RE.search(text)
        if not m:
            return None
        return -int(m.group("year"))

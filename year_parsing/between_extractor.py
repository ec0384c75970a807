"""Extractor for "between X and Y" ranges."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import BETWEEN_BC_RE, BETWEEN_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class BetweenExtractor(YearExtractorStrategy):
    """Parses "between X and Y" with 1-4 digit years.

    Matches patterns like:
    - between 1694 and 1799?
    - Between 1600? and 1683
    - between 300 and 150 B.C.   (era_bc=True)

    With era_bc the B.C. marker must trail the second year and both years are
    negated. The B.C. variant has to run before the plain one because the
    plain pattern also matches "between 300 and 150" inside a B.C. string.
    """

    def __init__(self, era_bc: bool = False):
        self.era_bc = era_bc

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        pattern = BETWEEN_BC_RE if self.era_bc else BETWEEN_RE
        m = pattern.search(text)
        if not m:
            return None

        year = int(m.group("first") if bound == YearBound.EARLIEST else m.group("last"))
        return -year if self.era_bc else year

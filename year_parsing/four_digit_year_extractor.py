"""Extractor for the first run of four consecutive digits."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import FOUR_DIGITS_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class FourDigitYearExtractor(YearExtractorStrategy):
    """Returns the first four consecutive digits as a year.

    This is the broadest rule in the cascade: "ca. 1790", "Boston, November
    25, 1851" and "19990211" all resolve here, which is why every range rule
    must be tried before it.
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        m = FOUR_DIGITS_RE.search(text)
        if not m:
            return None
        return int(m.group("year"))

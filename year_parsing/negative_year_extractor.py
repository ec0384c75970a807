"""Extractors for negative four-digit years (-yyyy)."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import NEGATIVE_LEADING_YEAR_RE, NEGATIVE_YEAR_AFTER_HYPHEN_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class NegativeLeadingYearExtractor(YearExtractorStrategy):
    """Returns -yyyy found at the very start of the text."""

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        m = NEGATIVE_LEADING_YEAR_RE.search(text)
        if not m:
            return None
        return int(m.group("year"))


class NegativeYearAfterHyphenExtractor(YearExtractorStrategy):
    """Returns the second year of "-yyyy - -yyyy". Latest only."""

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        if bound != YearBound.LATEST:
            return None
        m = NEGATIVE_YEAR_AFTER_HYPHEN_RE.search(text)
        if not m:
            return None
        return int(m.group("last"))

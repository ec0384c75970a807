"""Extractor for short numerals such as '-914', '33' or '5 or 6'.

Coin collections record Roman-era dates as bare, already sortable integers.
"""

from year_parsing.context import ResolveContext
from year_parsing.patterns import EARLY_NEGATIVE_4DIGIT_RE, EARLY_NUMERIC_RANGE_RE, EARLY_NUMERIC_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class EarlyNumericExtractor(YearExtractorStrategy):
    """Parses a leading 1-3 digit numeral, optionally signed, or a bare -yyyy.

    For the latest year a leading early-numeric range ("-5 - 10", "5 or 6")
    yields its second value.
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        if bound == YearBound.LATEST:
            m = EARLY_NUMERIC_RANGE_RE.search(text)
            if m:
                return int(m.group("last"))

        if EARLY_NUMERIC_RE.search(text) or EARLY_NEGATIVE_4DIGIT_RE.search(text):
            return self.leading_int(text)
        return None

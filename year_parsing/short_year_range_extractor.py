"""Extractor for ranges whose end year is abbreviated: '1757-58', '1675-7'."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import ONE_DIGIT_TAIL_RE, TWO_DIGIT_TAIL_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class ShortYearRangeExtractor(YearExtractorStrategy):
    """Parses yyyy-yy or yyyy-y ranges, inferring the end year.

    Behavior:
    - Borrows every digit of the first year except the last tail_digits
      (1757-58 -> 1758, 1675-7 -> 1677)
    - Returns nothing if the rebuilt pair is not a valid range, leaving
      strings like 1975-05 to the calendar-date reading further down
    - Latest only; the first year is picked up by the four-digit rule
    """

    def __init__(self, tail_digits: int = 2):
        if tail_digits not in (1, 2):
            raise ValueError(f"tail_digits must be 1 or 2, got {tail_digits}")
        self.tail_digits = tail_digits

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        if bound != YearBound.LATEST:
            return None

        pattern = TWO_DIGIT_TAIL_RE if self.tail_digits == 2 else ONE_DIGIT_TAIL_RE
        m = pattern.search(text)
        if not m:
            return None

        first = m.group("first")
        last = int(first[: -self.tail_digits] + m.group("last"))
        if not context.is_valid_range(int(first), last):
            return None
        return last

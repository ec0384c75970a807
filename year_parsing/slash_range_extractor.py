"""Extractor for slash-delimited ranges like '1698/1715'."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import SLASH_RANGE_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class SlashRangeExtractor(YearExtractorStrategy):
    """Parses two four-digit years separated by a slash.

    Handles ISO-like intervals as well:
    2023-01-02T19:20:30+01:00/2025-01-01 -> 2023 / 2025
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        m = SLASH_RANGE_RE.search(text)
        if not m:
            return None
        return int(m.group("first") if bound == YearBound.EARLIEST else m.group("last"))

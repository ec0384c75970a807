"""Extractor for four-digit year ranges."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import YEAR_RANGE_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class YearRangeExtractor(YearExtractorStrategy):
    """Parses year ranges with a four-digit end year.

    Matches patterns like:
    - 1496-1499, 1496 - 1499, 1750?-1867
    - ca. 1400-1525
    - 1980s - 1990s
    - 1789 to 1791
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        m = YEAR_RANGE_RE.search(text)
        if not m:
            return None

        if bound == YearBound.EARLIEST:
            return int(m.group("first"))

        last = m.group("last")
        last_year = self.leading_int(last)
        if not context.is_valid_year(last_year):
            # Hand back the out-of-bounds year so the range check can complain
            return last_year

        # Lazy import to avoid circular dependency
        from year_parsing.orchestrators.latest_year_orchestrator import LatestYearOrchestrator

        # "1990s" -> 1999
        return LatestYearOrchestrator(context).resolve(last)

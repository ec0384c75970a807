"""Extractor for alternatives such as '1835 or 1836' and '17-- or 18--'."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import OR_YEARS_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class OrYearExtractor(YearExtractorStrategy):
    """Parses "X or Y" where each side is a year or century token.

    Latest only: the second token is resolved on its own as a latest year, so
    "15-- or 16--?" gives 1699. The earliest year comes from the general
    four-digit and century rules.
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        if bound != YearBound.LATEST:
            return None
        m = OR_YEARS_RE.search(text)
        if not m:
            return None

        # Lazy import to avoid circular dependency
        from year_parsing.orchestrators.latest_year_orchestrator import LatestYearOrchestrator

        return LatestYearOrchestrator(context).resolve(m.group("last"))

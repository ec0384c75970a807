"""Extractors for decades: wildcard tokens (199u, 167-, 186?, 195x) and 1950s."""

from year_parsing.context import ResolveContext
from year_parsing.patterns import DECADE_NOTATION_RE, DECADE_WILDCARD_RE
from year_parsing.resolution import YearBound
from year_parsing.strategy import YearExtractorStrategy


class DecadeWildcardExtractor(YearExtractorStrategy):
    """Parses a 4-character decade token whose last digit is a wildcard.

    The wildcard (u, -, ? or x) becomes 0 for the earliest year and 9 for
    the latest: 199u -> 1990 / 1999, [171-?] -> 1710 / 1719.
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        m = DECADE_WILDCARD_RE.search(text)
        if not m:
            return None
        digit = "0" if bound == YearBound.EARLIEST else "9"
        return int(m.group("decade") + digit)


class DecadeNotationExtractor(YearExtractorStrategy):
    """Parses decade notation such as 1950s or 1950's.

    Only the latest year needs this rule (1950s -> 1959); the earliest year
    falls out of the plain four-digit scan.
    """

    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        if bound != YearBound.LATEST:
            return None
        m = DECADE_NOTATION_RE.search(text)
        if not m:
            return None
        return int(m.group("decade") + "9")

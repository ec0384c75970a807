"""Abstract base class for year extraction strategies."""

from abc import ABC, abstractmethod

from year_parsing.context import ResolveContext
from year_parsing.patterns import LEADING_INT_RE
from year_parsing.resolution import YearBound


class YearExtractorStrategy(ABC):
    """Interface for year extraction strategies.

    A strategy recognizes one family of patterns and turns a match into a
    signed year for the requested bound. Strategies that only make sense for
    one bound return None for the other.
    """

    @staticmethod
    def leading_int(text: str) -> int:
        """Integer value of the leading numeral in text, 0 if there is none.

        "1990s" -> 1990, "-18" -> -18, "0700" -> 700.
        """
        m = LEADING_INT_RE.match(text)
        if not m:
            return 0
        return int(m.group("int"))

    @abstractmethod
    def extract(self, text: str, bound: YearBound, context: ResolveContext) -> int | None:
        """Extract a year from text.

        Args:
            text: The raw date string
            bound: Whether the earliest or latest year is wanted
            context: Clock and configuration for validity checks

        Returns:
            A signed year if the pattern matched, None otherwise
        """
        pass

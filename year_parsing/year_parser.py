"""Main year parser: resolution, validity and range materialization."""

from __future__ import annotations

import logging
from typing import List

from year_parsing.context import ResolveContext
from year_parsing.errors import YearCoercionError, YearRangeError
from year_parsing.orchestrators.resolve_orchestrator_factory import ResolveOrchestratorFactory
from year_parsing.patterns import NUMERAL_RE
from year_parsing.resolution import YearBound
from year_parsing.year_span import YearSpan


logger = logging.getLogger(__name__)


class YearParser:
    """Extracts years from free-form archival date strings.

    Two failure modes are kept apart. A string with no recognizable year
    gives None. A string whose years contradict each other (1975 - 1905)
    raises YearRangeError carrying the original text, so a pipeline can flag
    the record instead of silently dropping it.
    """

    def __init__(self, context: ResolveContext | None = None):
        self.context = context or ResolveContext()
        self._earliest = ResolveOrchestratorFactory.get_orchestrator(YearBound.EARLIEST, self.context)
        self._latest = ResolveOrchestratorFactory.get_orchestrator(YearBound.LATEST, self.context)

    def resolve_earliest(self, text: str | None) -> int | None:
        """Earliest year for text, e.g. 1700 for 17uu, or None."""
        return self._earliest.resolve(text)

    def resolve_latest(self, text: str | None) -> int | None:
        """Latest year for text, e.g. 1799 for 17uu, or None."""
        return self._latest.resolve(text)

    def is_valid_year(self, year: object) -> bool:
        return self.context.is_valid_year(year)

    def is_valid_range(self, first_year: int, last_year: int) -> bool:
        return self.context.is_valid_range(first_year, last_year)

    def parse_span(self, text: str | None) -> YearSpan:
        """Resolve both ends of text, keeping the rule behind each."""
        return YearSpan(
            text=text,
            earliest_resolution=self._earliest.resolve_with_rule(text),
            latest_resolution=self._latest.resolve_with_rule(text),
        )

    def parse_range(self, text: str | None) -> List[int] | None:
        """Every year from earliest to latest, inclusive.

        Args:
            text: The raw date string

        Returns:
            The ascending list of years, a single-element list if only one end
            resolved, or None if the string holds no year

        Raises:
            YearRangeError: If the years found do not form a valid range
        """
        return self.years_for_span(self.parse_span(text))

    def years_for_span(self, span: YearSpan) -> List[int] | None:
        """Every year covered by an already resolved span. See parse_range."""
        text = span.text
        first, last = span.earliest, span.latest

        if first is not None and last is None and span.rejected_latest is not None:
            if span.rejected_latest >= self.context.upper_bound:
                logger.warning(f"latest year {span.rejected_latest} is in the future for '{text}'")
                raise YearRangeError(
                    f"Unable to parse range from '{text}': latest year {span.rejected_latest} is in the future"
                )

        if first is None and last is None:
            return None
        if last is None:
            return [first]
        if first is None:
            return [last]

        if not self.is_valid_range(first, last):
            logger.warning(f"invalid range {first}..{last} for '{text}'")
            raise YearRangeError(f"Unable to parse range from '{text}'")

        return list(range(first, last + 1))

    @staticmethod
    def _coerce_year(value: int | str | None) -> int | None:
        if value is None:
            return None
        if isinstance(value, bool):
            raise YearCoercionError(f"expected a year, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and NUMERAL_RE.match(value):
            return int(value)
        raise YearCoercionError(f"expected a year numeral, got {value!r}")

    def materialize_range(self, first_year: int | str | None, last_year: int | str | None) -> List[int]:
        """Every year from first_year to last_year, inclusive.

        Numeral strings such as "1865" or "-50" are accepted. If only one side
        is given, that year alone is returned.

        Raises:
            YearCoercionError: If a value is not an int or numeral string
            YearRangeError: If the two years do not form a valid range
        """
        first = self._coerce_year(first_year)
        last = self._coerce_year(last_year)

        if first is None and last is None:
            return []
        if last is None:
            return [first]
        if first is None:
            return [last]

        if not self.is_valid_range(first, last):
            raise YearRangeError(f"unable to create year range array from {first_year!r}, {last_year!r}")

        return list(range(first, last + 1))

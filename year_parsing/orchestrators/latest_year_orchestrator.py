"""Orchestrator resolving the latest year a date string can mean."""

from __future__ import annotations

from year_parsing.factory import YearExtractors
from year_parsing.orchestrators.resolve_orchestrator import ResolveOrchestrator
from year_parsing.resolution import YearBound


class LatestYearOrchestrator(ResolveOrchestrator):
    """Resolves the latest year, e.g. 1799 for 17uu.

    The first general rule that produces a candidate decides the outcome: if
    that candidate is invalid nothing is returned, rather than letting a
    looser rule reread the string. For 1975-2050 the latest year is rejected
    instead of quietly becoming 1975.
    """

    bound = YearBound.LATEST
    lock_first_candidate = True

    def get_bc_extractor_steps(self) -> list[YearExtractors]:
        return [
            YearExtractors.BC_CENTURY_RANGE,
            YearExtractors.BC_BETWEEN,
            YearExtractors.BC_CENTURY,
            YearExtractors.BC_YEAR,
        ]

    def get_extractor_steps(self) -> list[YearExtractors]:
        return [
            YearExtractors.SLASH_RANGE,
            # longest string first, more or less
            YearExtractors.BETWEEN,
            YearExtractors.YEAR_RANGE,
            YearExtractors.TWO_DIGIT_TAIL,
            YearExtractors.ONE_DIGIT_TAIL,
            YearExtractors.CENTURY_RANGE_HYPHEN,
            YearExtractors.OR_YEARS,
            YearExtractors.NEGATIVE_YEAR_AFTER_HYPHEN,
            YearExtractors.NEGATIVE_LEADING_YEAR,
            YearExtractors.DECADE_NOTATION,
            YearExtractors.FOUR_DIGIT_YEAR,
            YearExtractors.TWO_DIGIT_CALENDAR_YEAR,
            YearExtractors.DECADE_WILDCARD,
            YearExtractors.CENTURY_RANGE,
            YearExtractors.CENTURY,
            YearExtractors.EARLY_NUMERIC,
        ]
